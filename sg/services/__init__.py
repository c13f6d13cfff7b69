# SPDX-License-Identifier: MIT
"""Application services for the sg CLI.

Services coordinate the domain packages (rules/, guide/, render/, lint/)
for the commands in cli/.
"""

from sg.services.check import CheckReport, CheckService
from sg.services.guide import GuideService, LoadedGuide, LoadError
from sg.services.render import RenderError, RenderOutcome, RenderService

__all__ = [
    "CheckReport",
    "CheckService",
    "GuideService",
    "LoadError",
    "LoadedGuide",
    "RenderError",
    "RenderOutcome",
    "RenderService",
]
