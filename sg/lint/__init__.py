# SPDX-License-Identifier: MIT
"""Self-consistency checkers for the guide.

Each checker covers one concern:
- ReferenceChecker: rule ids used by documents exist; rules are documented
- NamingChecker: naming examples follow the conventions they illustrate
- StructureChecker: folder diagrams are well formed, without duplicate siblings
- SyncChecker: rendered Markdown on disk matches the current render
"""

from sg.lint.base import CheckResult, CheckStatus
from sg.lint.naming import NamingChecker
from sg.lint.references import ReferenceChecker
from sg.lint.structure import StructureChecker
from sg.lint.sync import SyncChecker

__all__ = [
    # Result types
    "CheckResult",
    "CheckStatus",
    # Checkers
    "NamingChecker",
    "ReferenceChecker",
    "StructureChecker",
    "SyncChecker",
]
