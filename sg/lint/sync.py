# SPDX-License-Identifier: MIT
"""Rendered-output freshness check.

The Markdown committed to the repository must match what `sg render` would
write today.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from sg.lint.base import CheckResult

_HINT = "run: sg render"


class SyncChecker:
    def __init__(self, expected: Mapping[str, str], output_dir: Path) -> None:
        self._expected = expected
        self._output_dir = output_dir

    def check_all(self) -> list[CheckResult]:
        if not self._output_dir.is_dir():
            return [
                CheckResult.warning(
                    str(self._output_dir),
                    "output directory does not exist (guide not rendered yet)",
                    hint=_HINT,
                )
            ]
        return [self._check_file(name, text) for name, text in self._expected.items()]

    def _check_file(self, name: str, text: str) -> CheckResult:
        path = self._output_dir / name
        try:
            current = path.read_bytes()
        except FileNotFoundError:
            return CheckResult.error(name, f"missing: {path}", hint=_HINT)
        except OSError as e:
            return CheckResult.error(name, f"cannot read {path}: {e}")

        if current != text.encode("utf-8"):
            return CheckResult.error(name, "out of date", hint=_HINT)
        return CheckResult.success(name, "up to date")
