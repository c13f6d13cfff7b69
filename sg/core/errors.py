"""Process exit codes for `sg` commands.

The numeric values are part of the CLI contract (CI jobs branch on them)
and should remain stable:
- 0: Success
- 1: User error (unknown rule id, bad arguments)
- 2: Configuration error (invalid sg.toml, invalid guide data)
- 3: Check failed (self-consistency errors, stale rendered docs)
- 4: I/O error (guide source missing, output directory not writable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    CHECK_FAILED = 3
    IO_ERROR = 4

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
