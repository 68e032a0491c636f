"""Exit codes for the commitcheck CLI."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes for the commitcheck CLI.

    - 0 when every check passed
    - 1 when a check failed or an unexpected error occurred
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130
