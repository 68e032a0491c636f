"""commitcheck exception hierarchy.

All exceptions can be imported from this package:
    from commitcheck.exceptions import CommitCheckError, RunnerError
"""

from __future__ import annotations

# Base exception
from commitcheck.exceptions.base import CommitCheckError

# Configuration exceptions
from commitcheck.exceptions.config import ConfigError

# Process launch exceptions
from commitcheck.exceptions.runner import (
    CommandNotFoundError,
    CommandPermissionError,
    RunnerError,
    WorkingDirectoryError,
)

__all__ = [
    "CommitCheckError",
    "ConfigError",
    "RunnerError",
    "WorkingDirectoryError",
    "CommandNotFoundError",
    "CommandPermissionError",
]
