from __future__ import annotations

from pathlib import Path

from commitcheck.exceptions.base import CommitCheckError


class RunnerError(CommitCheckError):
    """Base exception for failures to launch an external command.

    A command that runs and exits non-zero is not an error; it is reported as
    an unsuccessful result. These exceptions cover the cases where the process
    could not be started at all.

    Attributes:
        message: Human-readable error message.
    """

    pass


class WorkingDirectoryError(RunnerError):
    """Working directory does not exist or is not accessible.

    Attributes:
        message: Human-readable error message.
        path: The path that was not found.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize the WorkingDirectoryError.

        Args:
            message: Human-readable error message.
            path: The path that was not found.
        """
        self.path = path
        super().__init__(message)


class CommandNotFoundError(RunnerError):
    """Executable not found in PATH.

    Attributes:
        message: Human-readable error message.
        executable: The command that was not found.
    """

    def __init__(self, message: str, executable: str | None = None) -> None:
        """Initialize the CommandNotFoundError.

        Args:
            message: Human-readable error message.
            executable: The command that was not found.
        """
        self.executable = executable
        super().__init__(message)


class CommandPermissionError(RunnerError):
    """Executable exists but may not be executed by the current user.

    Attributes:
        message: Human-readable error message.
        executable: The command that could not be executed.
    """

    def __init__(self, message: str, executable: str | None = None) -> None:
        self.executable = executable
        super().__init__(message)
