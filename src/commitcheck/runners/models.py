"""Data models for the process runner.

All models use frozen dataclasses with slots for immutability.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "CommandSpec",
    "OutputMode",
]


class OutputMode(str, Enum):
    """How a command's output reaches the user.

    Values:
        STREAM: Inherit the caller's stdout/stderr and print the
            ``Running:`` banner and the result line.
        CAPTURE: Pipe and discard the output; print nothing.
    """

    STREAM = "stream"
    CAPTURE = "capture"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """An external command: the executable and its ordered arguments.

    Attributes:
        executable: Program name or path, resolved through PATH.
        arguments: Arguments passed verbatim (no shell expansion).

    Raises:
        ValueError: If executable is empty.

    Example:
        >>> spec = CommandSpec("git", ("diff", "--quiet"))
        >>> str(spec)
        'git diff --quiet'
    """

    executable: str
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.executable:
            raise ValueError("Executable cannot be empty")

    @property
    def argv(self) -> tuple[str, ...]:
        """Full argument vector, executable first."""
        return (self.executable, *self.arguments)

    def __str__(self) -> str:
        return " ".join(self.argv)
