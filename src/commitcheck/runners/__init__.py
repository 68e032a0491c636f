"""Subprocess execution for commitcheck."""

from __future__ import annotations

from commitcheck.runners.command import CommandRunner
from commitcheck.runners.models import CommandSpec, OutputMode

__all__ = [
    "CommandRunner",
    "CommandSpec",
    "OutputMode",
]
