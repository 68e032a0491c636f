"""Command-line interface helpers for commitcheck."""

from __future__ import annotations

from commitcheck.cli.common import cli_error_handler
from commitcheck.cli.console import console, err_console
from commitcheck.cli.context import ExitCode

__all__ = [
    "ExitCode",
    "cli_error_handler",
    "console",
    "err_console",
]
