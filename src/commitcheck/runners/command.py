"""Command runner for sequential subprocess execution.

This module provides the CommandRunner class, which runs one external
command at a time either visibly (output streamed live to the terminal) or
silently (output captured and discarded), and reports whether it exited
successfully.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import TYPE_CHECKING

from commitcheck.cli.console import plain_console
from commitcheck.exceptions import (
    CommandNotFoundError,
    CommandPermissionError,
    WorkingDirectoryError,
)
from commitcheck.logging import get_logger
from commitcheck.runners.models import CommandSpec, OutputMode

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["CommandRunner"]

logger = get_logger(__name__)

SUCCESS_BANNER = "✓ Command succeeded"
FAILURE_BANNER = "✗ Command failed"


class CommandRunner:
    """Execute external commands and report success.

    Provides async command execution with:
    - Live passthrough of stdout/stderr (OutputMode.STREAM)
    - Silent execution with captured output (OutputMode.CAPTURE)
    - Working directory validation
    - Duration measurement for debug logging

    There is no timeout and no retry: a command runs until it exits.

    Attributes:
        cwd: Working directory for command execution.

    Example:
        ```python
        runner = CommandRunner(cwd=Path("/project"))
        if await runner.run(CommandSpec("nix", ("run", ".#lint"))):
            print("lint passed")
        ```
    """

    def __init__(
        self,
        cwd: Path | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the CommandRunner.

        Args:
            cwd: Working directory for commands. If None, uses current directory.
            console: Console for the banner lines. Defaults to stdout.
        """
        self._cwd = cwd
        self._console = console or plain_console()

    @property
    def cwd(self) -> Path | None:
        """Working directory for command execution."""
        return self._cwd

    def _validate_cwd(self) -> None:
        """Validate working directory exists.

        Raises:
            WorkingDirectoryError: If directory does not exist.
        """
        if self._cwd is not None and not self._cwd.is_dir():
            raise WorkingDirectoryError(
                f"Working directory does not exist: {self._cwd}",
                path=self._cwd,
            )

    async def run(
        self,
        spec: CommandSpec,
        mode: OutputMode = OutputMode.STREAM,
    ) -> bool:
        """Execute a command and wait for it to exit.

        In STREAM mode the command line is announced first, the process
        writes straight to the inherited stdout/stderr, and a result line
        followed by a blank line is printed afterwards. In CAPTURE mode
        nothing is printed.

        Args:
            spec: The command to run.
            mode: Whether to stream or capture the output.

        Returns:
            True if the process exited with status 0, False otherwise.

        Raises:
            WorkingDirectoryError: If the working directory does not exist.
            CommandNotFoundError: If the executable cannot be found.
            CommandPermissionError: If the executable cannot be executed.
        """
        self._validate_cwd()

        streaming = mode is OutputMode.STREAM
        if streaming:
            self._console.print(f"Running: {spec}")

        returncode, duration_ms = await self._execute(spec, streaming)
        success = returncode == 0

        logger.debug(
            "command_finished",
            command=str(spec),
            mode=mode.value,
            returncode=returncode,
            duration_ms=duration_ms,
        )

        if streaming:
            self._console.print(SUCCESS_BANNER if success else FAILURE_BANNER)
            self._console.print()

        return success

    async def run_silent(self, spec: CommandSpec) -> bool:
        """Execute a command with its output captured and discarded.

        Args:
            spec: The command to run.

        Returns:
            True if the process exited with status 0, False otherwise.
        """
        return await self.run(spec, mode=OutputMode.CAPTURE)

    async def _execute(self, spec: CommandSpec, streaming: bool) -> tuple[int, int]:
        """Spawn the process and wait for it.

        Returns:
            Tuple of (returncode, duration_ms).
        """
        # None inherits the parent's stream, PIPE captures it
        stream = None if streaming else asyncio.subprocess.PIPE
        start_time = time.monotonic()

        try:
            process = await asyncio.create_subprocess_exec(
                *spec.argv,
                stdout=stream,
                stderr=stream,
                cwd=self._cwd,
            )
        except FileNotFoundError as e:
            raise CommandNotFoundError(
                f"Command not found: {spec.executable}",
                executable=spec.executable,
            ) from e
        except PermissionError as e:
            raise CommandPermissionError(
                f"Permission denied: {spec.executable}",
                executable=spec.executable,
            ) from e

        if streaming:
            await process.wait()
        else:
            await process.communicate()

        duration_ms = int((time.monotonic() - start_time) * 1000)
        returncode = process.returncode if process.returncode is not None else -1
        return returncode, duration_ms
