from __future__ import annotations

import contextlib
from collections.abc import Generator

from commitcheck.cli.console import err_console
from commitcheck.cli.context import ExitCode
from commitcheck.logging import get_logger

__all__ = ["cli_error_handler", "UNEXPECTED_ERROR_PREFIX"]

UNEXPECTED_ERROR_PREFIX = "An error occurred"


@contextlib.contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Context manager for top-level CLI error handling.

    - KeyboardInterrupt: Exit with code 130
    - Anything else: Log it, print ``An error occurred: <detail>``, exit 1

    Check failures are not exceptions and never reach this handler.

    Example:
        >>> with cli_error_handler():
        >>>     result = run_pipeline()
    """
    logger = get_logger(__name__)

    try:
        yield
    except KeyboardInterrupt:
        err_console.print("\n\nInterrupted by user.")
        raise SystemExit(ExitCode.INTERRUPTED) from None
    except Exception as e:
        logger.debug("unexpected_error", exc_info=True)
        err_console.print(f"{UNEXPECTED_ERROR_PREFIX}: {e!s}")
        raise SystemExit(ExitCode.FAILURE) from e
