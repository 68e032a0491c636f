"""Shared Rich Console instances for commitcheck CLI output.

Markup, emoji codes, highlighting and wrapping are off so that messages (and
command lines such as ``nix run .#fmt``) are printed verbatim.
"""

from __future__ import annotations

from rich.console import Console

__all__ = ["console", "err_console", "plain_console"]


def plain_console(*, stderr: bool = False) -> Console:
    """Create a console that prints text exactly as given."""
    return Console(
        stderr=stderr,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


console = plain_console()
err_console = plain_console(stderr=True)
