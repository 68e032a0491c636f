"""CLI entry point for commitcheck.

Running ``commitcheck`` executes the full commit pipeline. The options only
affect logging and where configuration is read from; the checks themselves
are fixed.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click

from commitcheck import __version__
from commitcheck.cli.common import cli_error_handler
from commitcheck.cli.console import console, err_console
from commitcheck.cli.context import ExitCode
from commitcheck.config import CommitCheckConfig, load_config
from commitcheck.logging import configure_logging, get_logger
from commitcheck.pipeline import CheckPipeline, PipelineResult
from commitcheck.runners import CommandRunner

VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def resolve_log_level(config: CommitCheckConfig, verbose: int, quiet: bool) -> int:
    """Pick the log level. Priority: quiet > verbose > config."""
    if quiet:
        return logging.ERROR
    if verbose > 0:
        return logging.INFO if verbose == 1 else logging.DEBUG
    return VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)


def report(result: PipelineResult) -> None:
    """Print the final verdict of a pipeline run."""
    if result.success:
        console.print(f"✓ {result.message}")
    else:
        err_console.print(f"✗ {result.message}")


async def run_checks(config: CommitCheckConfig) -> PipelineResult:
    runner = CommandRunner(cwd=config.project_root, console=console)
    pipeline = CheckPipeline(runner, console=console)
    return await pipeline.run()


@click.command()
@click.version_option(version=__version__, prog_name="commitcheck")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file (overrides ./commitcheck.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase log verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only log errors.",
)
def cli(config_file: Path | None, verbose: int, quiet: bool) -> None:
    """Run format, lint, type check, test and build gates before a commit."""
    # Env-driven defaults until the config says otherwise
    configure_logging()

    with cli_error_handler():
        config = load_config(config_file)
        configure_logging(level=resolve_log_level(config, verbose, quiet))
        get_logger(__name__).debug(
            "config_loaded",
            project_root=str(config.project_root) if config.project_root else None,
        )

        result = asyncio.run(run_checks(config))
        report(result)

    raise SystemExit(ExitCode.SUCCESS if result.success else ExitCode.FAILURE)


if __name__ == "__main__":
    cli()
