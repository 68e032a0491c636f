from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from click.testing import CliRunner

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.runners",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for the test environment.

    Logging goes to stderr at WARNING level so it never mixes with the
    pipeline's stdout output.
    """
    from commitcheck.logging import clear_context, configure_logging

    configure_logging(level=logging.WARNING)
    yield
    clear_context()


@pytest.fixture
def temp_dir(tmp_path: Path) -> Iterator[Path]:
    """Temporary directory that also restores the current working directory."""
    original_cwd = os.getcwd()
    yield tmp_path
    os.chdir(original_cwd)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all COMMITCHECK_ environment variables for clean testing."""
    for key in list(os.environ.keys()):
        if key.startswith("COMMITCHECK_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner.

    Example:
        >>> def test_version(cli_runner):
        ...     from commitcheck.main import cli
        ...     result = cli_runner.invoke(cli, ["--version"])
        ...     assert result.exit_code == 0
    """
    from click.testing import CliRunner

    return CliRunner()
