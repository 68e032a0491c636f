"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from pathlib import Path

from commitcheck.exceptions import (
    CommandNotFoundError,
    CommandPermissionError,
    CommitCheckError,
    ConfigError,
    RunnerError,
    WorkingDirectoryError,
)


def test_base_message() -> None:
    error = CommitCheckError("Something went wrong")

    assert error.message == "Something went wrong"
    assert str(error) == "Something went wrong"


def test_hierarchy() -> None:
    assert issubclass(ConfigError, CommitCheckError)
    assert issubclass(RunnerError, CommitCheckError)
    for cls in (WorkingDirectoryError, CommandNotFoundError, CommandPermissionError):
        assert issubclass(cls, RunnerError)


def test_config_error_attributes() -> None:
    error = ConfigError("Invalid configuration", field="verbosity", value="loud")

    assert error.field == "verbosity"
    assert error.value == "loud"


def test_runner_error_attributes() -> None:
    assert WorkingDirectoryError("missing", path=Path("/x")).path == Path("/x")
    assert CommandNotFoundError("missing", executable="nix").executable == "nix"
    assert CommandPermissionError("denied", executable="git").executable == "git"
