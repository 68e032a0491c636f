"""Tests for the commitcheck.logging module."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from commitcheck.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    def test_custom_level(self) -> None:
        configure_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMITCHECK_LOG_LEVEL", "ERROR")
        configure_logging()

        assert logging.getLogger().level == logging.ERROR

    def test_invalid_env_level_defaults_to_warning(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("COMMITCHECK_LOG_LEVEL", "CHATTY")
        configure_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_single_handler_after_reconfigure(self) -> None:
        configure_logging()
        configure_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_logs_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level=logging.INFO)
        get_logger("tests").info("step_finished", step="lint")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "step_finished" in captured.err

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(force_json=True, level=logging.INFO)
        get_logger("tests").info("step_finished", step="lint")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "step_finished"
        assert event["step"] == "lint"
        assert event["level"] == "info"


class TestContext:
    def test_bind_and_clear(self) -> None:
        bind_context(step="build")
        assert structlog.contextvars.get_contextvars() == {"step": "build"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_bound_context_in_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(force_json=True, level=logging.INFO)
        bind_context(step="test")
        try:
            get_logger("tests").info("command_finished")
        finally:
            clear_context()

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["step"] == "test"
