"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from homestaff.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("homestaff")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("homestaff").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("homestaff").level == logging.WARNING

    def test_noisy_libraries_stay_quiet(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("sqlalchemy").level == logging.WARNING
        assert logging.getLogger("mcp").level == logging.WARNING

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("homestaff.test")
        log.info("task.created", task_id="task-9")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "task.created"
        assert parsed["task_id"] == "task-9"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "homestaff.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("homestaff.infrastructure.store").debug("Created task %s", "task-9")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Created task task-9"
        assert parsed["level"] == "debug"

    def test_credentials_are_redacted(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("homestaff.test").info("auth.login", username="owner", token="abc")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["username"] == "owner"
        assert parsed["token"] == "***"

    def test_quiet_mode_hides_info(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("homestaff.test").info("task.created")
        assert capfd.readouterr().err == ""
