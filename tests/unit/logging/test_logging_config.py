"""Unit tests for logging configuration."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from kubeai_doctor.logging import config as logging_config
from kubeai_doctor.logging.config import (
    RETENTION_DAYS,
    _cleanup_old_logs,
    _setup_file_logging,
    configure_logging,
)


def _age(path: Path, days: int) -> None:
    old_time = (datetime.now() - timedelta(days=days)).timestamp()
    os.utime(path, (old_time, old_time))


@pytest.mark.unit
class TestCleanupOldLogs:
    """Tests for _cleanup_old_logs function."""

    def test_returns_early_when_log_dir_missing(self) -> None:
        assert not logging_config.LOG_DIR.exists()
        _cleanup_old_logs()

    def test_deletes_old_log_files(self) -> None:
        """Rotated files past retention are removed."""
        logging_config.LOG_DIR.mkdir(parents=True)
        log_file = logging_config.LOG_DIR / "kubeai-doctor.log.1"
        log_file.write_text("old log data")
        _age(log_file, RETENTION_DAYS + 5)

        _cleanup_old_logs()

        assert not log_file.exists()

    def test_keeps_recent_and_foreign_files(self) -> None:
        logging_config.LOG_DIR.mkdir(parents=True)
        recent = logging_config.LOG_DIR / "kubeai-doctor.log"
        recent.write_text("recent log data")
        foreign = logging_config.LOG_DIR / "notes.txt"
        foreign.write_text("keep me")
        _age(foreign, RETENTION_DAYS + 5)

        _cleanup_old_logs()

        assert recent.exists()
        assert foreign.exists()

    def test_ignores_os_errors(self) -> None:
        logging_config.LOG_DIR.mkdir(parents=True)
        log_file = logging_config.LOG_DIR / "kubeai-doctor.log.2"
        log_file.write_text("data")
        _age(log_file, RETENTION_DAYS + 5)

        with patch.object(Path, "unlink", side_effect=OSError("permission denied")):
            _cleanup_old_logs()

        assert log_file.exists()


@pytest.mark.unit
class TestSetupFileLogging:
    """Tests for _setup_file_logging function."""

    def test_creates_log_directory_and_handler(self) -> None:
        handler = _setup_file_logging()

        assert isinstance(handler, RotatingFileHandler)
        assert handler.level == logging.DEBUG
        assert logging_config.LOG_DIR.exists()
        handler.close()

    def test_unwritable_directory(self) -> None:
        with patch.object(Path, "mkdir", side_effect=OSError("read-only file system")):
            assert _setup_file_logging() is None


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging function."""

    @pytest.mark.parametrize(
        ("kwargs", "level"),
        [
            ({}, logging.WARNING),
            ({"verbose": True}, logging.INFO),
            ({"debug": True}, logging.DEBUG),
            ({"verbose": True, "debug": True}, logging.DEBUG),
        ],
    )
    def test_console_level(self, kwargs: dict[str, bool], level: int) -> None:
        configure_logging(log_to_file=False, **kwargs)

        (console_handler,) = logging_config._installed_handlers
        assert console_handler.level == level

    def test_console_writes_to_stderr(self) -> None:
        configure_logging(log_to_file=False)

        handler = logging_config._installed_handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_file_handler_is_installed(self) -> None:
        configure_logging()

        handlers = logging_config._installed_handlers
        assert len(handlers) == 2
        assert isinstance(handlers[1], RotatingFileHandler)
        assert all(h in logging.getLogger().handlers for h in handlers)

    def test_file_logging_failure_keeps_console(self) -> None:
        with patch("kubeai_doctor.logging.config._setup_file_logging", return_value=None):
            configure_logging()

        assert len(logging_config._installed_handlers) == 1

    def test_reconfiguration_replaces_handlers(self) -> None:
        configure_logging(log_to_file=False)
        first = logging_config._installed_handlers[0]

        configure_logging(log_to_file=False, json_output=True)

        root = logging.getLogger()
        assert first not in root.handlers
        assert len(logging_config._installed_handlers) == 1
        assert logging_config._installed_handlers[0] in root.handlers

    def test_events_reach_log_file(self) -> None:
        configure_logging()

        structlog.get_logger("kubeai_doctor.tests").info("check_completed", kind="nodes")
        for handler in logging_config._installed_handlers:
            handler.flush()

        assert '"event": "check_completed"' in logging_config.LOG_FILE.read_text()

