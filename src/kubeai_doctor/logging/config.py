"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

# Log file configuration
LOG_DIR = Path.home() / ".local" / "state" / "kubeai-doctor"
LOG_FILE = LOG_DIR / "kubeai-doctor.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
RETENTION_DAYS = 30

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


def _cleanup_old_logs() -> None:
    """Delete log files older than RETENTION_DAYS."""
    if not LOG_DIR.exists():
        return
    cutoff = datetime.now() - timedelta(days=RETENTION_DAYS)
    for log_file in LOG_DIR.glob("kubeai-doctor.log*"):
        try:
            if datetime.fromtimestamp(log_file.stat().st_mtime) < cutoff:
                log_file.unlink()
        except OSError:
            pass  # Ignore errors during cleanup


def _setup_file_logging() -> logging.Handler | None:
    """Set up rotating JSON file handler.

    Returns:
        The handler, or None if the log directory is not writable.
    """
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        _cleanup_old_logs()
        file_handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
        )
    except OSError:
        return None

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    return file_handler


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    json_output: bool = False,
    log_to_file: bool = True,
) -> None:
    """Configure structured logging for the application.

    Console logs go to stderr so that stdout carries only check output.
    File logs are stored at ~/.local/state/kubeai-doctor/kubeai-doctor.log
    with rotation (10MB max, 5 backups) and 30 day retention.

    Args:
        verbose: Enable verbose (INFO level) output.
        debug: Enable debug mode (DEBUG level).
        json_output: Render console logs as JSON.
        log_to_file: Also write DEBUG-level JSON logs to the log file.
    """
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if log_to_file else log_level
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    if json_output:
        console_renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)  # Let handlers filter
    _installed_handlers.append(console_handler)
    if log_to_file and (file_handler := _setup_file_logging()) is not None:
        _installed_handlers.append(file_handler)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)
