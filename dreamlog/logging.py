# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Logging infrastructure for Dreamlog.

Daily log files with automatic cleanup.
Enable via ~/.dreamlog/config.json: {"logging": {"debug": true}}

Log files are created at ~/.dreamlog/logs/dreamlog_<date>.log
Every analysis run appends to the same daily file.
"""

import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from dreamlog.core.config import get_config

# Run ID - generated once per process (for correlating log entries)
_run_id: Optional[str] = None
_configured: bool = False


def get_run_id() -> str:
    """Get or generate the current run ID."""
    global _run_id
    if _run_id is None:
        _run_id = uuid.uuid4().hex[:8]
    return _run_id


def get_log_dir() -> Path:
    """Get the log directory path."""
    return Path.home() / ".dreamlog" / "logs"


def get_daily_log_path() -> Path:
    """Get the log file path for today."""
    today = datetime.now().strftime("%Y-%m-%d")
    return get_log_dir() / f"dreamlog_{today}.log"


def cleanup_old_logs(retention_count: int) -> int:
    """
    Remove old log files, keeping only the most recent N days.

    Args:
        retention_count: Number of daily log files to keep

    Returns:
        Number of files deleted
    """
    log_dir = get_log_dir()
    if not log_dir.exists():
        return 0

    # Newest first
    log_files = sorted(
        log_dir.glob("dreamlog_*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    deleted = 0
    for old_file in log_files[retention_count:]:
        try:
            old_file.unlink()
            deleted += 1
        except OSError:
            pass  # Ignore deletion errors

    return deleted


def configure_logging() -> None:
    """
    Configure loguru based on config settings.

    If debug is disabled, logging goes nowhere (null sink).
    If debug is enabled, logs append to daily file.
    """
    global _configured
    if _configured:
        return

    config = get_config()

    # Remove default stderr handler
    logger.remove()

    if config.logging.debug:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        cleanup_old_logs(config.logging.log_retention_count)

        run_id = get_run_id()

        log_path = get_daily_log_path()
        logger.add(
            log_path,
            format="{time:HH:mm:ss} | {level: <7} | [" + run_id + "] {message}",
            level="DEBUG",
            rotation=None,  # One file per day
            retention=None,  # Handled by cleanup_old_logs
        )

        logger.add(
            sys.stderr,
            format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | {message}",
            level="INFO",
            colorize=True,
        )

        logger.info("Dreamlog process started")
        logger.debug(f"Log file: {log_path}")

    _configured = True


def reset_logging() -> None:
    """Forget the current configuration so the next get_logger() reconfigures."""
    global _configured
    _configured = False


def get_logger(name: str = "dreamlog"):
    """
    Get a configured logger instance.

    Automatically configures logging on first call.

    Args:
        name: Logger name (for filtering)

    Returns:
        Configured loguru logger
    """
    configure_logging()
    return logger.bind(name=name)


def log_analysis_start(journal_path: Path) -> None:
    """Log that a journal analysis has started."""
    log = get_logger("analysis")
    log.info(f"Analyzing journal {journal_path}")


def log_analysis_end(**results) -> None:
    """Log that a journal analysis has completed."""
    log = get_logger("analysis")
    log.info("Analysis completed")
    if results:
        log.debug(f"  → {results}")


def log_error(context: str, error: Exception) -> None:
    """Log an error with context."""
    log = get_logger("errors")
    log.error(f"{context}: {type(error).__name__}: {error}")


def log_warning(message: str) -> None:
    """Log a warning."""
    log = get_logger("warnings")
    log.warning(message)
