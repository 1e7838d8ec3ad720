"""
Centralized logging configuration for the settings application.

Uses rotating file handler with logs stored in logs/ directory.
Includes colored console output for debug mode.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_VERBOSE: bool = False
# Base directory for logs. Defaults to the project root; the
# BROWSER_SETTINGS_LOG_DIR environment variable overrides it.
_BASE_DIR: Path = Path(__file__).parent.parent.parent

LOG_FORMAT = '%(asctime)s - %(name)-30s - %(levelname)-8s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',       # Cyan
        'INFO': '\033[32m',        # Green
        'WARNING': '\033[33m',     # Yellow
        'ERROR': '\033[31m',       # Red
        'CRITICAL': '\033[35m',    # Magenta
    }
    PREF_COLOR = '\033[38;5;208m'  # Orange for preference writes
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record):
        original_levelname = record.levelname

        if '[PREF]' in str(record.msg):
            color = self.PREF_COLOR
        else:
            color = self.COLORS.get(record.levelname)

        if color is None:
            return super().format(record)

        record.levelname = f"{self.BOLD}{color}{record.levelname}{self.RESET}"
        try:
            message = super().format(record)
        finally:
            record.levelname = original_levelname
        return f"{color}{message}{self.RESET}"


def get_log_dir() -> Path:
    """Return the directory used for log files."""
    override = os.getenv("BROWSER_SETTINGS_LOG_DIR")
    if override:
        return Path(override)
    return _BASE_DIR / "logs"


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """
    Configure application logging with file rotation.

    Args:
        debug: If True, set log level to DEBUG and enable console output.
        verbose: When True, preference writes log their old and new
            values. Verbose mode also implies debug-level logging.
    """
    global _VERBOSE

    debug_enabled = debug or verbose

    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "settings.log"

    level = logging.DEBUG if debug_enabled else logging.INFO

    # File handler with rotation (1MB max, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    file_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    if debug_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        if sys.stdout.isatty():
            console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        else:
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    _VERBOSE = bool(verbose)

    root_logger.info("=" * 60)
    root_logger.info(
        "Settings logging initialized (debug=%s, verbose=%s)",
        debug_enabled,
        _VERBOSE,
    )
    root_logger.info("=" * 60)


_SHORT_NAME_OVERRIDES = {
    "core.settings.preference_store": "settings.store",
    "ui.settings_list.model": "settings_list.model",
    "ui.settings_list.view": "settings_list.view",
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with optional short-name overrides for noisy modules."""
    actual = _SHORT_NAME_OVERRIDES.get(name, name)
    return logging.getLogger(actual)


def is_verbose_logging() -> bool:
    """Return True when verbose debug logging is enabled globally."""

    return _VERBOSE
