"""Tests for logging setup."""
import logging

import pytest

from core.logging import logger as logger_module
from core.logging.logger import ColoredFormatter, get_log_dir, get_logger, setup_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logger_module._VERBOSE = False


def test_log_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("BROWSER_SETTINGS_LOG_DIR", str(tmp_path / "custom"))
    assert get_log_dir() == tmp_path / "custom"


def test_setup_writes_rotating_file(monkeypatch, tmp_path, clean_root_logger):
    monkeypatch.setenv("BROWSER_SETTINGS_LOG_DIR", str(tmp_path))
    setup_logging(debug=False)

    get_logger("tests.logging").info("hello from test")
    for handler in clean_root_logger.handlers:
        handler.flush()

    log_file = tmp_path / "settings.log"
    assert log_file.exists()
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_verbose_implies_debug(monkeypatch, tmp_path, clean_root_logger):
    monkeypatch.setenv("BROWSER_SETTINGS_LOG_DIR", str(tmp_path))
    setup_logging(verbose=True)
    assert clean_root_logger.level == logging.DEBUG
    assert logger_module.is_verbose_logging() is True


def test_short_name_override():
    assert get_logger("core.settings.preference_store").name == "settings.store"
    assert get_logger("some.module").name == "some.module"


def test_colored_formatter_restores_levelname():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "[PREF] key changed", None, None)
    text = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "[PREF] key changed" in text
    assert "\033[" in text
    assert record.levelname == "WARNING"
