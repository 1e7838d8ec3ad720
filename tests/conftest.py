"""
Shared pytest fixtures for settings tests.
"""
import os
import sys

# Headless Qt for CI and local runs without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope='session')
def qt_app():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - causes issues with pytest


@pytest.fixture
def store(qt_app, tmp_path):
    """PreferenceStore backed by a throwaway INI file."""
    from core.settings.preference_store import PreferenceStore
    manager = PreferenceStore(path=tmp_path / "prefs.ini")
    yield manager
    manager.clear()


@pytest.fixture
def navigator(qtbot):
    from ui.navigation import NavigationStack
    nav = NavigationStack()
    qtbot.addWidget(nav)
    return nav


class RecordingDelegate:
    """SettingsDelegate that records every call."""

    def __init__(self):
        self.opened_urls = []
        self.finished = []

    def settings_open_url_in_new_tab(self, url):
        self.opened_urls.append(url)

    def settings_did_finish(self, settings):
        self.finished.append(settings)


class RecordingPresenter:
    """ActionPresenter that records sheets instead of showing them."""

    def __init__(self):
        self.sheets = []

    def present_action_sheet(self, parent, title, actions, cancel_title):
        self.sheets.append((title, list(actions), cancel_title))


@pytest.fixture
def delegate():
    return RecordingDelegate()


@pytest.fixture
def presenter():
    return RecordingPresenter()
