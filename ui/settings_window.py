"""
Top-level settings window.

Hosts the navigation stack with the settings list as its root screen and
applies the dark theme.
"""
from typing import Callable, List, Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget

from core.device import DeviceInfo
from core.logging.logger import get_logger
from core.settings.preference_store import PreferenceStore
from ui import strings
from ui.external_actions import ActionPresenter, DesktopSettingsDelegate, SettingsDelegate
from ui.navigation import NavigationStack
from ui.settings_controller import SettingsController

logger = get_logger(__name__)

SETTINGS_STYLESHEET = """
/* Settings Window Styles */
QWidget#settingsWindow {
    background-color: #1E1E1E;
    color: #ffffff;
}

#navigationBar {
    background-color: #232323;
    border-bottom: 1px solid #3a3a3a;
}

#navigationTitle {
    color: #ffffff;
}

#navigationBackButton, #settingsDoneButton {
    background-color: transparent;
    color: #FB542B;
    border: none;
    font-weight: bold;
    padding: 6px 10px;
}

#sectionHeader {
    color: #9a9a9a;
    font-size: 11px;
}

#sectionFooter {
    color: #8a8a8a;
    font-size: 11px;
}

#sectionGroup {
    background-color: #2B2B2B;
    border-top: 1px solid #3a3a3a;
    border-bottom: 1px solid #3a3a3a;
}

#settingsRow {
    border-bottom: 1px solid #333333;
}

#settingsRow:hover {
    background-color: #333333;
}

#rowDetail, #rowDisclosure {
    color: #9a9a9a;
}

#rowButton {
    color: #FB542B;
    text-align: left;
    border: none;
}

QListWidget#optionList {
    background-color: #2B2B2B;
    color: #ffffff;
    border: none;
}

QListWidget#optionList::item {
    padding: 10px 12px;
    border-bottom: 1px solid #333333;
}
"""


class SettingsWindow(QWidget):
    """Navigation host with the settings controller pushed as root."""

    def __init__(self, store: PreferenceStore,
                 device: Optional[DeviceInfo] = None,
                 delegate: Optional[SettingsDelegate] = None,
                 action_presenter: Optional[ActionPresenter] = None,
                 clear_handler: Optional[Callable[[List[str]], None]] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("settingsWindow")
        self.setWindowTitle(strings.SETTINGS)
        self.setMinimumSize(420, 560)
        self.setStyleSheet(SETTINGS_STYLESHEET)

        self._store = store

        self.navigator = NavigationStack(self)
        self.controller = SettingsController(
            store,
            self.navigator,
            device=device,
            delegate=delegate or DesktopSettingsDelegate(on_finish=self.close),
            action_presenter=action_presenter,
            clear_handler=clear_handler,
        )
        self.controller.show_in(self.navigator)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.navigator)

        logger.info("Settings window created")

    def closeEvent(self, event):
        """Flush preferences to disk when the window closes."""
        self._store.save()
        super().closeEvent(event)
