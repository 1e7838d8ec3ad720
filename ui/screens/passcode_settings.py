"""Passcode settings screen."""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget

from core.device import BiometryType
from core.settings.preference_store import PreferenceStore
from core.settings.preferences import Security
from ui import strings
from ui.settings_list import Section, SettingsListModel, SettingsListView, bool_row


def passcode_title(biometry: BiometryType) -> str:
    """Label for passcode settings, naming the biometry the device offers."""
    if biometry is BiometryType.FACE_ID:
        return strings.FACE_ID_PASSCODE
    if biometry is BiometryType.TOUCH_ID:
        return strings.TOUCH_ID_PASSCODE
    return strings.PASSCODE


class PasscodeSettingsView(QWidget):
    def __init__(self, store: PreferenceStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.model = SettingsListModel(parent=self)
        self.model.sections = [
            Section(
                rows=[bool_row(strings.REQUIRE_PASSCODE, Security.REQUIRE_PASSCODE, store)],
                footer=strings.REQUIRE_PASSCODE_FOOTER,
            ),
        ]
        self.list_view = SettingsListView(self.model, self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.list_view)
