"""Clear Private Data screen.

Lists each kind of browsing data with a persisted toggle and a button
that hands the enabled kinds to the host for removal.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtWidgets import QVBoxLayout, QWidget

from core.logging.logger import get_logger
from core.settings.preference_store import PreferenceStore
from core.settings.preferences import Preference, Privacy
from ui import strings
from ui.settings_list import Accessory, Row, Section, SettingsListModel, SettingsListView, bool_row

logger = get_logger(__name__)

CLEARABLES: Sequence[Tuple[str, Preference]] = (
    (strings.BROWSING_HISTORY, Privacy.CLEAR_HISTORY),
    (strings.CACHE, Privacy.CLEAR_CACHE),
    (strings.COOKIES_AND_SITE_DATA, Privacy.CLEAR_COOKIES),
    (strings.SAVED_LOGINS, Privacy.CLEAR_PASSWORDS),
)


class ClearPrivateDataView(QWidget):
    """Screen with one toggle per clearable data kind."""

    def __init__(self, store: PreferenceStore,
                 clear_handler: Optional[Callable[[List[str]], None]] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._store = store
        self._clear_handler = clear_handler

        self.model = SettingsListModel(parent=self)
        self.model.sections = [
            Section(
                rows=[bool_row(title, pref, store) for title, pref in CLEARABLES],
                footer=strings.CLEAR_PRIVATE_DATA_FOOTER,
            ),
            Section(rows=[
                Row(text=strings.CLEAR_PRIVATE_DATA, accessory=Accessory.button(),
                    selection=self.clear_selected),
            ]),
        ]
        self.list_view = SettingsListView(self.model, self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.list_view)

    def selected_items(self) -> List[str]:
        return [title for title, pref in CLEARABLES if self._store.value(pref)]

    def clear_selected(self) -> None:
        items = self.selected_items()
        logger.info("Clearing private data: %s", ", ".join(items) or "<nothing>")
        if self._clear_handler is not None and items:
            self._clear_handler(items)
