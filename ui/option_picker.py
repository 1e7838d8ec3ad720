"""Single-choice picker over a RepresentableOption enum.

The picker lists every variant it is given, checks the one matching the
current value and reports each user choice through ``option_changed``.
Leaving the screen is up to the navigation host; the picker never pops
itself.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from core.logging.logger import get_logger
from core.settings.options import RepresentableOption

logger = get_logger(__name__)

O = TypeVar("O", bound=RepresentableOption)


class OptionSelectionView(QWidget):
    """
    Picker screen for one option type.

    Args:
        options: Variants to list, in display order
        selected_option: Current variant, or None to check nothing
        option_changed: Called with (previous selection, chosen variant)
            once per user choice
        parent: Parent widget
    """

    def __init__(self, options: Sequence[O],
                 selected_option: Optional[O],
                 option_changed: Callable[[Optional[O], O], None],
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("optionSelectionView")
        self._options: List[O] = list(options)
        self._selected: Optional[O] = selected_option if selected_option in self._options else None
        self._option_changed = option_changed

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 12, 0, 12)
        layout.setSpacing(4)

        self.header_label = QLabel()
        self.header_label.setObjectName("sectionHeader")
        self.header_label.setContentsMargins(16, 12, 16, 2)
        self.header_label.hide()

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("optionList")
        self.list_widget.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        for option in self._options:
            item = QListWidgetItem(option.display_string)
            self.list_widget.addItem(item)
        self.list_widget.itemClicked.connect(self._on_item_clicked)

        self.footer_label = QLabel()
        self.footer_label.setObjectName("sectionFooter")
        self.footer_label.setWordWrap(True)
        self.footer_label.setContentsMargins(16, 2, 16, 8)
        self.footer_label.hide()

        layout.addWidget(self.header_label)
        layout.addWidget(self.list_widget, 1)
        layout.addWidget(self.footer_label)

        self._refresh_checks()

    @property
    def options(self) -> List[O]:
        return list(self._options)

    @property
    def selected_option(self) -> Optional[O]:
        return self._selected

    @property
    def header_text(self) -> str:
        return self.header_label.text()

    @header_text.setter
    def header_text(self, text: Optional[str]) -> None:
        self.header_label.setText(text or "")
        self.header_label.setVisible(bool(text))

    @property
    def footer_text(self) -> str:
        return self.footer_label.text()

    @footer_text.setter
    def footer_text(self, text: Optional[str]) -> None:
        self.footer_label.setText(text or "")
        self.footer_label.setVisible(bool(text))

    def select(self, option: O) -> None:
        """Choose ``option`` as if the user had tapped it."""
        if option not in self._options:
            raise ValueError(f"{option!r} is not offered by this picker")
        previous = self._selected
        self._selected = option
        self._refresh_checks()
        logger.debug("Option selected: %s -> %s", previous, option)
        self._option_changed(previous, option)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.select(self._options[self.list_widget.row(item)])

    def _refresh_checks(self) -> None:
        for index, option in enumerate(self._options):
            item = self.list_widget.item(index)
            state = Qt.CheckState.Checked if option is self._selected else Qt.CheckState.Unchecked
            item.setCheckState(state)
            # Check marks are display-only; the item itself is not user-checkable.
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsUserCheckable)
