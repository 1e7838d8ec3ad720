"""Qt rendering of a SettingsListModel as a grouped list."""
from __future__ import annotations

from functools import partial
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QCheckBox, QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea,
    QSizePolicy, QVBoxLayout, QWidget,
)

from core.logging.logger import get_logger
from ui.settings_list.model import AccessoryKind, IndexPath, Row, SettingsListModel

logger = get_logger(__name__)

DISCLOSURE_GLYPH = "›"


class RowWidget(QFrame):
    """One rendered row. Updated in place; its accessory kind is fixed."""

    activated = Signal()
    toggled = Signal(bool)

    def __init__(self, row: Row, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("settingsRow")
        self.setMinimumHeight(44)
        self._row = row
        self._kind = row.accessory.kind

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 6, 16, 6)
        layout.setSpacing(8)

        self.switch: Optional[QCheckBox] = None
        self.button: Optional[QPushButton] = None
        self.text_label = QLabel()
        self.text_label.setObjectName("rowText")
        self.detail_label = QLabel()
        self.detail_label.setObjectName("rowDetail")
        self.detail_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        if self._kind is AccessoryKind.BUTTON:
            self.button = QPushButton()
            self.button.setObjectName("rowButton")
            self.button.setFlat(True)
            self.button.clicked.connect(self.activated)
            layout.addWidget(self.button, 1)
        else:
            layout.addWidget(self.text_label, 1)
            layout.addWidget(self.detail_label)

        if self._kind is AccessoryKind.SWITCH_TOGGLE:
            self.switch = QCheckBox()
            self.switch.setObjectName("rowSwitch")
            self.switch.toggled.connect(self.toggled)
            layout.addWidget(self.switch)
        elif self._kind is AccessoryKind.DISCLOSURE_INDICATOR:
            chevron = QLabel(DISCLOSURE_GLYPH)
            chevron.setObjectName("rowDisclosure")
            chevron.setFont(QFont(chevron.font().family(), 14))
            layout.addWidget(chevron)

        if row.is_selectable and self._kind is not AccessoryKind.BUTTON:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.set_row(row)

    @property
    def row(self) -> Row:
        return self._row

    def set_row(self, row: Row) -> None:
        if row.accessory.kind is not self._kind:
            raise ValueError("Row widgets cannot change accessory kind")
        self._row = row
        if self.button is not None:
            self.button.setText(row.text)
        self.text_label.setText(row.text)
        self.detail_label.setText(row.detail_text or "")
        self.detail_label.setVisible(bool(row.detail_text))
        if self.switch is not None:
            self.switch.blockSignals(True)
            self.switch.setChecked(row.accessory.value)
            self.switch.blockSignals(False)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._row.is_selectable:
            self.activated.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)


class SettingsListView(QScrollArea):
    """Renders sections as headed groups and dispatches row activation."""

    def __init__(self, model: SettingsListModel, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("settingsList")
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)

        self._model = model
        self._row_widgets: List[List[RowWidget]] = []
        self._container: Optional[QWidget] = None

        model.sections_reset.connect(self._rebuild)
        model.row_changed.connect(self._on_row_changed)
        self._rebuild()

    @property
    def model(self) -> SettingsListModel:
        return self._model

    def row_widget(self, path: IndexPath) -> RowWidget:
        return self._row_widgets[path.section][path.row]

    def activate(self, path: IndexPath) -> None:
        """Run the selection handler of the row currently at ``path``."""
        row = self._model.row_at(path)
        if row.selection is None:
            return
        logger.debug("Row activated: %s", row.text)
        row.selection()

    def _rebuild(self) -> None:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 12, 0, 12)
        layout.setSpacing(4)
        self._row_widgets = []

        for s_idx, section in enumerate(self._model.sections):
            if section.header:
                header = QLabel(section.header)
                header.setObjectName("sectionHeader")
                header.setContentsMargins(16, 12, 16, 2)
                layout.addWidget(header)

            group = QFrame()
            group.setObjectName("sectionGroup")
            group_layout = QVBoxLayout(group)
            group_layout.setContentsMargins(0, 0, 0, 0)
            group_layout.setSpacing(0)
            widgets: List[RowWidget] = []
            for r_idx, row in enumerate(section.rows):
                widget = RowWidget(row, group)
                path = IndexPath(s_idx, r_idx)
                widget.activated.connect(partial(self.activate, path))
                widget.toggled.connect(partial(self._on_toggled, path))
                group_layout.addWidget(widget)
                widgets.append(widget)
            self._row_widgets.append(widgets)
            layout.addWidget(group)

            if section.footer:
                footer = QLabel(section.footer)
                footer.setObjectName("sectionFooter")
                footer.setWordWrap(True)
                footer.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Minimum)
                footer.setContentsMargins(16, 2, 16, 8)
                layout.addWidget(footer)

        layout.addStretch()
        self.setWidget(container)
        self._container = container

    def _on_row_changed(self, section: int, row: int) -> None:
        self._row_widgets[section][row].set_row(self._model.row_at(IndexPath(section, row)))

    def _on_toggled(self, path: IndexPath, value: bool) -> None:
        row = self._model.row_at(path)
        if row.accessory.on_toggle is not None:
            row.accessory.on_toggle(value)
        section_uuid = self._model.sections[path.section].uuid
        self._model.update_toggle_value(row.uuid, section_uuid, value)
