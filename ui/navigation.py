"""Navigation host: a push/pop stack of screens with a title bar."""
from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from core.logging.logger import get_logger

logger = get_logger(__name__)


class NavigationBar(QWidget):
    """Title bar with a back button and an optional right-hand action."""

    back_clicked = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("navigationBar")
        self.setFixedHeight(44)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 0, 8, 0)
        layout.setSpacing(8)

        self.back_btn = QPushButton("‹ Back")
        self.back_btn.setObjectName("navigationBackButton")
        self.back_btn.setFlat(True)
        self.back_btn.clicked.connect(self.back_clicked)

        self.title_label = QLabel()
        self.title_label.setObjectName("navigationTitle")
        self.title_label.setFont(QFont(self.title_label.font().family(), 11, QFont.Weight.Bold))

        self._right_slot = QHBoxLayout()
        self._right_slot.setContentsMargins(0, 0, 0, 0)

        layout.addWidget(self.back_btn)
        layout.addStretch()
        layout.addWidget(self.title_label)
        layout.addStretch()
        layout.addLayout(self._right_slot)

    def set_right_button(self, button: Optional[QPushButton]) -> None:
        while self._right_slot.count():
            item = self._right_slot.takeAt(0)
            if item.widget() is not None:
                item.widget().setParent(None)
        if button is not None:
            self._right_slot.addWidget(button)
            # Reparenting hides a widget that was already shown once.
            button.show()


class NavigationStack(QWidget):
    """
    Stack of pushed screens.

    Each pushed widget carries its own title and optional right-hand
    button. Popping the last remaining screen is ignored.
    """

    popped = Signal(QWidget)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("navigationStack")
        self._titles: List[str] = []
        self._right_buttons: List[Optional[QPushButton]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.bar = NavigationBar(self)
        self.bar.back_clicked.connect(self.pop)
        self._stack = QStackedWidget(self)

        layout.addWidget(self.bar)
        layout.addWidget(self._stack, 1)
        self._sync_bar()

    @property
    def depth(self) -> int:
        return self._stack.count()

    def current_widget(self) -> Optional[QWidget]:
        return self._stack.currentWidget()

    def push(self, widget: QWidget, title: str = "",
             right_button: Optional[QPushButton] = None) -> None:
        """Show ``widget`` on top of the stack."""
        self._stack.addWidget(widget)
        self._stack.setCurrentWidget(widget)
        self._titles.append(title)
        self._right_buttons.append(right_button)
        self._sync_bar()
        logger.debug("Pushed screen '%s' (depth=%d)", title, self.depth)

    def pop(self) -> Optional[QWidget]:
        """Remove the top screen and return it, or None at the root."""
        if self._stack.count() <= 1:
            return None
        widget = self._stack.currentWidget()
        self._stack.removeWidget(widget)
        title = self._titles.pop()
        self._right_buttons.pop()
        self._stack.setCurrentIndex(self._stack.count() - 1)
        self._sync_bar()
        logger.debug("Popped screen '%s' (depth=%d)", title, self.depth)
        self.popped.emit(widget)
        widget.deleteLater()
        return widget

    def _sync_bar(self) -> None:
        self.bar.title_label.setText(self._titles[-1] if self._titles else "")
        self.bar.back_btn.setVisible(self._stack.count() > 1)
        self.bar.set_right_button(self._right_buttons[-1] if self._right_buttons else None)
