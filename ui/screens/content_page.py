"""Static content page (privacy policy, terms of use)."""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from ui import strings
from ui.external_actions import open_url_externally


class SettingsContentView(QWidget):
    """Shows a page title and its URL with a button to open it."""

    def __init__(self, title: str, url: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.url = url

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("contentTitle")
        self.url_label = QLabel(f'<a href="{url}">{url}</a>')
        self.url_label.setTextFormat(Qt.TextFormat.RichText)
        self.url_label.setOpenExternalLinks(True)
        self.open_btn = QPushButton(strings.OPEN_IN_BROWSER)
        self.open_btn.clicked.connect(lambda: open_url_externally(self.url))

        layout.addWidget(self.title_label)
        layout.addWidget(self.url_label)
        layout.addWidget(self.open_btn)
        layout.addStretch()
