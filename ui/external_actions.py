"""Fire-and-forget actions that leave the settings screen.

Opening a URL in a browser tab, presenting an action sheet and copying
to the clipboard all belong to the host. Settings only calls through the
small interfaces below and never waits on a result.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices, QGuiApplication
from PySide6.QtWidgets import QMessageBox, QWidget

from core.logging.logger import get_logger

logger = get_logger(__name__)

SheetAction = Tuple[str, Optional[Callable[[], None]]]


class SettingsDelegate(Protocol):
    def settings_open_url_in_new_tab(self, url: str) -> None: ...

    def settings_did_finish(self, settings: object) -> None: ...


class ActionPresenter(Protocol):
    def present_action_sheet(self, parent: Optional[QWidget], title: str,
                             actions: Sequence[SheetAction], cancel_title: str) -> None: ...


class MessageBoxActionPresenter:
    """Present action sheets as a modal QMessageBox with one button per action."""

    def present_action_sheet(self, parent: Optional[QWidget], title: str,
                             actions: Sequence[SheetAction], cancel_title: str) -> None:
        box = QMessageBox(parent)
        box.setWindowTitle(title)
        box.setText(title)
        handlers = {}
        for label, handler in actions:
            button = box.addButton(label, QMessageBox.ButtonRole.ActionRole)
            handlers[button] = handler
        box.addButton(cancel_title, QMessageBox.ButtonRole.RejectRole)
        box.exec()

        handler = handlers.get(box.clickedButton())
        if handler is not None:
            handler()


class DesktopSettingsDelegate:
    """Delegate for the standalone app: URLs go to the system browser."""

    def __init__(self, on_finish: Optional[Callable[[], None]] = None):
        self._on_finish = on_finish

    def settings_open_url_in_new_tab(self, url: str) -> None:
        open_url_externally(url)

    def settings_did_finish(self, settings: object) -> None:
        logger.info("Settings finished")
        if self._on_finish is not None:
            self._on_finish()


def open_url_externally(url: str) -> bool:
    ok = QDesktopServices.openUrl(QUrl(url))
    if not ok:
        logger.warning("Could not open URL: %s", url)
    return ok


def copy_strings_to_clipboard(strings: List[str]) -> None:
    """Put ``strings`` on the system clipboard, one per line.

    The desktop clipboard holds a single text item, so the strings are
    joined with newlines instead of being stored as separate entries.
    """
    QGuiApplication.clipboard().setText("\n".join(strings))
    logger.debug("Copied %d strings to clipboard", len(strings))
