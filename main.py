"""
Browser Settings - Main Entry Point

Opens the browser settings screen as a standalone window.
"""
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QMessageBox

from core.device import DeviceInfo, InterfaceIdiom
from core.logging.logger import setup_logging, get_logger
from core.settings.preference_store import PreferenceStore
from ui.settings_window import SettingsWindow
from versioning import APP_COMPANY, APP_NAME, APP_VERSION

logger = get_logger(__name__)


def parse_idiom(argv: List[str]) -> InterfaceIdiom:
    """
    Pick the interface idiom from command-line flags.

    - --phone - Phone layout (tab bar visibility opens a picker)
    - --pad   - Pad layout (tab bar visibility is a switch), the default
    """
    if '--phone' in argv:
        return InterfaceIdiom.PHONE
    return InterfaceIdiom.PAD


def parse_settings_file(argv: List[str]) -> Optional[Path]:
    """Return the path following --settings-file, if given."""
    try:
        idx = argv.index('--settings-file')
    except ValueError:
        return None
    if idx + 1 >= len(argv):
        logger.warning("--settings-file given without a path; using native store")
        return None
    return Path(argv[idx + 1])


def run_settings(app: QApplication, argv: List[str]) -> int:
    """Show the settings window and run the event loop."""
    try:
        store = PreferenceStore(path=parse_settings_file(argv))
        device = DeviceInfo.current(idiom=parse_idiom(argv))
        window = SettingsWindow(store, device=device)
        window.show()
        return app.exec()
    except Exception as e:
        logger.exception("Failed to open settings: %s", e)
        QMessageBox.critical(
            None,
            "Settings Error",
            f"Failed to open settings:\n{e}"
        )
        return 1


def main():
    """Main entry point for the settings application."""
    debug_mode = '--debug' in sys.argv or '-d' in sys.argv
    verbose_mode = '--verbose' in sys.argv or '-v' in sys.argv
    setup_logging(debug=debug_mode, verbose=verbose_mode)

    logger.info("=" * 60)
    logger.info("%s %s Starting", APP_NAME, APP_VERSION)
    logger.info("=" * 60)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_COMPANY)
    app.setApplicationVersion(APP_VERSION)

    logger.info("Qt Application created: %s", app.applicationName())

    exit_code = run_settings(app, sys.argv)

    logger.info("=" * 60)
    logger.info("%s Exiting (code=%s)", APP_NAME, exit_code)
    logger.info("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
