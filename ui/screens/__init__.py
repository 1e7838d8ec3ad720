"""Sub-screens pushed from the settings list."""

from .clear_private_data import ClearPrivateDataView
from .content_page import SettingsContentView
from .passcode_settings import PasscodeSettingsView, passcode_title

__all__ = ['ClearPrivateDataView', 'SettingsContentView', 'PasscodeSettingsView', 'passcode_title']
