"""Preference storage and option catalogs."""

from .options import (
    COOKIE_PICKER_ORDER,
    CookieAcceptPolicy,
    PasswordManagerShortcutBehavior,
    RepresentableOption,
    TabBarVisibility,
)
from .preference_store import PreferenceStore
from .preferences import General, Preference, Privacy, Security, Shields

__all__ = [
    'PreferenceStore',
    'Preference',
    'General',
    'Privacy',
    'Security',
    'Shields',
    'RepresentableOption',
    'TabBarVisibility',
    'CookieAcceptPolicy',
    'PasswordManagerShortcutBehavior',
    'COOKIE_PICKER_ORDER',
]
