"""Typed preference definitions.

A ``Preference`` names a stable store key, the Python type of its value
and a default. It holds no value itself; reads and writes go through a
``PreferenceStore`` passed in by the caller, so screens never reach for
process-wide state.

Usage:
    store.value(General.SAVE_LOGINS)           # -> bool
    store.set_value(General.SAVE_LOGINS, False)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Type, TypeVar

from core.settings.options import CookieAcceptPolicy, PasswordManagerShortcutBehavior, TabBarVisibility

T = TypeVar("T", bool, int, str)


@dataclass(frozen=True)
class Preference(Generic[T]):
    """A keyed, typed setting with a default."""
    key: str
    value_type: Type[T]
    default: T


class General:
    SAVE_LOGINS = Preference("general.saveLogins", bool, True)
    BLOCK_POPUPS = Preference("general.blockPopups", bool, True)
    TAB_BAR_VISIBILITY = Preference("general.tabBarVisibility", int, TabBarVisibility.ALWAYS.raw_value)
    PASSWORD_MANAGER_SHORTCUT_BEHAVIOR = Preference(
        "general.passwordManagerShortcutBehavior",
        int,
        PasswordManagerShortcutBehavior.SHOW_PICKER.raw_value,
    )


class Privacy:
    COOKIE_ACCEPT_POLICY = Preference("privacy.cookieAcceptPolicy", int, CookieAcceptPolicy.ALWAYS.raw_value)
    PRIVATE_BROWSING_ONLY = Preference("privacy.privateBrowsingOnly", bool, False)
    CLEAR_HISTORY = Preference("privacy.clear.history", bool, True)
    CLEAR_CACHE = Preference("privacy.clear.cache", bool, True)
    CLEAR_COOKIES = Preference("privacy.clear.cookies", bool, True)
    CLEAR_PASSWORDS = Preference("privacy.clear.passwords", bool, True)


class Security:
    REQUIRE_PASSCODE = Preference("security.requirePasscode", bool, False)


class Shields:
    BLOCK_ADS_AND_TRACKING = Preference("shields.blockAdsAndTracking", bool, True)
    HTTPS_EVERYWHERE = Preference("shields.httpsEverywhere", bool, True)
    BLOCK_PHISHING_AND_MALWARE = Preference("shields.blockPhishingAndMalware", bool, True)
    BLOCK_SCRIPTS = Preference("shields.blockScripts", bool, False)
    FINGERPRINTING_PROTECTION = Preference("shields.fingerprintingProtection", bool, False)


def all_preferences() -> List[Preference[Any]]:
    """Every preference declared above, in declaration order."""
    prefs: List[Preference[Any]] = []
    for group in (General, Privacy, Security, Shields):
        for name, attr in vars(group).items():
            if not name.startswith("_") and isinstance(attr, Preference):
                prefs.append(attr)
    return prefs


def default_values() -> Dict[str, Any]:
    """Map of store key to default value for seeding a fresh store."""
    return {pref.key: pref.default for pref in all_preferences()}


__all__ = [
    "Preference",
    "General",
    "Privacy",
    "Security",
    "Shields",
    "all_preferences",
    "default_values",
]
