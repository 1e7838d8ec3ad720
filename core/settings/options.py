"""Closed enumerations presented as single-choice options.

Each option type is an ``IntEnum`` whose value is the raw form persisted
in the preference store, with a human-readable ``display_string`` for
list rows and pickers.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Optional, Type, TypeVar

O = TypeVar("O", bound="RepresentableOption")


class RepresentableOption(IntEnum):
    """Base for option enums that can be shown in an option picker."""

    @property
    def raw_value(self) -> int:
        return int(self.value)

    @property
    def display_string(self) -> str:
        return _DISPLAY_STRINGS[type(self)][self]

    @classmethod
    def all_cases(cls: Type[O]) -> List[O]:
        return list(cls)

    @classmethod
    def from_raw(cls: Type[O], raw: Any) -> Optional[O]:
        """Return the member for ``raw`` or None when it matches nothing.

        Raw values read back from an INI file arrive as strings, so
        digit strings are accepted too.
        """
        if isinstance(raw, bool) or raw is None:
            return None
        try:
            return cls(int(raw))
        except (TypeError, ValueError):
            return None


class TabBarVisibility(RepresentableOption):
    ALWAYS = 0
    LANDSCAPE_ONLY = 1
    NEVER = 2


class CookieAcceptPolicy(RepresentableOption):
    ALWAYS = 0
    NEVER = 1
    ONLY_FROM_MAIN_DOCUMENT_DOMAIN = 2


class PasswordManagerShortcutBehavior(RepresentableOption):
    SHOW_PICKER = 0
    ONE_PASSWORD = 1
    LAST_PASS = 2
    BITWARDEN = 3
    TRUE_KEY = 4


_DISPLAY_STRINGS = {
    TabBarVisibility: {
        TabBarVisibility.ALWAYS: "Always show",
        TabBarVisibility.LANDSCAPE_ONLY: "Show in landscape only",
        TabBarVisibility.NEVER: "Never show",
    },
    CookieAcceptPolicy: {
        CookieAcceptPolicy.ALWAYS: "Don't block cookies",
        CookieAcceptPolicy.ONLY_FROM_MAIN_DOCUMENT_DOMAIN: "Block 3rd party cookies",
        CookieAcceptPolicy.NEVER: "Block all cookies",
    },
    PasswordManagerShortcutBehavior: {
        PasswordManagerShortcutBehavior.SHOW_PICKER: "Show picker",
        PasswordManagerShortcutBehavior.ONE_PASSWORD: "1Password",
        PasswordManagerShortcutBehavior.LAST_PASS: "LastPass",
        PasswordManagerShortcutBehavior.BITWARDEN: "bitwarden",
        PasswordManagerShortcutBehavior.TRUE_KEY: "True Key",
    },
}

# Order in which the Cookie Control picker lists its choices.
COOKIE_PICKER_ORDER: List[CookieAcceptPolicy] = [
    CookieAcceptPolicy.ONLY_FROM_MAIN_DOCUMENT_DOMAIN,
    CookieAcceptPolicy.NEVER,
    CookieAcceptPolicy.ALWAYS,
]


__all__ = [
    "RepresentableOption",
    "TabBarVisibility",
    "CookieAcceptPolicy",
    "PasswordManagerShortcutBehavior",
    "COOKIE_PICKER_ORDER",
]
