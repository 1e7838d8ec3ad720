"""Centralised version and naming information for the settings app.

This module is the single source of truth for application version,
QSettings naming, and the fixed URLs the Support section links to. The
About row and the entry point both import from here so strings are not
duplicated across the codebase.
"""
from __future__ import annotations


APP_NAME: str = "BrowserSettings"
APP_VERSION: str = "1.6.0"
APP_BUILD: str = "18.5.31.16"
APP_COMPANY: str = "BraveSoftware"

COMMUNITY_URL: str = "https://community.brave.com/"
PRIVACY_URL: str = "https://brave.com/privacy_ios"
TERMS_OF_USE_URL: str = "https://brave.com/terms_of_use"


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_BUILD",
    "APP_COMPANY",
    "COMMUNITY_URL",
    "PRIVACY_URL",
    "TERMS_OF_USE_URL",
]
