"""Configuration package."""

from pocketbook.config.settings import (
    LedgerSettings,
    Settings,
    get_settings,
)

__all__ = [
    "LedgerSettings",
    "Settings",
    "get_settings",
]
