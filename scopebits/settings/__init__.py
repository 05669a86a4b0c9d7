"""Offer configuration loading for scope definitions."""

from scopebits.settings.base_settings import (
    ScopeBitsSettings,
    load_registry,
    load_settings,
)

__all__ = [
    "ScopeBitsSettings",
    "load_registry",
    "load_settings",
]
