"""
Configuration package for the Street Highlight API.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    PlacesSettings,
    OverpassSettings,
    StreetSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "PlacesSettings",
    "OverpassSettings",
    "StreetSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
