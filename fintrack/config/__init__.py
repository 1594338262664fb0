"""Configuration package."""

from fintrack.config.settings import (
    AppSettings,
    DisplaySettings,
    Settings,
    SimulatorSettings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "DisplaySettings",
    "Settings",
    "SimulatorSettings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
