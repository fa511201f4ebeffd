"""
Infrastructure layer - Configuration and external integrations.
"""

from .settings import (
    LoggingSettings,
    MachineSettings,
    Settings,
    get_settings,
    set_settings,
)


__all__ = [
    "LoggingSettings",
    "MachineSettings",
    "Settings",
    "get_settings",
    "set_settings",
]
