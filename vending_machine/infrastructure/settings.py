"""
Application settings.

Typed, immutable configuration sections aggregated into a single
``Settings`` object. Command-line flags produce an updated copy via
``Settings.with_overrides``.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from vending_machine.configs import LOG_APP_NAME, VALID_DENOMINATIONS


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    # Console output shares the terminal with the menu.
    console_level: str = "WARNING"
    log_file: Optional[str] = None
    loki_url: Optional[str] = None
    app: str = LOG_APP_NAME


@dataclass(frozen=True)
class MachineSettings:
    """Vending machine settings."""

    denominations: tuple[int, ...] = VALID_DENOMINATIONS


# =============================================================================
# Main Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    machine: MachineSettings = field(default_factory=MachineSettings)

    def with_overrides(self, **logging_overrides: Any) -> "Settings":
        """
        Copy the settings with some logging values replaced.

        ``None`` values are ignored so unset command-line flags keep
        their defaults.
        """
        changes = {k: v for k, v in logging_overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, logging=replace(self.logging, **changes))


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the settings singleton."""
    global _settings
    _settings = settings
