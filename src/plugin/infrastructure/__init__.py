"""Cross-cutting infrastructure: settings and logging configuration."""

from infrastructure.logging import configure_logging
from infrastructure.settings import (
    HardLinkSettings,
    LoggingSettings,
    get_logging_settings,
    get_settings,
)

__all__ = [
    "configure_logging",
    "HardLinkSettings",
    "LoggingSettings",
    "get_settings",
    "get_logging_settings",
]
