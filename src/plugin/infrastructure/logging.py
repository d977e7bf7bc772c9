"""Structlog configuration for the rule engine plugin.

The host captures whatever the plugin writes to stdout, so the default is
one JSON object per event. A terminal (or FORCE_COLOR) gets the colored
console renderer instead, which is what developers see when running the
engine against the in-memory catalog.
"""

import logging
import os
import sys

import structlog

from infrastructure.settings import LoggingSettings, get_logging_settings

_TRUTHY = ("1", "true", "yes")


def _use_colors(settings: LoggingSettings) -> bool:
    if settings.json_output is not None:
        return not settings.json_output

    # FORCE_COLOR=1 enables colors even in non-TTY environments (like Docker)
    if os.environ.get("FORCE_COLOR", "").lower() in _TRUTHY:
        return True
    return sys.stdout.isatty()


def _build_processors(use_colors: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if use_colors:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return processors


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for the plugin process.

    Args:
        settings: Logging settings; read from the environment when omitted.
            An explicit ``json_output`` wins over terminal detection.
    """
    settings = settings or get_logging_settings()
    min_level = logging.getLevelNamesMapping()[settings.level]

    structlog.configure(
        processors=_build_processors(_use_colors(settings)),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
