"""Structured logging setup.

Log entries are rendered by structlog and written through stdlib logging to
stderr, so findings printed on stdout stay machine-readable. Entries carry
the service name and version, plus whatever context is bound while a patch
is inspected (the file path, most notably).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from patch_speller.config.schema import SpellerSettings

SERVICE_NAME = "patch-speller"


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@cache
def _service_version() -> str | None:
    try:
        from patch_speller._version import __version__
    except (ImportError, RuntimeError):
        return None
    return __version__


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding the service name and version to every entry."""
    event_dict["service"] = SERVICE_NAME
    version = _service_version()
    if version is not None:
        event_dict["version"] = version
    return event_dict


def _processors(log_format: LogFormat) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(), exception_formatter=structlog.dev.plain_traceback
            )
        )
    return processors


def _handlers(numeric_level: int, file_path: Path | None) -> list[logging.Handler]:
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(numeric_level)
    handlers: list[logging.Handler] = [stderr_handler]

    if file_path is None:
        return handlers

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path)
    except OSError as e:
        # Keep logging to stderr only
        sys.stderr.write(f"patch-speller: could not open log file {file_path}: {e}\n")
        return handlers

    file_handler.setLevel(numeric_level)
    handlers.append(file_handler)
    return handlers


def configure_logging(
    level: LogLevel | str = LogLevel.WARNING,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum level written (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "json" for log collectors, "console" for people
        file_path: Also write entries to this file when given

    Raises:
        ValueError: If level or log_format is unknown
    """
    level = LogLevel(level.upper())
    log_format = LogFormat(log_format.lower())
    numeric_level = getattr(logging, level.value)

    structlog.configure(
        processors=_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=_handlers(numeric_level, Path(file_path) if file_path else None),
        force=True,
    )


def configure_from_settings(
    settings: SpellerSettings,
    debug: bool = False,
    log_format: str | None = None,
) -> None:
    """Configure logging from process settings and command line overrides.

    Args:
        settings: PATCH_SPELLER_* settings
        debug: Force DEBUG level
        log_format: Overrides settings.log_format when given
    """
    configure_logging(
        level=LogLevel.DEBUG if debug else settings.log_level,
        log_format=log_format or settings.log_format,
        file_path=settings.log_file,
    )


def bind_context(**kwargs: Any) -> None:
    """Bind context for all subsequent log calls in this context.

    Example:
        bind_context(file_path="app/models/user.rb")
        log.debug("line_skipped_by_keywords")  # Includes file_path
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove bound context keys."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()
