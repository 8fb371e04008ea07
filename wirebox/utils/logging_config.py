"""Structured logging for wirebox.

The container emits debug events (``binding_registered``, ``instance_shared``,
``singleton_cached``, ``instance_constructed``, ``callable_tapped``) through
structlog. Applications pick console or JSON output with
``configure_from_settings`` or by calling ``configure_logging`` directly.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from wirebox.config import ContainerSettings

DEFAULT_LOGGER = "wirebox"


def _open_stream(log_file: Path | None) -> TextIO:
    if log_file is None:
        return sys.stderr
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return open(log_file, "a", encoding="utf-8")  # noqa: SIM115


def _processors(json_output: bool, colors: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))
    return processors


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Path | None = None,
    colors: bool = True,
) -> None:
    """Route container events through stdlib logging with a structlog renderer.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_output: Render one JSON object per event
        log_file: Append to this file instead of stderr
        colors: Colorize console output (ignored for JSON)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=_open_stream(log_file),
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=_processors(json_output, colors),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: ContainerSettings) -> None:
    """Configure logging from container settings."""
    configure_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=settings.log_file,
        colors=not settings.log_json,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, named ``wirebox`` unless given a module name."""
    return structlog.get_logger(name or DEFAULT_LOGGER)
