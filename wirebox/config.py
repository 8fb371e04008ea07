"""Container settings for wirebox.

Provides environment-driven configuration for the container and its logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from wirebox.utils.logging_config import configure_from_settings

ENV_PREFIX = "WIREBOX_"


@dataclass
class ContainerSettings:
    """Runtime settings for a Container."""

    # Resolution
    detect_cycles: bool = False
    thread_safe: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ContainerSettings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ContainerSettings instance
        """
        env = os.environ if environ is None else environ

        log_file = env.get(f"{ENV_PREFIX}LOG_FILE")

        return cls(
            detect_cycles=cls._flag(env, "DETECT_CYCLES"),
            thread_safe=cls._flag(env, "THREAD_SAFE"),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").strip().upper() or "INFO",
            log_json=cls._flag(env, "LOG_JSON"),
            log_file=Path(log_file) if log_file else None,
        )

    @staticmethod
    def _flag(env, name: str) -> bool:
        value = env.get(f"{ENV_PREFIX}{name}", "")
        return value.strip().strip('"').strip("'").lower() in ("1", "true", "yes")

    def configure_logging(self) -> None:
        """Apply the logging fields to structlog."""
        configure_from_settings(self)
