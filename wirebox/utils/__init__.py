"""
Utility helpers for wirebox.
"""

from .logging_config import configure_from_settings, configure_logging, get_logger

__all__ = ["configure_from_settings", "configure_logging", "get_logger"]
