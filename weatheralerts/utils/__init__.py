"""Utility modules for weather alert products."""

from .timezone import TimezoneHelper
from .logging import setup_logging, get_logger

__all__ = ["TimezoneHelper", "setup_logging", "get_logger"]
