"""Regex patterns for NWS alert products."""

from .patterns import COORDINATE_SEPARATOR, PATTERN_DECIMAL, PATTERN_VTEC

__all__ = ["COORDINATE_SEPARATOR", "PATTERN_DECIMAL", "PATTERN_VTEC"]
