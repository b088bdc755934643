"""
Timestamp handling utilities for weather alert products.

VTEC timestamps carry a two-digit year and are always UTC. Both of those
facts are pinned here instead of being left to a platform date parser:

- the century pivot is an explicit argument (see ``DEFAULT_CENTURY_PIVOT``)
- every datetime produced is timezone-aware UTC
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

logger = logging.getLogger(__name__)


# Two-digit years below the pivot map to 20xx, the rest to 19xx.
DEFAULT_CENTURY_PIVOT = 70

# NWS uses an all-zero timestamp for "until further notice" / undefined times
VTEC_UNDEFINED_TIMESTAMP = "000000T0000Z"

# Expected format: yymmddThhnnZ
_VTEC_TIMESTAMP_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})T(\d{2})(\d{2})Z?$")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimezoneHelper:
    """Helper class for UTC timestamp operations."""

    @staticmethod
    def expand_two_digit_year(yy: int, century_pivot: int = DEFAULT_CENTURY_PIVOT) -> int:
        """
        Expand a two-digit year using an explicit century pivot.

        Args:
            yy: Year within the century (0-99)
            century_pivot: Years below this value are placed in the 2000s

        Returns:
            Four-digit year
        """
        if not (0 <= yy <= 99):
            raise ValueError(f"Two-digit year out of range: {yy}")
        return 2000 + yy if yy < century_pivot else 1900 + yy

    @staticmethod
    def parse_vtec_timestamp(
        timestamp_str: str,
        century_pivot: int = DEFAULT_CENTURY_PIVOT,
    ) -> Optional[datetime]:
        """
        Parse a VTEC timestamp string to datetime.

        VTEC format: yymmddThhnnZ (e.g., "250120T1530Z")

        The "000000T0000Z" value indicates undefined/indeterminate time.

        Args:
            timestamp_str: VTEC timestamp string
            century_pivot: Two-digit year pivot, see expand_two_digit_year()

        Returns:
            datetime in UTC if valid, None if undefined or invalid
        """
        if not timestamp_str:
            return None

        if timestamp_str == VTEC_UNDEFINED_TIMESTAMP:
            logger.debug(f"VTEC timestamp is undefined: {timestamp_str}")
            return None

        match = _VTEC_TIMESTAMP_RE.match(timestamp_str.strip())
        if not match:
            logger.warning(f"Invalid VTEC timestamp format: '{timestamp_str}'")
            return None

        yy, mm, dd, hh, nn = map(int, match.groups())

        try:
            year = TimezoneHelper.expand_two_digit_year(yy, century_pivot)
            # datetime() rejects impossible calendar values (month 13, Feb 30, hour 24)
            return datetime(year, mm, dd, hh, nn, tzinfo=timezone.utc)
        except ValueError as e:
            logger.warning(f"Failed to parse VTEC timestamp '{timestamp_str}': {e}")
            return None

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert a datetime to UTC.

        Naive datetimes are assumed to already be UTC.
        """
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def to_epoch_millis(dt: datetime) -> int:
        """Milliseconds since 1970-01-01T00:00Z."""
        delta = TimezoneHelper.to_utc(dt) - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

    @staticmethod
    def from_epoch_millis(millis: int) -> datetime:
        """Inverse of to_epoch_millis(); always returns an aware UTC datetime."""
        return _EPOCH + timedelta(milliseconds=millis)
