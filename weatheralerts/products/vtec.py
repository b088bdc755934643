"""
VTEC (Valid Time Event Code) value type.

A P-VTEC segment identifies one event in an NWS product:

    O.NEW.KOUN.TO.W.0123.150522T2300Z-150523T0000Z

References:
- NWS VTEC: https://www.weather.gov/vtec/
"""

from dataclasses import dataclass, field
from datetime import datetime
from re import Match
from typing import Any, Optional

from .exceptions import InvalidFormatError
from ..config import get_settings
from ..models.vtec_codes import PHENOMENON_NAMES, VTECAction, VTECProductClass, VTECSignificance
from ..parsers.patterns import PATTERN_VTEC
from ..utils.logging import get_logger
from ..utils.timezone import TimezoneHelper

logger = get_logger(__name__)


def parse_vtec_date(timestamp: str, century_pivot: int) -> int:
    """
    Decode a VTEC timestamp to milliseconds since the Unix epoch.

    Returns 0 when the timestamp cannot be decoded (impossible calendar
    values, or the all-zero "undefined" time). A 0 therefore means
    "unparseable", not 1970-01-01T00:00Z; callers should treat it that way.
    """
    dt = TimezoneHelper.parse_vtec_timestamp(timestamp, century_pivot=century_pivot)
    if dt is None:
        return 0
    return TimezoneHelper.to_epoch_millis(dt)


@dataclass(frozen=True)
class VTEC:
    """
    Decoded P-VTEC segment.

    Equality compares every decoded field, including action and both dates.
    Use ``VTEC.same_event`` for the looser "is this the same event" check.
    """
    product_class: str
    action: str
    office_id: str
    phenomena: str
    significance: str
    event_tracking_number: int
    begin_date: int = 0       # ms since epoch, 0 = unparseable
    end_date: int = 0         # ms since epoch, 0 = unparseable
    raw_vtec: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str, century_pivot: Optional[int] = None) -> "VTEC":
        """
        Parse the first VTEC segment found anywhere in ``text``.

        Args:
            text: Raw product text containing a VTEC segment
            century_pivot: Two-digit year pivot; defaults to settings

        Raises:
            InvalidFormatError: no VTEC segment in text
        """
        match = PATTERN_VTEC.search(text)
        if not match:
            raise InvalidFormatError("Input string does not contain a valid VTEC identifier.")
        return cls._from_match(match, century_pivot)

    @classmethod
    def parse_all(cls, text: str, century_pivot: Optional[int] = None) -> list["VTEC"]:
        """
        Parse every VTEC segment in ``text``, in order of appearance.

        Some products carry several segments (e.g., an upgrade cancels one
        event and issues another). Returns an empty list when there are none.
        """
        return [cls._from_match(match, century_pivot) for match in PATTERN_VTEC.finditer(text)]

    @classmethod
    def _from_match(cls, match: Match, century_pivot: Optional[int]) -> "VTEC":
        if century_pivot is None:
            century_pivot = get_settings().vtec_century_pivot

        vtec = cls(
            product_class=match.group("product_class"),
            action=match.group("action"),
            office_id=match.group("office_id"),
            phenomena=match.group("phenomena"),
            significance=match.group("significance"),
            event_tracking_number=int(match.group("etn")),
            begin_date=parse_vtec_date(match.group("begin"), century_pivot),
            end_date=parse_vtec_date(match.group("end"), century_pivot),
            raw_vtec=match.group(0),
        )

        if vtec.action_code is None:
            logger.debug("Unrecognised VTEC action", action=vtec.action, vtec=vtec.raw_vtec)
        return vtec

    @staticmethod
    def same_event(event: "VTEC", another_event: "VTEC") -> bool:
        """Determine whether two VTECs correspond to the same event."""
        return (
            event.product_class == another_event.product_class
            and event.office_id == another_event.office_id
            and event.phenomena == another_event.phenomena
            and event.significance == another_event.significance
            and event.event_tracking_number == another_event.event_tracking_number
        )

    def is_followup(self, initial: "VTEC") -> bool:
        """Check if this VTEC follows up on ``initial``, a previously issued NEW event."""
        return not self.is_new() and VTEC.same_event(initial, self) and initial.is_new()

    def is_new(self) -> bool:
        """Check if this is the first issuance for the event."""
        return self.action == VTECAction.NEW

    @property
    def is_cancellation(self) -> bool:
        """Check if this VTEC ends the event."""
        return self.action in (VTECAction.CAN, VTECAction.EXP)

    @property
    def is_operational(self) -> bool:
        return self.product_class == VTECProductClass.OPERATIONAL

    @property
    def action_code(self) -> Optional[VTECAction]:
        """Action as an enum member, None for codes outside the table."""
        try:
            return VTECAction(self.action)
        except ValueError:
            return None

    @property
    def significance_code(self) -> Optional[VTECSignificance]:
        """Significance as an enum member, None for codes outside the table."""
        try:
            return VTECSignificance(self.significance)
        except ValueError:
            return None

    @property
    def product_class_code(self) -> Optional[VTECProductClass]:
        """Product class as an enum member, None for codes outside the table."""
        try:
            return VTECProductClass(self.product_class)
        except ValueError:
            return None

    @property
    def phenomenon_name(self) -> str:
        """Get human-readable name for the phenomenon code."""
        return PHENOMENON_NAMES.get(self.phenomena, f"Unknown ({self.phenomena})")

    @property
    def event_key(self) -> str:
        """Key shared by every issuance of one event within a product class."""
        return (
            f"{self.product_class}.{self.office_id}.{self.phenomena}."
            f"{self.significance}.{self.event_tracking_number:04d}"
        )

    @property
    def begin_time(self) -> Optional[datetime]:
        """Begin date as an aware UTC datetime, None if it was unparseable."""
        if self.begin_date == 0:
            return None
        return TimezoneHelper.from_epoch_millis(self.begin_date)

    @property
    def end_time(self) -> Optional[datetime]:
        """End date as an aware UTC datetime, None if it was unparseable."""
        if self.end_date == 0:
            return None
        return TimezoneHelper.from_epoch_millis(self.end_date)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "product_class": self.product_class,
            "action": self.action,
            "office_id": self.office_id,
            "phenomena": self.phenomena,
            "significance": self.significance,
            "event_tracking_number": self.event_tracking_number,
            "begin_date": self.begin_date,
            "end_date": self.end_date,
            "begin_time": self.begin_time.isoformat() if self.begin_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "raw_vtec": self.raw_vtec,
        }

    def __str__(self) -> str:
        return self.raw_vtec or self.event_key
