"""
Latitude/longitude value type for alert products.
"""

from dataclasses import dataclass
from typing import Any

from .exceptions import FormatError
from ..parsers.patterns import COORDINATE_SEPARATOR, PATTERN_DECIMAL
from ..utils.logging import get_logger

logger = get_logger(__name__)


MAX_LATITUDE = 90.0
MIN_LATITUDE = -90.0
MAX_LONGITUDE = 180.0
MIN_LONGITUDE = -180.0

# Field positions in a "lat,lng" string
LATITUDE = 0
LONGITUDE = 1

# Fixed-point storage keeps three fractional digits as an integer
FIXED_POINT_DIVISOR = 1000.0


def _parse_decimal(value: str, name: str, text: str) -> float:
    if not PATTERN_DECIMAL.match(value):
        raise FormatError(f"Invalid {name} '{value}' in coordinate string '{text}'")
    return float(value)


@dataclass(frozen=True)
class LatLng:
    """
    Immutable latitude/longitude pair in decimal degrees.

    Latitude is expected in [-90, 90] and longitude in [-180, 180], but
    values are stored verbatim; use ``is_valid`` to check the range.

    The constructor takes numbers only. Text goes through ``from_string``,
    which enforces the period-decimal format.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if isinstance(self.latitude, (str, bytes)) or isinstance(self.longitude, (str, bytes)):
            raise TypeError("LatLng takes numbers; use LatLng.from_string() for text")
        # Accept ints and numpy-style scalars, always store plain floats
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    @classmethod
    def from_string(cls, text: str) -> "LatLng":
        """
        Parse a "lat,lng" string, e.g. "45.0,-124.58".

        Only the first two comma-separated fields are read; anything after
        the second field is ignored.

        Raises:
            FormatError: fewer than two fields, or a field is not a number
        """
        values = text.split(COORDINATE_SEPARATOR)
        if len(values) < 2:
            raise FormatError(f"Coordinate string '{text}' must contain 'lat,lng'")
        if len(values) > 2:
            logger.debug("Ignoring extra coordinate fields", text=text)

        return cls(
            _parse_decimal(values[LATITUDE], "latitude", text),
            _parse_decimal(values[LONGITUDE], "longitude", text),
        )

    @classmethod
    def from_latlng(cls, other: "LatLng") -> "LatLng":
        """Construct a new LatLng from an existing one."""
        return cls(other.latitude, other.longitude)

    @classmethod
    def from_fixed_point(cls, lat: int, lng: int) -> "LatLng":
        """
        Decode fixed-point integers (three fractional digits), as stored for
        radar sites in the database.

        ``LatLng.from_fixed_point(45000, -124580)`` -> ``LatLng(45.0, -124.58)``
        """
        return cls(lat / FIXED_POINT_DIVISOR, lng / FIXED_POINT_DIVISOR)

    def to_fixed_point(self) -> tuple[int, int]:
        """Encode as fixed-point integers, the inverse of from_fixed_point()."""
        return (
            round(self.latitude * FIXED_POINT_DIVISOR),
            round(self.longitude * FIXED_POINT_DIVISOR),
        )

    @property
    def is_valid(self) -> bool:
        """Check that both values are inside their geographic ranges."""
        return (
            MIN_LATITUDE <= self.latitude <= MAX_LATITUDE
            and MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
        }

    def __str__(self) -> str:
        return f"{self.latitude!r}{COORDINATE_SEPARATOR}{self.longitude!r}"
