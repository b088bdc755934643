"""Value types decoded from NWS alert products."""

from .exceptions import FormatError, InvalidFormatError, ProductFormatError
from .latlng import LatLng
from .vtec import VTEC

__all__ = ["FormatError", "InvalidFormatError", "ProductFormatError", "LatLng", "VTEC"]
