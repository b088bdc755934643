"""Weather alert product value types: coordinates and VTEC codes."""

from .products import VTEC, FormatError, InvalidFormatError, LatLng, ProductFormatError

__all__ = ["VTEC", "FormatError", "InvalidFormatError", "LatLng", "ProductFormatError"]

__version__ = "2.0.0"
