"""Errors raised while decoding alert product values."""


class ProductFormatError(ValueError):
    """Base class for malformed product text."""


class FormatError(ProductFormatError):
    """A "lat,lng" string lacks two numeric comma-separated fields."""


class InvalidFormatError(ProductFormatError):
    """Text does not contain a VTEC segment."""
