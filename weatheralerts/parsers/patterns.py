"""
Compiled regex patterns for parsing NWS alert products.

Patterns are pre-compiled for performance and documented for maintainability.

References:
- NWS VTEC documentation: https://www.weather.gov/vtec/
"""

import re
from typing import Pattern


# =============================================================================
# VTEC PATTERNS
# =============================================================================

# Primary VTEC pattern (P-VTEC)
# Format: k.aaa.cccc.pp.s.####.yymmddThhnnZ-yymmddThhnnZ
# Example: O.NEW.KOUN.TO.W.0123.150522T2300Z-150523T0000Z
#
# Components:
#   k    = Product class (O=Operational, T=Test, E=Experimental, X=Experimental in operational)
#   aaa  = Action code, any 3 non-digits (NEW, CON, EXT, EXA, EXB, UPG, CAN, EXP, COR, ROU)
#   cccc = Issuing office, any 4 non-digits (e.g., KOUN)
#   pp   = Phenomenon code, any 2 non-digits (e.g., TO, SV, FF)
#   s    = Significance (W=Warning, A=Watch, Y=Advisory, S=Statement, F=Forecast, O=Outlook, N=Synopsis)
#   #### = Event Tracking Number (4 digits)
#   timestamps = Begin and end times in UTC
#
# Not anchored and no surrounding slashes required: the segment is searched
# for anywhere in the product text.
PATTERN_VTEC: Pattern[str] = re.compile(
    r"(?P<product_class>[OTEX])"
    r"\.(?P<action>\D{3})"
    r"\.(?P<office_id>\D{4})"
    r"\.(?P<phenomena>\D{2})"
    r"\.(?P<significance>[WAYSFON])"
    r"\.(?P<etn>\d{4})"
    r"\.(?P<begin>\d{6}T\d{4}Z)"
    r"-(?P<end>\d{6}T\d{4}Z)"
)


# =============================================================================
# COORDINATE PATTERNS
# =============================================================================

# Field separator for "lat,lng" strings (e.g., "45.0,-124.58")
COORDINATE_SEPARATOR = ","

# Period-decimal floating point literal. Rejects locale forms ("45,0"),
# digit-group underscores and the textual nan/inf spellings float() accepts.
PATTERN_DECIMAL: Pattern[str] = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)

