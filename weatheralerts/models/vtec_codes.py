"""
VTEC code tables.

String-valued enums compare equal to the raw codes, so decoded VTEC fields
can stay verbatim strings and still be checked against these members.
"""

from enum import Enum


class VTECProductClass(str, Enum):
    """VTEC product class codes."""
    OPERATIONAL = "O"
    TEST = "T"
    EXPERIMENTAL = "E"
    EXPERIMENTAL_IN_OPERATIONAL = "X"


class VTECSignificance(str, Enum):
    """VTEC significance codes."""
    WARNING = "W"
    WATCH = "A"
    ADVISORY = "Y"
    STATEMENT = "S"
    FORECAST = "F"
    OUTLOOK = "O"
    SYNOPSIS = "N"


class VTECAction(str, Enum):
    """VTEC action codes."""
    NEW = "NEW"       # New event
    CON = "CON"       # Continuing event (no changes)
    EXT = "EXT"       # Extended in time
    EXA = "EXA"       # Expanded in area
    EXB = "EXB"       # Extended and expanded
    UPG = "UPG"       # Upgraded (e.g., watch to warning)
    CAN = "CAN"       # Cancelled
    EXP = "EXP"       # Expired
    COR = "COR"       # Correction
    ROU = "ROU"       # Routine (marine forecasts)


# Phenomenon codes and their display names
PHENOMENON_NAMES = {
    "TO": "Tornado",
    "SV": "Severe Thunderstorm",
    "FF": "Flash Flood",
    "FA": "Areal Flood",
    "FL": "Flood",
    "WS": "Winter Storm",
    "BZ": "Blizzard",
    "IS": "Ice Storm",
    "LE": "Lake Effect Snow",
    "WW": "Winter Weather",
    "WC": "Wind Chill",
    "EC": "Extreme Cold",
    "HT": "Heat",
    "EH": "Excessive Heat",
    "FG": "Dense Fog",
    "SM": "Dense Smoke",
    "HW": "High Wind",
    "EW": "Extreme Wind",
    "WI": "Wind",
    "DS": "Dust Storm",
    "FR": "Frost",
    "FZ": "Freeze",
    "HZ": "Hard Freeze",
    "AS": "Air Stagnation",
    "CF": "Coastal Flood",
    "LS": "Lakeshore Flood",
    "SU": "High Surf",
    "RP": "Rip Current",
    "BW": "Brisk Wind",
    "SC": "Small Craft",
    "SW": "Small Craft Wind",
    "RB": "Small Craft Rough Bar",
    "SI": "Small Craft Seas",
    "GL": "Gale",
    "SE": "Hazardous Seas",
    "SR": "Storm",
    "HF": "Hurricane Force Wind",
    "TR": "Tropical Storm",
    "HU": "Hurricane",
    "TY": "Typhoon",
    "SS": "Storm Surge",
    "TS": "Tsunami",
    "MA": "Marine",
    "SQ": "Snow Squall",
    "AF": "Ashfall",
    "LO": "Low Water",
    "ZF": "Freezing Fog",
    "ZR": "Freezing Rain",
    "UP": "Ice Accretion",
    "ZY": "Freezing Spray",
    "FW": "Fire Weather",
    "RF": "Red Flag",
    "EQ": "Earthquake",
    "VO": "Volcano",
    "AV": "Avalanche",
}
