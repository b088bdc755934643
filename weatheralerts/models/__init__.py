"""Code tables for alert products."""

from .vtec_codes import PHENOMENON_NAMES, VTECAction, VTECProductClass, VTECSignificance

__all__ = ["PHENOMENON_NAMES", "VTECAction", "VTECProductClass", "VTECSignificance"]
