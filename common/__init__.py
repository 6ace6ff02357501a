"""
Common utilities and infrastructure for the projection catalog.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Unit registry and angle conversions
- Shared value types
- Logging infrastructure
"""

from common.constants import GeodeticConstants
from common.units import UnitKind, angle_to_radians, angle_to_degrees
from common.types import GeoCoordinate, PlanarPoint
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "UnitKind",
    "angle_to_radians",
    "angle_to_degrees",
    "GeoCoordinate",
    "PlanarPoint",
    "get_logger",
]
