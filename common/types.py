"""
Shared Types for the Projection Catalog.

This module defines the small value types passed between the math engine,
the format generator and their callers.

Design Rationale
----------------
Using typed records instead of bare tuples provides:
1. Self-documenting code - field names describe the data
2. Clear unit expectations in docstrings
3. Tuple compatibility where callers only want ``x, y = point``
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple
import math


class PlanarPoint(NamedTuple):
    """A projected point on the map plane.

    Attributes
    ----------
    x : float
        Easting, in the linear unit of the sphere radius used.
    y : float
        Northing, in the linear unit of the sphere radius used.
    """
    x: float
    y: float


@dataclass(frozen=True)
class GeoCoordinate:
    """A geographic coordinate on the sphere.

    Attributes
    ----------
    latitude : float
        Latitude in RADIANS (not degrees). Range: [-π/2, π/2].
    longitude : float
        Longitude in RADIANS (not degrees).

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - For display, use the `to_degrees()` method.

    Examples
    --------
    >>> coord = GeoCoordinate.from_degrees(45.0, -90.0)
    >>> coord.to_degrees()
    (45.0, -90.0)
    """
    latitude: float  # radians
    longitude: float  # radians

    def __post_init__(self):
        """Validate latitude range."""
        if not -math.pi / 2 <= self.latitude <= math.pi / 2:
            raise ValueError(
                f"Latitude {self.latitude} rad out of range [-π/2, π/2]. "
                f"Did you pass degrees instead of radians?"
            )

    def to_degrees(self) -> Tuple[float, float]:
        """Convert to degrees for display.

        Returns
        -------
        Tuple[float, float]
            (latitude_degrees, longitude_degrees)
        """
        return math.degrees(self.latitude), math.degrees(self.longitude)

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float) -> 'GeoCoordinate':
        """Create coordinate from degrees (convenience constructor).

        Parameters
        ----------
        lat_deg : float
            Latitude in degrees.
        lon_deg : float
            Longitude in degrees.

        Returns
        -------
        GeoCoordinate
            Coordinate with internally stored radians.
        """
        return cls(latitude=math.radians(lat_deg), longitude=math.radians(lon_deg))
