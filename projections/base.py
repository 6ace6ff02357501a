"""
Forward Projection Interface.

Every projection family in the math engine implements `ForwardProjection`,
so new families can be registered without touching the format generator.

Units
-----
- latitude, longitude, central meridian, Δλ: radians
- radius and the returned x, y: the caller's linear unit (metres in the
  catalog)

The engine does not apply false easting/northing; those belong to the CRS
definition, not to the geometric transform.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.types import PlanarPoint


@dataclass(frozen=True)
class ForwardConfig:
    """Configuration for forward projection evaluation.

    Attributes
    ----------
    tolerance : float
        Tolerance for the exact-equality tests that select special cases.
    """
    tolerance: float = 1e-10


DEFAULT_FORWARD_CONFIG = ForwardConfig()


def validate_radius(radius: float) -> float:
    """Fail fast on a radius that would produce spatially wrong output."""
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"Sphere radius must be a positive finite number, got {radius}")
    return float(radius)


def delta_longitude(lon: float, central_meridian: float) -> float:
    """Longitude difference λ - λ0 wrapped into [-π, π]."""
    return math.remainder(lon - central_meridian, 2 * math.pi)


def delta_longitude_array(lons: NDArray[np.float64], central_meridian: float) -> NDArray[np.float64]:
    """Vectorized `delta_longitude`; rounds half to even like math.remainder."""
    dlam = lons - central_meridian
    return dlam - 2 * np.pi * np.round(dlam / (2 * np.pi))


class ForwardProjection(ABC):
    """Abstract base class for forward projection families.

    All projections in this system implement this interface so callers can
    treat them uniformly: one capability, geodetic to planar.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection family."""
        pass

    @property
    @abstractmethod
    def command_alias(self) -> str:
        """PROJ alias of the family."""
        pass

    @abstractmethod
    def forward(
        self,
        lat: float,
        lon: float,
        central_meridian: float,
        radius: float
    ) -> PlanarPoint:
        """Transform geodetic coordinates to planar coordinates.

        Parameters
        ----------
        lat, lon : float
            Geodetic coordinates in radians.
        central_meridian : float
            Longitude of the central meridian in radians.
        radius : float
            Sphere radius; sets the unit of the result.

        Returns
        -------
        PlanarPoint
            (x, y) in the unit of `radius`.
        """
        pass

    def in_domain(self, lat: float, lon: float, central_meridian: float) -> bool:
        """Whether the point lies in the region this projection maps."""
        return abs(lat) <= math.pi / 2

    def forward_many(
        self,
        lats: ArrayLike,
        lons: ArrayLike,
        central_meridian: float,
        radius: float
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Project arrays of coordinates.

        Parameters
        ----------
        lats, lons : array_like
            Coordinates in radians; broadcast against each other.
        central_meridian : float
            Central meridian in radians.
        radius : float
            Sphere radius.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (x, y) arrays with the broadcast shape of the inputs.
        """
        validate_radius(radius)
        lats_b, lons_b = np.broadcast_arrays(
            np.asarray(lats, dtype=np.float64),
            np.asarray(lons, dtype=np.float64)
        )
        xs = np.empty(lats_b.shape, dtype=np.float64)
        ys = np.empty(lats_b.shape, dtype=np.float64)
        for idx in np.ndindex(lats_b.shape):
            xs[idx], ys[idx] = self.forward(
                float(lats_b[idx]), float(lons_b[idx]), central_meridian, radius
            )
        return xs, ys

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
