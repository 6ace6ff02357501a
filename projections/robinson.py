"""
Robinson Projection.

A pseudocylindrical compromise projection defined empirically: instead of
a formula, Robinson published a table of parallel lengths (X) and
distances from the equator (Y) at 5° intervals of latitude. Intermediate
latitudes are interpolated linearly.

Units
-----
- lat, lon, central meridian, Δλ: radians
- table index: absolute latitude in degrees
- X, Y: dimensionless ratios in [0, 1]

References
----------
- Robinson, A.H. (1974). A New Map Projection: Its Development and
  Characteristics. International Yearbook of Cartography, 14, 145-155.
- Snyder, J.P. (1990). The Robinson projection: a computation algorithm.
  Cartography and Geographic Information Systems, 17(4), 301-305.
"""

from typing import NamedTuple, Tuple
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.constants import GeodeticConstants
from common.logging_config import get_logger
from common.types import PlanarPoint
from projections.base import (
    ForwardProjection,
    delta_longitude,
    delta_longitude_array,
    validate_radius,
)

logger = get_logger(__name__)

TABLE_STEP_DEG = 5.0

# Columns: latitude (deg), X (parallel length), Y (distance from equator)
ROBINSON_TABLE: NDArray[np.float64] = np.array([
    [0.0, 1.0000, 0.0000],
    [5.0, 0.9986, 0.0620],
    [10.0, 0.9954, 0.1240],
    [15.0, 0.9900, 0.1860],
    [20.0, 0.9822, 0.2480],
    [25.0, 0.9730, 0.3100],
    [30.0, 0.9600, 0.3720],
    [35.0, 0.9427, 0.4340],
    [40.0, 0.9216, 0.4958],
    [45.0, 0.8962, 0.5571],
    [50.0, 0.8679, 0.6176],
    [55.0, 0.8350, 0.6769],
    [60.0, 0.7986, 0.7346],
    [65.0, 0.7597, 0.7903],
    [70.0, 0.7186, 0.8435],
    [75.0, 0.6732, 0.8936],
    [80.0, 0.6213, 0.9394],
    [85.0, 0.5722, 0.9761],
    [90.0, 0.5322, 1.0000],
])
ROBINSON_TABLE.setflags(write=False)

LAST_ROW = len(ROBINSON_TABLE) - 1

X_SCALE = GeodeticConstants.ROBINSON_X_SCALE.value
Y_SCALE = GeodeticConstants.ROBINSON_Y_SCALE.value


class RobinsonRatios(NamedTuple):
    """Interpolated table ratios at one latitude."""
    x: float  # parallel length
    y: float  # distance from equator, unsigned


def robinson_xy(lat_deg: float) -> RobinsonRatios:
    """Interpolate the Robinson table at a latitude.

    Parameters
    ----------
    lat_deg : float
        Latitude in DEGREES. Only the magnitude is used; |lat| above 90°
        is clamped to the 90° row.

    Returns
    -------
    RobinsonRatios
        (X, Y) with Y unsigned.
    """
    a = abs(lat_deg)
    if a > 90.0:
        logger.debug(f"Latitude {lat_deg}° outside table; clamping to 90°")
        a = 90.0

    i = int(a // TABLE_STEP_DEG)
    if i >= LAST_ROW:
        return RobinsonRatios(float(ROBINSON_TABLE[LAST_ROW, 1]), float(ROBINSON_TABLE[LAST_ROW, 2]))

    frac = (a - i * TABLE_STEP_DEG) / TABLE_STEP_DEG
    lo = ROBINSON_TABLE[i]
    hi = ROBINSON_TABLE[i + 1]
    x = lo[1] + frac * (hi[1] - lo[1])
    y = lo[2] + frac * (hi[2] - lo[2])
    return RobinsonRatios(float(x), float(y))


def robinson_forward(
    lat: float,
    lon: float,
    central_meridian: float = 0.0,
    radius: float = 1.0
) -> PlanarPoint:
    """Forward Robinson transform on the sphere.

    Parameters
    ----------
    lat, lon : float
        Geodetic coordinates in radians.
    central_meridian : float
        Central meridian in radians.
    radius : float
        Sphere radius.

    Returns
    -------
    PlanarPoint
        (x, y) in the unit of `radius`.
    """
    R = validate_radius(radius)
    dlam = delta_longitude(lon, central_meridian)
    ratios = robinson_xy(math.degrees(lat))
    x = X_SCALE * R * ratios.x * dlam
    y = Y_SCALE * R * math.copysign(ratios.y, lat)
    return PlanarPoint(x, y)


class Robinson(ForwardProjection):
    """Robinson forward projection (spherical form)."""

    @property
    def name(self) -> str:
        return "Robinson"

    @property
    def command_alias(self) -> str:
        return "robin"

    def forward(self, lat: float, lon: float, central_meridian: float, radius: float) -> PlanarPoint:
        return robinson_forward(lat, lon, central_meridian, radius)

    def forward_many(
        self,
        lats: ArrayLike,
        lons: ArrayLike,
        central_meridian: float,
        radius: float
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        # np.interp clamps at the table ends, matching the scalar path.
        R = validate_radius(radius)
        lats_b, lons_b = np.broadcast_arrays(
            np.asarray(lats, dtype=np.float64),
            np.asarray(lons, dtype=np.float64)
        )
        abs_deg = np.minimum(np.abs(np.degrees(lats_b)), 90.0)
        X = np.interp(abs_deg, ROBINSON_TABLE[:, 0], ROBINSON_TABLE[:, 1])
        Y = np.interp(abs_deg, ROBINSON_TABLE[:, 0], ROBINSON_TABLE[:, 2])
        dlam = delta_longitude_array(lons_b, central_meridian)
        xs = X_SCALE * R * X * dlam
        ys = Y_SCALE * R * np.copysign(Y, lats_b)
        return xs, ys
