"""
Nicolosi Globular Projection.

A polyconic projection that maps one hemisphere into a circle of radius
(π/2)·R. Meridians and parallels are circular arcs; the central meridian
and the equator are straight.

The closed-form expressions have removable singularities on the central
meridian, the equator, the bounding meridians and at the poles. Those
four cases are evaluated exactly before the general formula is tried.

References
----------
- Snyder, J.P. (1989). An Album of Map Projections. USGS Prof. Paper 1453, p. 234.
- PROJ ``nicol`` operation.
"""

import math

from common.logging_config import get_logger
from common.types import PlanarPoint
from projections.base import (
    DEFAULT_FORWARD_CONFIG,
    ForwardConfig,
    ForwardProjection,
    delta_longitude,
    validate_radius,
)

logger = get_logger(__name__)

HALF_PI = math.pi / 2


def nicolosi_forward(
    lat: float,
    lon: float,
    central_meridian: float = 0.0,
    radius: float = 1.0,
    config: ForwardConfig = DEFAULT_FORWARD_CONFIG
) -> PlanarPoint:
    """Forward Nicolosi Globular transform on the sphere.

    Parameters
    ----------
    lat, lon : float
        Geodetic coordinates in radians.
    central_meridian : float
        Central meridian in radians.
    radius : float
        Sphere radius.
    config : ForwardConfig
        Special-case tolerance.

    Returns
    -------
    PlanarPoint
        (x, y) in the unit of `radius`.
    """
    R = validate_radius(radius)
    eps = config.tolerance
    dlam = delta_longitude(lon, central_meridian)
    phi = lat

    if abs(dlam) < eps:
        return PlanarPoint(0.0, R * phi)
    if abs(phi) < eps:
        return PlanarPoint(R * dlam, 0.0)
    if abs(abs(dlam) - HALF_PI) < eps:
        return PlanarPoint(R * dlam * math.cos(phi), HALF_PI * R * math.sin(phi))
    if abs(abs(phi) - HALF_PI) < eps:
        return PlanarPoint(0.0, R * phi)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)

    b = math.pi / (2 * dlam) - 2 * dlam / math.pi
    c = 2 * phi / math.pi
    d = (1 - c * c) / (sin_phi - c)

    b2_d2 = (b * b) / (d * d)
    d2_b2 = (d * d) / (b * b)

    M = (b * sin_phi / d - b / 2) / (1 + b2_d2)
    N = (d2_b2 * sin_phi + d / 2) / (1 + d2_b2)

    rad_x = M * M + cos_phi * cos_phi / (1 + b2_d2)
    rad_y = N * N - (d2_b2 * sin_phi * sin_phi + d * sin_phi - 1) / (1 + d2_b2)
    if rad_x < 0 or rad_y < 0:
        logger.debug(
            f"Clamped negative radicand at lat={phi:.12f}, dlam={dlam:.12f} "
            f"(rad_x={rad_x:.3e}, rad_y={rad_y:.3e})"
        )

    sign_x = 1.0 if dlam > 0 else -1.0
    sign_y = 1.0 if phi < 0 else -1.0

    x = HALF_PI * R * (M + sign_x * math.sqrt(max(0.0, rad_x)))
    y = HALF_PI * R * (N + sign_y * math.sqrt(max(0.0, rad_y)))
    return PlanarPoint(x, y)


class NicolosiGlobular(ForwardProjection):
    """Nicolosi Globular forward projection.

    Parameters
    ----------
    config : ForwardConfig
        Special-case tolerance.

    Notes
    -----
    The projection is defined for one hemisphere, |λ - λ0| ≤ π/2. Points
    outside it are still evaluated but are not meaningful; `in_domain`
    reports which points a renderer should keep.
    """

    def __init__(self, config: ForwardConfig = DEFAULT_FORWARD_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return "Nicolosi Globular"

    @property
    def command_alias(self) -> str:
        return "nicol"

    def forward(self, lat: float, lon: float, central_meridian: float, radius: float) -> PlanarPoint:
        return nicolosi_forward(lat, lon, central_meridian, radius, self._config)

    def in_domain(self, lat: float, lon: float, central_meridian: float) -> bool:
        return (
            abs(lat) <= HALF_PI
            and abs(delta_longitude(lon, central_meridian)) <= HALF_PI + self._config.tolerance
        )
