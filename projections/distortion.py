"""
Tissot Indicatrix Sampling.

Since every map projection distorts, the preview renderer draws Tissot's
indicatrices (small circles on the sphere, projected) at a regular grid of
sample points. This module computes the distortion ellipse numerically for
any `ForwardProjection` and produces the sample grid.

Implementation
--------------
Partial derivatives are taken by central differences on the sphere. From
the scale along the meridian (h), along the parallel (k) and the areal
scale (s), the semi-axes follow as

    a + b = sqrt(h² + k² + 2s)
    a - b = sqrt(h² + k² - 2s)

and the maximum angular distortion is ω = 2·asin((a - b) / (a + b)).

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395, pp. 20-26.
- Tissot, A. (1859). Mémoire sur la représentation des surfaces.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import math

import numpy as np

from common.logging_config import get_logger
from common.units import angle_to_degrees, angle_to_radians
from projections.base import ForwardProjection, validate_radius

logger = get_logger(__name__)


@dataclass
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    Attributes
    ----------
    meridian_scale : float
        h, scale factor along the meridian.
    parallel_scale : float
        k, scale factor along the parallel.
    semi_major : float
        a, maximum scale factor at the point.
    semi_minor : float
        b, minimum scale factor at the point.
    area_scale : float
        s = a·b, areal distortion factor.
    angular_distortion_rad : float
        ω, maximum angular distortion in radians.

    Notes
    -----
    - For a conformal projection: semi_major = semi_minor (circle)
    - For an equal-area projection: area_scale = 1.0
    """
    meridian_scale: float
    parallel_scale: float
    semi_major: float
    semi_minor: float
    area_scale: float
    angular_distortion_rad: float

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal."""
        return abs(self.semi_major - self.semi_minor) < 1e-6

    @property
    def is_equal_area(self) -> bool:
        """Check if projection is locally equal-area."""
        return abs(self.area_scale - 1.0) < 1e-6

    @property
    def angular_distortion_deg(self) -> float:
        return angle_to_degrees(self.angular_distortion_rad)


@dataclass
class TissotConfig:
    """Configuration for the indicatrix sample grid.

    Attributes
    ----------
    lat_limit_deg : float
        Samples span latitudes [-lat_limit_deg, lat_limit_deg].
    lat_step_deg : float
        Latitude spacing of samples.
    lon_limit_deg : float
        Samples span longitudes [-lon_limit_deg, lon_limit_deg].
    lon_step_deg : float
        Longitude spacing of samples.
    circle_radius_deg : float
        Angular radius of the drawn indicatrix circles.
    delta : float
        Angular step (radians) for numerical differentiation.
    """
    lat_limit_deg: float = 60.0
    lat_step_deg: float = 30.0
    lon_limit_deg: float = 150.0
    lon_step_deg: float = 30.0
    circle_radius_deg: float = 5.0
    delta: float = 1e-5


@dataclass
class TissotSample:
    """One indicatrix sample on the grid."""
    lat_deg: float
    lon_deg: float
    x: float
    y: float
    indicatrix: TissotIndicatrix


def compute_tissot_indicatrix(
    projection: ForwardProjection,
    lat_rad: float,
    lon_rad: float,
    central_meridian: float = 0.0,
    radius: float = 1.0,
    delta: float = 1e-5
) -> TissotIndicatrix:
    """Compute Tissot's indicatrix numerically.

    Parameters
    ----------
    projection : ForwardProjection
        The projection to analyze.
    lat_rad, lon_rad : float
        Location in radians. Must not be a pole.
    central_meridian : float
        Central meridian in radians.
    radius : float
        Sphere radius.
    delta : float
        Small angular offset for numerical differentiation.

    Returns
    -------
    TissotIndicatrix
        Local distortion characteristics.
    """
    R = validate_radius(radius)

    def fwd(lat: float, lon: float) -> Tuple[float, float]:
        return projection.forward(lat, lon, central_meridian, R)

    # ∂x/∂λ, ∂y/∂λ (east-west)
    x_e, y_e = fwd(lat_rad, lon_rad + delta)
    x_w, y_w = fwd(lat_rad, lon_rad - delta)
    dxdl = (x_e - x_w) / (2 * delta)
    dydl = (y_e - y_w) / (2 * delta)

    # ∂x/∂φ, ∂y/∂φ (north-south)
    x_n, y_n = fwd(lat_rad + delta, lon_rad)
    x_s, y_s = fwd(lat_rad - delta, lon_rad)
    dxdp = (x_n - x_s) / (2 * delta)
    dydp = (y_n - y_s) / (2 * delta)

    cos_lat = math.cos(lat_rad)

    h = math.hypot(dxdp, dydp) / R
    k = math.hypot(dxdl, dydl) / (R * cos_lat)
    s = abs(dxdp * dydl - dydp * dxdl) / (R * R * cos_lat)

    a_plus_b = math.sqrt(h * h + k * k + 2 * s)
    a_minus_b = math.sqrt(max(0.0, h * h + k * k - 2 * s))
    a = (a_plus_b + a_minus_b) / 2
    b = (a_plus_b - a_minus_b) / 2

    omega = 2 * math.asin(min(1.0, a_minus_b / a_plus_b))

    return TissotIndicatrix(
        meridian_scale=h,
        parallel_scale=k,
        semi_major=a,
        semi_minor=b,
        area_scale=s,
        angular_distortion_rad=omega
    )


def sample_points(config: TissotConfig) -> List[Tuple[float, float]]:
    """Grid of (lat_deg, lon_deg) sample locations."""
    lats = np.arange(-config.lat_limit_deg, config.lat_limit_deg + 1e-9, config.lat_step_deg)
    lons = np.arange(-config.lon_limit_deg, config.lon_limit_deg + 1e-9, config.lon_step_deg)
    return [(float(lat), float(lon)) for lat in lats for lon in lons]


def tissot_grid(
    projection: ForwardProjection,
    central_meridian_deg: float = 0.0,
    radius: float = 1.0,
    config: Optional[TissotConfig] = None
) -> List[TissotSample]:
    """Compute indicatrices over the sample grid.

    Points outside the projection's domain (e.g. the far hemisphere of
    Nicolosi Globular) are skipped.

    Parameters
    ----------
    projection : ForwardProjection
        Projection to analyze.
    central_meridian_deg : float
        Central meridian in DEGREES.
    radius : float
        Sphere radius.
    config : TissotConfig, optional
        Grid configuration.

    Returns
    -------
    List[TissotSample]
        One sample per in-domain grid point.
    """
    config = config or TissotConfig()
    cm = angle_to_radians(central_meridian_deg)

    samples = []
    for lat_deg, lon_deg in sample_points(config):
        lat = angle_to_radians(lat_deg)
        lon = angle_to_radians(lon_deg)
        if not projection.in_domain(lat, lon, cm):
            continue
        x, y = projection.forward(lat, lon, cm, radius)
        indicatrix = compute_tissot_indicatrix(
            projection, lat, lon, cm, radius, delta=config.delta
        )
        samples.append(TissotSample(lat_deg, lon_deg, x, y, indicatrix))

    logger.debug(f"Computed {len(samples)} Tissot samples for {projection.name}")
    return samples
