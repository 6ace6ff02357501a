"""
Geodetic Constants for the Projection Catalog.

This module provides the reference-surface constants used by the CRS
format generator and the forward projection engine. Every constant carries
its unit and provenance so the emitted WKT/PROJ text can be traced back to
an authoritative definition.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Authalic sphere radius: IUGG, as used by PROJ/ESRI "Sphere" definitions
- Robinson calibration constants: Robinson, A.H. (1974); Snyder (1990)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of reference-surface constants used throughout the system.

    Reference Surfaces
    ------------------
    The catalog supports exactly two datum kinds: a sphere of radius
    6,371,000 m and the WGS84 ellipsoid. Both the WKT emitters and the
    JSON document read their numbers from here.

    Projection Calibration
    ----------------------
    Fixed scale constants of the Robinson projection family. These are
    part of the projection's definition and must not be tuned.
    """

    # =========================================================================
    # Sphere
    # =========================================================================

    SPHERE_RADIUS: Final[Constant] = Constant(
        value=6_371_000.0,
        unit="m",
        source="ESRI GCS_Sphere / EPSG:4047",
        description="Radius of the reference sphere"
    )

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening of WGS84 ellipsoid: 1/f = a / (a - b)"
    )

    # =========================================================================
    # Angular Unit
    # =========================================================================

    DEGREE_IN_RADIANS: Final[Constant] = Constant(
        value=0.0174532925199433,
        unit="rad",
        source="EPSG:9102",
        description="Size of one degree in radians, as written in WKT UNIT clauses"
    )

    # =========================================================================
    # Robinson Calibration
    # =========================================================================

    ROBINSON_X_SCALE: Final[Constant] = Constant(
        value=0.8487,
        unit="dimensionless",
        source="Robinson (1974)",
        description="Scale applied to the parallel-length ratio X"
    )

    ROBINSON_Y_SCALE: Final[Constant] = Constant(
        value=1.3523,
        unit="dimensionless",
        source="Robinson (1974)",
        description="Scale applied to the meridian-distance ratio Y"
    )


# Literal spellings used inside WKT text. These are text, not numbers: the
# emitted grammar must match byte for byte.
DEGREE_FACTOR_TEXT: Final[str] = "0.0174532925199433"

SPHERE_RADIUS_M: Final[float] = GeodeticConstants.SPHERE_RADIUS.value
WGS84_A_M: Final[float] = GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value
WGS84_INV_F: Final[float] = GeodeticConstants.WGS84_INVERSE_FLATTENING.value
