"""
Forward Projection Math Engine.

Pure functions mapping (latitude, longitude, central meridian, radius) to
planar (x, y) for each supported projection family:

- Nicolosi Globular: closed-form polyconic
- Robinson: table-interpolated pseudocylindrical

All angles are radians unless a name says otherwise (``*_deg``).
"""

from projections.base import ForwardConfig, ForwardProjection
from projections.nicolosi import NicolosiGlobular, nicolosi_forward
from projections.robinson import Robinson, RobinsonRatios, robinson_forward, robinson_xy
from projections.distortion import (
    TissotConfig,
    TissotIndicatrix,
    compute_tissot_indicatrix,
    tissot_grid,
)

__all__ = [
    "ForwardConfig",
    "ForwardProjection",
    "NicolosiGlobular",
    "nicolosi_forward",
    "Robinson",
    "RobinsonRatios",
    "robinson_forward",
    "robinson_xy",
    "TissotConfig",
    "TissotIndicatrix",
    "compute_tissot_indicatrix",
    "tissot_grid",
]
