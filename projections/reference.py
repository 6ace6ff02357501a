"""
PROJ Reference Transformer.

Wraps `pyproj` to evaluate a catalog definition's generated PROJ string,
so the engine's output can be cross-checked against the reference
implementation of the same projection.
"""

from typing import Tuple

import pint
from pyproj import CRS, Transformer

from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from common.types import PlanarPoint
from common.units import angle_to_degrees, angle_to_radians, ureg
from crs_formats.proj_string import build_proj_string
from crs_formats.tables import parameter_spec
from projections.base import ForwardProjection

logger = get_logger(__name__)


class ReferenceTransformer:
    """Forward transform through PROJ for a catalog definition.

    Parameters
    ----------
    definition : ProjectionDefinition
        Definition whose projection string is evaluated.

    Raises
    ------
    ValueError
        If the definition has no PROJ alias.
    """

    def __init__(self, definition: ProjectionDefinition):
        proj_string = build_proj_string(definition)
        if proj_string is None:
            raise ValueError(
                f"Projection {definition.id} has no PROJ alias; no reference transform exists"
            )
        self._definition = definition
        self._proj_string = proj_string
        self._crs_proj = CRS.from_proj4(proj_string)
        # Geographic CRS on the same datum, so no datum shift is applied.
        self._crs_geo = self._crs_proj.geodetic_crs
        self._to_proj = Transformer.from_crs(self._crs_geo, self._crs_proj, always_xy=True)

    def _parameter(self, name: str) -> pint.Quantity:
        value = self._definition.parameter_value(name, 0.0)
        return parameter_spec(name).unit.quantity(value)

    @property
    def proj_string(self) -> str:
        return self._proj_string

    @property
    def crs(self) -> CRS:
        return self._crs_proj

    def forward(self, lat_rad: float, lon_rad: float) -> PlanarPoint:
        """Project geodetic coordinates (radians) through PROJ."""
        x, y = self._to_proj.transform(angle_to_degrees(lon_rad), angle_to_degrees(lat_rad))
        return PlanarPoint(float(x), float(y))

    def deviation(
        self,
        projection: ForwardProjection,
        lat_rad: float,
        lon_rad: float,
        radius: float
    ) -> Tuple[float, float]:
        """Difference (dx, dy) between the engine and PROJ at one point.

        The engine is evaluated with the definition's central meridian;
        false easting/northing are added so both sides are comparable.
        """
        cm = angle_to_radians(self._parameter("Central_Meridian"))
        fe = self._parameter("False_Easting").to(ureg.meter).magnitude
        fn = self._parameter("False_Northing").to(ureg.meter).magnitude

        ours = projection.forward(lat_rad, lon_rad, cm, radius)
        ref = self.forward(lat_rad, lon_rad)
        dx = ours.x + fe - ref.x
        dy = ours.y + fn - ref.y
        logger.debug(
            f"{self._definition.id} vs PROJ at ({lat_rad:.6f}, {lon_rad:.6f}): "
            f"dx={dx:.6e}, dy={dy:.6e}"
        )
        return dx, dy
