"""
Unit Registry for the Projection Catalog.

This module provides a centralized unit system using the `pint` library.
Two concerns live here:

1. The closed set of unit kinds that CRS parameters can carry (metre,
   degree, unity), together with the exact text each kind is written as
   in WKT-2.
2. Angle conversions at component boundaries. The math engine works in
   radians; catalog parameters, CLI input and the Robinson table index
   are in degrees.

Example Usage
-------------
>>> from common.units import angle_to_radians, UnitKind
>>> round(angle_to_radians(180.0), 6)
3.141593
>>> UnitKind.DEGREE.wkt_clause()
'ANGLEUNIT["degree",0.0174532925199433]'
"""

from enum import Enum
from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.constants import DEGREE_FACTOR_TEXT

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


class UnitKind(Enum):
    """Unit kinds a projection parameter can be expressed in.

    Each member carries its WKT-2 name, the WKT-2 unit keyword, the
    conversion factor exactly as written in WKT, and the pint unit name
    used to attach units to bare parameter values.
    """
    METRE = ("metre", "LENGTHUNIT", "1", "meter")
    DEGREE = ("degree", "ANGLEUNIT", DEGREE_FACTOR_TEXT, "degree")
    UNITY = ("unity", "SCALEUNIT", "1", "dimensionless")

    def __init__(self, wkt_name: str, keyword: str, factor_text: str, pint_name: str):
        self.wkt_name = wkt_name
        self.keyword = keyword
        self.factor_text = factor_text
        self.pint_name = pint_name

    def wkt_clause(self, pretty: bool = False) -> str:
        """Render the WKT-2 unit clause, e.g. ``LENGTHUNIT["metre",1]``."""
        sep = ", " if pretty else ","
        return f'{self.keyword}["{self.wkt_name}"{sep}{self.factor_text}]'

    def quantity(self, value: float) -> pint.Quantity:
        """Attach this unit to a bare parameter value."""
        return Q_(value, self.pint_name)


def angle_to_radians(value: Union[float, pint.Quantity], unit: str = "degree") -> float:
    """Convert an angle to radians.

    Parameters
    ----------
    value : float or pint.Quantity
        The angle. Bare numbers are interpreted in `unit`.
    unit : str
        Unit of a bare number (default degrees).

    Returns
    -------
    float
        The angle in radians.

    Raises
    ------
    pint.DimensionalityError
        If a quantity with non-angular units is passed.
    """
    if not isinstance(value, pint.Quantity):
        value = Q_(value, unit)
    return float(value.to(ureg.radian).magnitude)


def angle_to_degrees(value: Union[float, pint.Quantity], unit: str = "radian") -> float:
    """Convert an angle to degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        The angle. Bare numbers are interpreted in `unit`.
    unit : str
        Unit of a bare number (default radians).

    Returns
    -------
    float
        The angle in degrees.
    """
    if not isinstance(value, pint.Quantity):
        value = Q_(value, unit)
    return float(value.to(ureg.degree).magnitude)


