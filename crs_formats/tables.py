"""
Parameter Lookup Tables.

The parameter vocabulary is closed and small, so its mappings are kept as
static tables rather than branches inside the emitters:

- ``PARAMETER_SPECS``: ESRI parameter name → (EPSG display name, EPSG
  parameter code, unit kind), used by WKT-2 and the JSON document.
- ``PROJ_FLAGS``: ESRI parameter name → PROJ ``+flag``.

Names outside the tables fall back to a humanized label, no EPSG id, the
angular unit, and a lowercased PROJ flag.
"""

from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Mapping, Optional

from common.logging_config import get_logger
from common.units import UnitKind

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParameterSpec:
    """How one parameter name is described in standardized formats.

    Attributes
    ----------
    display_name : str
        EPSG parameter name, or the humanized fallback label.
    epsg_code : int, optional
        EPSG parameter code; None for unknown parameters.
    unit : UnitKind
        Unit the parameter value is expressed in.
    """
    display_name: str
    epsg_code: Optional[int]
    unit: UnitKind


PARAMETER_SPECS: Mapping[str, ParameterSpec] = MappingProxyType({
    "Central_Meridian": ParameterSpec("Longitude of natural origin", 8802, UnitKind.DEGREE),
    "False_Easting": ParameterSpec("False easting", 8806, UnitKind.METRE),
    "False_Northing": ParameterSpec("False northing", 8807, UnitKind.METRE),
    "Scale_Factor": ParameterSpec("Scale factor at natural origin", 8805, UnitKind.UNITY),
    "Standard_Parallel_1": ParameterSpec("Latitude of 1st standard parallel", 8823, UnitKind.DEGREE),
    "Standard_Parallel_2": ParameterSpec("Latitude of 2nd standard parallel", 8824, UnitKind.DEGREE),
    "Latitude_Of_Origin": ParameterSpec("Latitude of natural origin", 8801, UnitKind.DEGREE),
    "Latitude_Of_Center": ParameterSpec("Latitude of projection centre", 8811, UnitKind.DEGREE),
})

PROJ_FLAGS: Mapping[str, str] = MappingProxyType({
    "Central_Meridian": "lon_0",
    "False_Easting": "x_0",
    "False_Northing": "y_0",
    "Scale_Factor": "k",
    "Standard_Parallel_1": "lat_1",
    "Standard_Parallel_2": "lat_2",
    "Latitude_Of_Origin": "lat_0",
    "Latitude_Of_Center": "lat_0",
})


def humanize(name: str) -> str:
    """``False_Easting`` → ``False Easting``."""
    return name.replace("_", " ")


def parameter_spec(name: str) -> ParameterSpec:
    """Look up a parameter, falling back for names outside the vocabulary."""
    spec = PARAMETER_SPECS.get(name)
    if spec is None:
        logger.debug(f"Unknown parameter name {name!r}; using humanized fallback")
        spec = ParameterSpec(humanize(name), None, UnitKind.DEGREE)
    return spec


def proj_flag(name: str) -> str:
    """PROJ flag for a parameter; unknown names are lowercased verbatim."""
    flag = PROJ_FLAGS.get(name)
    if flag is None:
        logger.debug(f"Unknown parameter name {name!r}; using flag {name.lower()!r}")
        flag = name.lower()
    return flag


def format_number(value: Real) -> str:
    """Render a parameter value the way the catalog writes numbers.

    Integral values have no fractional part (``0``, ``500000``); anything
    else uses the shortest round-trip representation (``0.9996``).
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def json_number(value: Real):
    """Numeric value for the JSON document, integral values as int."""
    value = float(value)
    return int(value) if value.is_integer() else value
