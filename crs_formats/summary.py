"""Human-readable summary rows for a definition's WKT-1 parameters."""

from typing import List, Tuple

from catalog.model import ProjectionDefinition
from common.units import UnitKind
from crs_formats.tables import format_number, humanize, parameter_spec

UNIT_SUFFIXES = {
    UnitKind.DEGREE: "°",
    UnitKind.METRE: " m",
    UnitKind.UNITY: "",
}


def _value_with_unit(name: str, value: float) -> str:
    return f"{format_number(value)}{UNIT_SUFFIXES[parameter_spec(name).unit]}"


def wkt1_summary(definition: ProjectionDefinition) -> List[Tuple[str, str]]:
    """Label/value rows describing the WKT-1 definition."""
    datum = "D_Sphere (R = 6,371,000 m)" if definition.is_sphere else "D_WGS_1984"
    rows = [
        ("Projection Name", definition.projection_name),
        ("Datum", datum),
        ("Projection Method", definition.name),
    ]
    rows.extend(
        (humanize(p.name), _value_with_unit(p.name, p.value))
        for p in definition.effective_parameters
    )
    rows.append(("Linear Unit", "Meter (1.0)"))
    return rows
