"""
WKT-1 Emitter (OGC 01-009 / ESRI dialect).

Grammar::

    PROJCS["<canonical>",<GEOGCS>,PROJECTION["<canonical>"],
           PARAMETER["<name>",<value>]...,UNIT["Meter",1.0]]

Parameters are written in declared order with no unit annotation; their
units are implied by the GEOGCS angular unit and the trailing linear unit.
"""

from catalog.model import ProjectionDefinition
from crs_formats.datums import build_geogcs
from crs_formats.tables import format_number


def build_wkt1(definition: ProjectionDefinition) -> str:
    """Single-line (machine) WKT-1."""
    pn = definition.projection_name
    params = ",".join(
        f'PARAMETER["{p.name}",{format_number(p.value)}]'
        for p in definition.effective_parameters
    )
    return (
        f'PROJCS["{pn}",{build_geogcs(definition.datum_kind)},'
        f'PROJECTION["{pn}"],{params},UNIT["Meter",1.0]]'
    )


def build_wkt1_pretty(definition: ProjectionDefinition) -> str:
    """Multi-line (human-readable) WKT-1."""
    pn = definition.projection_name
    params = ",\n".join(
        f'  PARAMETER["{p.name}", {format_number(p.value)}]'
        for p in definition.effective_parameters
    )
    return (
        f'PROJCS["{pn}",\n'
        f'  {build_geogcs(definition.datum_kind, pretty=True)},\n'
        f'  PROJECTION["{pn}"],\n'
        f'{params},\n'
        f'  UNIT["Meter", 1.0]\n'
        f']'
    )
