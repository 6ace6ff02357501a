"""
WKT-2 Emitter (ISO 19162:2019).

Grammar::

    PROJCRS["<name>",<BASEGEOGCRS>,
        CONVERSION["<name>",METHOD["<name>",ID["PROJ","<alias>"]],
                   PARAMETER["<epsg name>",<value>,<UNIT>[,ID["EPSG",<code>]]]...],
        CS[Cartesian,2],
        AXIS["(E)",east,ORDER[1],LENGTHUNIT["metre",1]],
        AXIS["(N)",north,ORDER[2],LENGTHUNIT["metre",1]]]

Every parameter carries an explicit unit. Definitions without a PROJ alias
use ``custom`` as the method id code.
"""

from catalog.model import ProjectionDefinition, ProjectionParameter
from crs_formats.datums import build_base_geogcrs
from crs_formats.tables import format_number, parameter_spec

CUSTOM_METHOD_CODE = "custom"


def method_code(definition: ProjectionDefinition) -> str:
    """Code used in the METHOD's ``ID["PROJ",...]``."""
    return definition.command_alias or CUSTOM_METHOD_CODE


def _parameter(p: ProjectionParameter) -> str:
    spec = parameter_spec(p.name)
    id_str = f',ID["EPSG",{spec.epsg_code}]' if spec.epsg_code else ""
    return f'PARAMETER["{spec.display_name}",{format_number(p.value)},{spec.unit.wkt_clause()}{id_str}]'


def _parameter_pretty(p: ProjectionParameter) -> str:
    spec = parameter_spec(p.name)
    lines = [
        f'    PARAMETER["{spec.display_name}", {format_number(p.value)},',
        f'      {spec.unit.wkt_clause(pretty=True)}',
    ]
    if spec.epsg_code:
        lines[-1] += ","
        lines.append(f'      ID["EPSG", {spec.epsg_code}]]')
    else:
        lines[-1] += "]"
    return "\n".join(lines)


def build_wkt2(definition: ProjectionDefinition) -> str:
    """Single-line (machine) WKT-2."""
    name = definition.name
    params = ",".join(_parameter(p) for p in definition.effective_parameters)
    return (
        f'PROJCRS["{name}",{build_base_geogcrs(definition.datum_kind)},'
        f'CONVERSION["{name}",METHOD["{name}",ID["PROJ","{method_code(definition)}"]],{params}],'
        f'CS[Cartesian,2],'
        f'AXIS["(E)",east,ORDER[1],LENGTHUNIT["metre",1]],'
        f'AXIS["(N)",north,ORDER[2],LENGTHUNIT["metre",1]]]'
    )


def build_wkt2_pretty(definition: ProjectionDefinition) -> str:
    """Multi-line (human-readable) WKT-2."""
    name = definition.name
    params = ",\n".join(_parameter_pretty(p) for p in definition.effective_parameters)
    return (
        f'PROJCRS["{name}",\n'
        f'  {build_base_geogcrs(definition.datum_kind, pretty=True)},\n'
        f'  CONVERSION["{name}",\n'
        f'    METHOD["{name}",\n'
        f'      ID["PROJ", "{method_code(definition)}"]],\n'
        f'{params}\n'
        f'  ],\n'
        f'  CS[Cartesian, 2],\n'
        f'    AXIS["(E)", east,\n'
        f'      ORDER[1],\n'
        f'      LENGTHUNIT["metre", 1]],\n'
        f'    AXIS["(N)", north,\n'
        f'      ORDER[2],\n'
        f'      LENGTHUNIT["metre", 1]]\n'
        f']'
    )
