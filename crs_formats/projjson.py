"""
JSON CRS Document Emitter.

Produces a structured description of a projected CRS for web APIs and data
pipelines. The primary identifier is chosen by priority: ESRI WKID, then
EPSG code, then the PROJ alias (``custom`` when there is none).
"""

import json
from typing import Any, Dict

from catalog.model import ProjectionDefinition
from crs_formats.datums import build_json_base_crs
from crs_formats.proj_string import build_proj_string
from crs_formats.tables import humanize, json_number, parameter_spec
from crs_formats.wkt2 import method_code


def primary_identifier(definition: ProjectionDefinition) -> Dict[str, Any]:
    """``{"authority": ..., "code": ...}`` for the document's ``id``."""
    registry = definition.registry_authority
    if registry is not None:
        return {"authority": registry.authority, "code": registry.code}
    return {"authority": "PROJ", "code": method_code(definition)}


def build_json_document(definition: ProjectionDefinition) -> Dict[str, Any]:
    """JSON document as a plain dict."""
    parameters = [
        {
            "name": humanize(p.name),
            "value": json_number(p.value),
            "unit": parameter_spec(p.name).unit.wkt_name,
        }
        for p in definition.effective_parameters
    ]
    props = definition.properties
    return {
        "type": "ProjectedCRS",
        "name": definition.name,
        "id": primary_identifier(definition),
        "baseGeographicCRS": build_json_base_crs(definition.datum_kind),
        "conversion": {
            "name": definition.name,
            "method": {
                "name": definition.name,
                "projAlias": definition.command_alias,
            },
            "parameters": parameters,
        },
        "coordinateSystem": {
            "subtype": "Cartesian",
            "axis": [
                {"name": "Easting", "abbreviation": "E", "direction": "east", "unit": "metre"},
                {"name": "Northing", "abbreviation": "N", "direction": "north", "unit": "metre"},
            ],
        },
        "projString": build_proj_string(definition),
        "metadata": {
            "inventor": definition.inventor,
            "yearInvented": definition.year,
            "esriWKID": definition.esri_wkid,
            "epsg": definition.epsg_code,
            "classification": list(definition.classification),
            "conformal": props.conformal,
            "equalArea": props.equal_area,
            "equidistant": props.equidistant,
            "compromise": props.compromise,
            "hemisphere": props.hemisphere,
            "projUrl": definition.proj_url,
            "wikiUrl": definition.wiki_url,
        },
    }


def build_json(definition: ProjectionDefinition, indent: int = 2) -> str:
    """JSON document as text."""
    return json.dumps(build_json_document(definition), indent=indent, ensure_ascii=False)
