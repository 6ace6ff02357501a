"""
Geographic CRS Blocks.

The geographic part of every emitted CRS is selected entirely by the
definition's datum kind. Names and constants for each kind live in
``DATUM_SPECS``; the functions below render them in each grammar.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from catalog.model import DatumKind
from common.constants import DEGREE_FACTOR_TEXT, SPHERE_RADIUS_M, WGS84_A_M, WGS84_INV_F


@dataclass(frozen=True)
class DatumSpec:
    """Names and constants of one reference surface in each grammar."""
    esri_gcs_name: str
    esri_datum_name: str
    esri_spheroid_name: str
    wkt2_crs_name: str
    wkt2_datum_name: str
    wkt2_ellipsoid_name: str
    epsg_geographic_code: int
    semi_major_axis: float
    inverse_flattening: float
    proj_clause: str


DATUM_SPECS: Mapping[DatumKind, DatumSpec] = MappingProxyType({
    DatumKind.SPHERE: DatumSpec(
        esri_gcs_name="GCS_Sphere",
        esri_datum_name="D_Sphere",
        esri_spheroid_name="Sphere",
        wkt2_crs_name="GCS Sphere",
        wkt2_datum_name="Sphere",
        wkt2_ellipsoid_name="Sphere",
        epsg_geographic_code=4047,
        semi_major_axis=SPHERE_RADIUS_M,
        inverse_flattening=0.0,
        proj_clause=f"+R={int(SPHERE_RADIUS_M)}",
    ),
    DatumKind.WGS84_ELLIPSOID: DatumSpec(
        esri_gcs_name="GCS_WGS_1984",
        esri_datum_name="D_WGS_1984",
        esri_spheroid_name="WGS_1984",
        wkt2_crs_name="WGS 84",
        wkt2_datum_name="World Geodetic System 1984",
        wkt2_ellipsoid_name="WGS 84",
        epsg_geographic_code=4326,
        semi_major_axis=WGS84_A_M,
        inverse_flattening=WGS84_INV_F,
        proj_clause="+datum=WGS84",
    ),
})


def datum_spec(kind: DatumKind) -> DatumSpec:
    return DATUM_SPECS[kind]


def _wkt1_float(value: float) -> str:
    # WKT-1 writes spheroid numbers with a fractional part: 6371000.0, 0.0
    return repr(float(value))


def _wkt2_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def build_geogcs(kind: DatumKind, pretty: bool = False) -> str:
    """WKT-1 ``GEOGCS[...]`` block.

    Parameters
    ----------
    kind : DatumKind
        Reference surface.
    pretty : bool
        Multi-line layout, indented for nesting one level inside PROJCS.
    """
    d = DATUM_SPECS[kind]
    a = _wkt1_float(d.semi_major_axis)
    rf = _wkt1_float(d.inverse_flattening)
    if not pretty:
        return (
            f'GEOGCS["{d.esri_gcs_name}",'
            f'DATUM["{d.esri_datum_name}",SPHEROID["{d.esri_spheroid_name}",{a},{rf}]],'
            f'PRIMEM["Greenwich",0.0],'
            f'UNIT["Degree",{DEGREE_FACTOR_TEXT}]]'
        )
    return (
        f'GEOGCS["{d.esri_gcs_name}",\n'
        f'    DATUM["{d.esri_datum_name}",\n'
        f'      SPHEROID["{d.esri_spheroid_name}", {a}, {rf}]\n'
        f'    ],\n'
        f'    PRIMEM["Greenwich", 0.0],\n'
        f'    UNIT["Degree", {DEGREE_FACTOR_TEXT}]\n'
        f'  ]'
    )


def build_base_geogcrs(kind: DatumKind, pretty: bool = False) -> str:
    """WKT-2 ``BASEGEOGCRS[...]`` block, ending with the EPSG id."""
    d = DATUM_SPECS[kind]
    a = _wkt2_number(d.semi_major_axis)
    rf = _wkt2_number(d.inverse_flattening)
    if not pretty:
        return (
            f'BASEGEOGCRS["{d.wkt2_crs_name}",'
            f'DATUM["{d.wkt2_datum_name}",'
            f'ELLIPSOID["{d.wkt2_ellipsoid_name}",{a},{rf},LENGTHUNIT["metre",1]]],'
            f'PRIMEM["Greenwich",0,ANGLEUNIT["degree",{DEGREE_FACTOR_TEXT}]],'
            f'ID["EPSG",{d.epsg_geographic_code}]]'
        )
    return (
        f'BASEGEOGCRS["{d.wkt2_crs_name}",\n'
        f'    DATUM["{d.wkt2_datum_name}",\n'
        f'      ELLIPSOID["{d.wkt2_ellipsoid_name}", {a}, {rf},\n'
        f'        LENGTHUNIT["metre", 1]]\n'
        f'    ],\n'
        f'    PRIMEM["Greenwich", 0,\n'
        f'      ANGLEUNIT["degree", {DEGREE_FACTOR_TEXT}]],\n'
        f'    ID["EPSG", {d.epsg_geographic_code}]\n'
        f'  ]'
    )


def build_json_base_crs(kind: DatumKind) -> Dict[str, Any]:
    """Base geographic CRS object for the JSON document."""
    d = DATUM_SPECS[kind]
    return {
        "type": "GeographicCRS",
        "name": d.wkt2_crs_name,
        "datum": {
            "type": "GeodeticReferenceFrame",
            "name": d.wkt2_datum_name,
            "ellipsoid": {
                "name": d.wkt2_ellipsoid_name,
                "semiMajorAxis": int(d.semi_major_axis),
                "inverseFlattening": (
                    int(d.inverse_flattening) if float(d.inverse_flattening).is_integer()
                    else d.inverse_flattening
                ),
            },
        },
        "primeMeridian": {"name": "Greenwich", "longitude": 0},
        "id": {"authority": "EPSG", "code": d.epsg_geographic_code},
        "coordinateSystem": {
            "subtype": "ellipsoidal",
            "axis": [
                {"name": "Geodetic latitude", "abbreviation": "Lat", "direction": "north", "unit": "degree"},
                {"name": "Geodetic longitude", "abbreviation": "Lon", "direction": "east", "unit": "degree"},
            ],
        },
    }
