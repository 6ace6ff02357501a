"""
Static Projection Catalog.

The catalog is built once at import time and never mutated. Each entry is
a `ProjectionDefinition`; ids are published in external links and must
never change.

References
----------
- Snyder, J.P. (1989). An Album of Map Projections. USGS Prof. Paper 1453.
- PROJ Contributors. PROJ coordinate transformation software library.
"""

from typing import Tuple

from catalog.model import (
    DatumKind,
    ProjectionDefinition,
    ProjectionParameter,
    ProjectionProperties,
)


NICOLOSI_GLOBULAR = ProjectionDefinition(
    id="nicolosi-globular",
    name="Nicolosi Globular",
    alt_names=("Al-Biruni Globular", "Nicolosi's Globular"),
    year=1000,
    inventor="Abū Rayḥān al-Bīrūnī (reinvented by Giovanni Battista Nicolosi, 1660)",
    datum_kind=DatumKind.SPHERE,
    parameters=(
        ProjectionParameter("Central_Meridian", 0),
        ProjectionParameter("False_Easting", 0),
        ProjectionParameter("False_Northing", 0),
    ),
    command_alias="nicol",
    classification=("globular", "pseudoconical", "compromise"),
    properties=ProjectionProperties(compromise=True, hemisphere=True),
    domain="Hemispheric (one hemisphere per map)",
    description=(
        "Polyconic projection displaying a single hemisphere within a circle. "
        "Invented around 1000 CE by al-Biruni and reinvented by Nicolosi in 1660."
    ),
    proj_url="https://proj.org/en/stable/operations/projections/nicol.html",
    wiki_url="https://en.wikipedia.org/wiki/Nicolosi_globular_projection",
)

ROBINSON = ProjectionDefinition(
    id="robinson",
    name="Robinson",
    canonical_projection_name="Robinson",
    year=1963,
    inventor="Arthur H. Robinson",
    datum_kind=DatumKind.WGS84_ELLIPSOID,
    parameters=(
        ProjectionParameter("False_Easting", 0),
        ProjectionParameter("False_Northing", 0),
        ProjectionParameter("Central_Meridian", 0),
    ),
    command_alias="robin",
    esri_wkid=54030,
    classification=("pseudocylindrical", "compromise"),
    properties=ProjectionProperties(compromise=True),
    description=(
        "Pseudocylindrical compromise projection defined by a table of parallel "
        "lengths and distances from the equator at 5° intervals."
    ),
    proj_url="https://proj.org/en/stable/operations/projections/robin.html",
    wiki_url="https://en.wikipedia.org/wiki/Robinson_projection",
)

WORLD_MERCATOR = ProjectionDefinition(
    id="world-mercator",
    name="World Mercator",
    canonical_projection_name="Mercator",
    year=1569,
    inventor="Gerardus Mercator",
    datum_kind=DatumKind.WGS84_ELLIPSOID,
    parameters=(
        ProjectionParameter("False_Easting", 0),
        ProjectionParameter("False_Northing", 0),
        ProjectionParameter("Central_Meridian", 0),
        ProjectionParameter("Standard_Parallel_1", 0),
    ),
    command_alias="merc",
    esri_wkid=54004,
    epsg_code=3395,
    classification=("cylindrical", "conformal"),
    properties=ProjectionProperties(conformal=True),
    description="Conformal cylindrical projection with straight rhumb lines.",
    proj_url="https://proj.org/en/stable/operations/projections/merc.html",
    wiki_url="https://en.wikipedia.org/wiki/Mercator_projection",
)


CATALOG: Tuple[ProjectionDefinition, ...] = (
    NICOLOSI_GLOBULAR,
    ROBINSON,
    WORLD_MERCATOR,
)
