import pytest

from catalog.entries import NICOLOSI_GLOBULAR, ROBINSON, WORLD_MERCATOR
from catalog.model import DatumKind, ProjectionDefinition, ProjectionParameter
from catalog.registry import ProjectionRegistry
from projections.nicolosi import NicolosiGlobular
from projections.robinson import Robinson


def pytest_configure(config) -> None:
    """Register custom markers used across the suite."""
    config.addinivalue_line("markers", "reference: Cross-checks against PROJ through pyproj")


@pytest.fixture
def nicolosi() -> ProjectionDefinition:
    return NICOLOSI_GLOBULAR


@pytest.fixture
def robinson() -> ProjectionDefinition:
    return ROBINSON


@pytest.fixture
def mercator() -> ProjectionDefinition:
    return WORLD_MERCATOR


@pytest.fixture
def aliasless() -> ProjectionDefinition:
    """A definition with no PROJ alias and no declared parameters."""
    return ProjectionDefinition(
        id="cahill-keyes",
        name="Cahill Keyes",
        datum_kind=DatumKind.SPHERE,
    )


@pytest.fixture
def transverse() -> ProjectionDefinition:
    """A WGS 84 definition exercising the scale factor and an unknown parameter."""
    return ProjectionDefinition(
        id="utm-like",
        name="Transverse Test",
        canonical_projection_name="Transverse_Mercator",
        datum_kind=DatumKind.WGS84_ELLIPSOID,
        parameters=(
            ProjectionParameter("Central_Meridian", 9),
            ProjectionParameter("False_Easting", 500000),
            ProjectionParameter("False_Northing", 0),
            ProjectionParameter("Scale_Factor", 0.9996),
            ProjectionParameter("Azimuth", 12.5),
        ),
        command_alias="tmerc",
    )


@pytest.fixture
def registry(nicolosi, robinson, mercator) -> ProjectionRegistry:
    return ProjectionRegistry([nicolosi, robinson, mercator])


@pytest.fixture
def nicol() -> NicolosiGlobular:
    return NicolosiGlobular()


@pytest.fixture
def robin() -> Robinson:
    return Robinson()
