import pytest

from catalog.entries import CATALOG
from catalog.model import DatumKind, ProjectionDefinition
from catalog.registry import (
    ProjectionRegistry,
    UnknownProjectionError,
    default_registry,
    transform_for,
)
from projections.nicolosi import NicolosiGlobular
from projections.robinson import Robinson


def test_catalog_ids_are_unique() -> None:
    ids = [d.id for d in CATALOG]
    assert len(ids) == len(set(ids))


def test_registry_lookup(registry: ProjectionRegistry) -> None:
    assert registry.ids() == ("nicolosi-globular", "robinson", "world-mercator")
    assert len(registry) == 3
    assert "robinson" in registry
    assert registry.get_definition("robinson").esri_wkid == 54030


def test_iteration_yields_definitions(registry: ProjectionRegistry) -> None:
    assert [d.name for d in registry] == ["Nicolosi Globular", "Robinson", "World Mercator"]


def test_transforms_are_bound_by_family(registry: ProjectionRegistry) -> None:
    assert isinstance(registry.get_transform("nicolosi-globular"), NicolosiGlobular)
    assert isinstance(registry.get_transform("robinson"), Robinson)
    assert registry.get_transform("world-mercator") is None


def test_unknown_id_raises(registry: ProjectionRegistry) -> None:
    with pytest.raises(UnknownProjectionError, match="no-such-projection"):
        registry.get_definition("no-such-projection")
    with pytest.raises(KeyError):
        registry.get_transform("no-such-projection")


def test_duplicate_ids_are_rejected(nicolosi) -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        ProjectionRegistry([nicolosi, nicolosi])


def test_transform_for_aliasless_definition(aliasless: ProjectionDefinition) -> None:
    assert transform_for(aliasless) is None


def test_transform_for_custom_definition_with_known_alias() -> None:
    definition = ProjectionDefinition(
        id="robinson-pacific",
        name="Robinson Pacific",
        datum_kind=DatumKind.WGS84_ELLIPSOID,
        command_alias="robin",
    )
    assert isinstance(transform_for(definition), Robinson)


def test_default_registry_is_built_once() -> None:
    registry = default_registry()
    assert registry is default_registry()
    assert registry.ids() == tuple(d.id for d in CATALOG)
