"""
Projection Catalog.

This package provides:
- The projection parameter model (`ProjectionDefinition`)
- The static catalog of supported projections
- The registry binding each projection to its forward transform
"""

from catalog.model import (
    DatumKind,
    InvalidDefinitionError,
    ProjectionDefinition,
    ProjectionParameter,
    ProjectionProperties,
    RegistryAuthority,
)
from catalog.entries import CATALOG
from catalog.registry import (
    ProjectionRegistry,
    RegistryEntry,
    UnknownProjectionError,
    default_registry,
)

__all__ = [
    "DatumKind",
    "InvalidDefinitionError",
    "ProjectionDefinition",
    "ProjectionParameter",
    "ProjectionProperties",
    "RegistryAuthority",
    "CATALOG",
    "ProjectionRegistry",
    "RegistryEntry",
    "UnknownProjectionError",
    "default_registry",
]
