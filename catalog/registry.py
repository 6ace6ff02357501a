"""
Projection Registry.

Associates each projection id with its parameter model and, where one
exists, its forward transform. The registry is built once and is
read-only afterwards, so it can be shared between threads without locks.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Optional, Tuple

from catalog.entries import CATALOG
from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from projections.base import ForwardProjection
from projections.nicolosi import NicolosiGlobular
from projections.robinson import Robinson

logger = get_logger(__name__)


class UnknownProjectionError(KeyError):
    """Raised when a projection id is not in the registry."""


# Transform families by PROJ alias
TRANSFORM_FAMILIES: Mapping[str, Callable[[], ForwardProjection]] = MappingProxyType({
    "nicol": NicolosiGlobular,
    "robin": Robinson,
})


@dataclass(frozen=True)
class RegistryEntry:
    """A definition and its forward transform, if the engine has one."""
    definition: ProjectionDefinition
    transform: Optional[ForwardProjection] = None


def transform_for(definition: ProjectionDefinition) -> Optional[ForwardProjection]:
    """Forward transform for a definition, chosen by its PROJ alias."""
    factory = TRANSFORM_FAMILIES.get(definition.command_alias or "")
    return factory() if factory else None


class ProjectionRegistry:
    """Immutable id → entry lookup.

    Parameters
    ----------
    definitions : iterable of ProjectionDefinition
        Catalog entries. Ids must be unique.

    Raises
    ------
    ValueError
        If two definitions share an id.
    """

    def __init__(self, definitions: Iterable[ProjectionDefinition]):
        entries = {}
        for definition in definitions:
            if definition.id in entries:
                raise ValueError(f"Duplicate projection id {definition.id!r}")
            entries[definition.id] = RegistryEntry(definition, transform_for(definition))
        self._entries: Mapping[str, RegistryEntry] = MappingProxyType(entries)
        logger.debug(f"Registry built with {len(entries)} projections")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, projection_id: str) -> bool:
        return projection_id in self._entries

    def __iter__(self) -> Iterator[ProjectionDefinition]:
        return (entry.definition for entry in self._entries.values())

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def entry(self, projection_id: str) -> RegistryEntry:
        try:
            return self._entries[projection_id]
        except KeyError:
            raise UnknownProjectionError(
                f"No projection found for id={projection_id!r}"
            ) from None

    def get_definition(self, projection_id: str) -> ProjectionDefinition:
        return self.entry(projection_id).definition

    def get_transform(self, projection_id: str) -> Optional[ForwardProjection]:
        """Forward transform, or None when the engine has no family for it."""
        return self.entry(projection_id).transform


@lru_cache(maxsize=None)
def default_registry() -> ProjectionRegistry:
    """Registry over the static catalog, built on first use."""
    return ProjectionRegistry(CATALOG)
