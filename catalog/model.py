"""
Projection Parameter Model.

Canonical, authority-agnostic description of one projection's identity
and tunable parameters. Instances are pure data: the format generator and
the math engine read them but never mutate them.

Parameter Vocabulary
--------------------
Parameter names follow the ESRI spelling (``Central_Meridian``,
``False_Easting``, ...). The vocabulary is closed in the sense that the
format tables only know these names; anything else is still accepted and
rendered through documented fallbacks.
"""

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Optional, Tuple
import math
import re


ID_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class InvalidDefinitionError(ValueError):
    """Raised when a projection definition is malformed."""


class DatumKind(Enum):
    """Reference surface a definition is expressed on."""
    SPHERE = "sphere"
    WGS84_ELLIPSOID = "wgs84"


@dataclass(frozen=True)
class ProjectionParameter:
    """A single named projection parameter.

    Attributes
    ----------
    name : str
        Parameter name, e.g. ``Central_Meridian``.
    value : float
        Parameter value in the parameter's natural unit (degrees for
        angles, metres for offsets, unity for scale factors).
    """
    name: str
    value: float

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidDefinitionError(f"Parameter name must be a non-empty string, got {self.name!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise InvalidDefinitionError(
                f"Parameter {self.name} must have a numeric value, got {self.value!r}"
            )
        if not math.isfinite(self.value):
            raise InvalidDefinitionError(f"Parameter {self.name} has non-finite value {self.value}")


DEFAULT_PARAMETERS: Tuple[ProjectionParameter, ...] = (
    ProjectionParameter("Central_Meridian", 0),
    ProjectionParameter("False_Easting", 0),
    ProjectionParameter("False_Northing", 0),
)

REQUIRED_PARAMETER_NAMES: Tuple[str, ...] = tuple(p.name for p in DEFAULT_PARAMETERS)

# Both names map to the same PROJ flag (lat_0).
EXCLUSIVE_PARAMETER_NAMES: Tuple[Tuple[str, str], ...] = (
    ("Latitude_Of_Origin", "Latitude_Of_Center"),
)


@dataclass(frozen=True)
class ProjectionProperties:
    """Descriptive geometric properties of a projection.

    These flags are copied verbatim into the JSON metadata and never
    influence the transform math.
    """
    conformal: bool = False
    equal_area: bool = False
    equidistant: bool = False
    compromise: bool = False
    hemisphere: bool = False

    def active(self) -> Tuple[str, ...]:
        """Names of the properties that are set, in declaration order."""
        names = ("conformal", "equal_area", "equidistant", "compromise", "hemisphere")
        return tuple(n for n in names if getattr(self, n))


@dataclass(frozen=True)
class RegistryAuthority:
    """An ``(authority, code)`` identifier pair, e.g. ``("ESRI", 54030)``."""
    authority: str
    code: object


@dataclass(frozen=True)
class ProjectionDefinition:
    """Immutable description of one catalog projection.

    Attributes
    ----------
    id : str
        Stable lowercase-hyphenated identifier, unique across the catalog.
    name : str
        Display name.
    datum_kind : DatumKind
        Selects the geographic CRS block and its constants.
    parameters : tuple of ProjectionParameter
        Ordered parameters. Order is significant for WKT emission.
    canonical_projection_name : str, optional
        Name used in WKT-1 ``PROJCS``/``PROJECTION`` clauses. Defaults to
        `name` with spaces replaced by underscores.
    command_alias : str, optional
        PROJ ``+proj=`` code. Absent means no projection string exists.
    esri_wkid, epsg_code : int, optional
        Registry codes. ESRI takes priority over EPSG as primary id.
    classification : tuple of str
        Classification tags, e.g. ``("pseudocylindrical", "compromise")``.
    properties : ProjectionProperties
        Geometric property flags.
    """
    id: str
    name: str
    datum_kind: DatumKind
    parameters: Tuple[ProjectionParameter, ...] = ()
    canonical_projection_name: Optional[str] = None
    command_alias: Optional[str] = None
    esri_wkid: Optional[int] = None
    epsg_code: Optional[int] = None
    classification: Tuple[str, ...] = ()
    properties: ProjectionProperties = field(default_factory=ProjectionProperties)
    alt_names: Tuple[str, ...] = ()
    year: Optional[int] = None
    inventor: Optional[str] = None
    domain: str = "World"
    description: str = ""
    proj_url: Optional[str] = None
    wiki_url: Optional[str] = None

    def __post_init__(self):
        """Validate the definition at the boundary and normalize sequences."""
        if not isinstance(self.id, str) or not ID_PATTERN.match(self.id):
            raise InvalidDefinitionError(
                f"Projection id {self.id!r} must be lowercase and hyphenated"
            )
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidDefinitionError(f"Projection {self.id} must have a display name")
        if not isinstance(self.datum_kind, DatumKind):
            raise InvalidDefinitionError(
                f"Projection {self.id} has invalid datum kind {self.datum_kind!r}; "
                f"expected one of {[d.name for d in DatumKind]}"
            )
        if self.command_alias is not None and (
            not isinstance(self.command_alias, str) or not self.command_alias.strip()
        ):
            raise InvalidDefinitionError(
                f"Projection {self.id} command alias must be a non-blank string, "
                f"got {self.command_alias!r}"
            )

        params = tuple(self.parameters)
        for p in params:
            if not isinstance(p, ProjectionParameter):
                raise InvalidDefinitionError(
                    f"Projection {self.id} parameters must be ProjectionParameter, got {p!r}"
                )
        self._validate_parameter_names(params)
        # Frozen dataclass: normalize lists handed in by callers to tuples.
        object.__setattr__(self, "parameters", params)
        object.__setattr__(self, "classification", tuple(self.classification))
        object.__setattr__(self, "alt_names", tuple(self.alt_names))

    def _validate_parameter_names(self, params: Tuple[ProjectionParameter, ...]) -> None:
        """Reject parameter lists that would emit incomplete or ambiguous texts.

        An empty list is accepted and falls back to the default triple.
        """
        if not params:
            return
        names = [p.name for p in params]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InvalidDefinitionError(
                f"Projection {self.id} declares parameters more than once: {duplicates}"
            )
        missing = [n for n in REQUIRED_PARAMETER_NAMES if n not in names]
        if missing:
            raise InvalidDefinitionError(
                f"Projection {self.id} is missing required parameters {missing}"
            )
        for first, second in EXCLUSIVE_PARAMETER_NAMES:
            if first in names and second in names:
                raise InvalidDefinitionError(
                    f"Projection {self.id} declares both {first} and {second}"
                )

    @property
    def projection_name(self) -> str:
        """Name written into WKT-1 PROJCS/PROJECTION clauses."""
        return self.canonical_projection_name or self.name.replace(" ", "_")

    @property
    def effective_parameters(self) -> Tuple[ProjectionParameter, ...]:
        """Declared parameters, or the default triple when none are declared."""
        return self.parameters or DEFAULT_PARAMETERS

    @property
    def is_sphere(self) -> bool:
        return self.datum_kind is DatumKind.SPHERE

    @property
    def registry_authority(self) -> Optional[RegistryAuthority]:
        """First registry identifier present, ESRI before EPSG."""
        if self.esri_wkid:
            return RegistryAuthority("ESRI", self.esri_wkid)
        if self.epsg_code:
            return RegistryAuthority("EPSG", self.epsg_code)
        return None

    def parameter_value(self, name: str, default: Optional[float] = None) -> Optional[float]:
        """Look up a parameter value by name."""
        for p in self.effective_parameters:
            if p.name == name:
                return p.value
        return default
