"""
Format Dispatcher.

Retrieves any text artifact of a definition by format key. Each artifact
carries availability, so "no data" (a definition without a PROJ alias has
no projection string) is distinguishable from an empty but valid text.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Union

from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from crs_formats.proj_string import build_proj_string
from crs_formats.projjson import build_json
from crs_formats.vendor import EsriCompatibility, esri_compatibility
from crs_formats.wkt1 import build_wkt1, build_wkt1_pretty
from crs_formats.wkt2 import build_wkt2, build_wkt2_pretty

logger = get_logger(__name__)

MISSING_ALIAS = "missing-alias"


class FormatKey(Enum):
    """Keys of the artifacts produced per definition."""
    WKT1 = "wkt1"
    WKT1_COMPACT = "wkt1-compact"
    WKT2 = "wkt2"
    WKT2_COMPACT = "wkt2-compact"
    ESRI_WKT = "esri-wkt"
    PRJ = "prj"
    PROJ = "proj"
    JSON = "json"


@dataclass(frozen=True)
class FormatArtifact:
    """One text artifact of a definition.

    Attributes
    ----------
    key : FormatKey
        Which format this is.
    content : str, optional
        The text; None when unavailable.
    filename : str
        Suggested file name for downloads.
    media_type : str
        MIME type of the content.
    reason : str, optional
        Why the artifact is unavailable.
    compatibility : EsriCompatibility, optional
        Attached to the vendor formats (ESRI WKT, .prj).
    """
    key: FormatKey
    content: Optional[str]
    filename: str
    media_type: str = "text/plain"
    reason: Optional[str] = None
    compatibility: Optional[EsriCompatibility] = None

    @property
    def available(self) -> bool:
        return self.content is not None


@dataclass(frozen=True)
class _FormatSpec:
    builder: Callable[[ProjectionDefinition], Optional[str]]
    filename: str
    media_type: str = "text/plain"
    vendor: bool = False


FORMAT_SPECS: Mapping[FormatKey, _FormatSpec] = MappingProxyType({
    FormatKey.WKT1: _FormatSpec(build_wkt1_pretty, "{id}_wkt1.txt"),
    FormatKey.WKT1_COMPACT: _FormatSpec(build_wkt1, "{id}_wkt1_ogc.txt"),
    FormatKey.WKT2: _FormatSpec(build_wkt2_pretty, "{id}_wkt2.txt"),
    FormatKey.WKT2_COMPACT: _FormatSpec(build_wkt2, "{id}_wkt2_ogc.txt"),
    FormatKey.ESRI_WKT: _FormatSpec(build_wkt1, "{id}_esri.wkt", vendor=True),
    FormatKey.PRJ: _FormatSpec(build_wkt1, "{id}.prj", vendor=True),
    FormatKey.PROJ: _FormatSpec(build_proj_string, "{id}_proj.txt"),
    FormatKey.JSON: _FormatSpec(build_json, "{id}.json", media_type="application/json"),
})


def parse_format_key(key: Union[FormatKey, str]) -> FormatKey:
    """Accept a FormatKey or its string value."""
    if isinstance(key, FormatKey):
        return key
    try:
        return FormatKey(key)
    except ValueError:
        valid = ", ".join(k.value for k in FormatKey)
        raise ValueError(f"Unknown format key {key!r}; expected one of: {valid}") from None


def build_artifact(definition: ProjectionDefinition, key: Union[FormatKey, str]) -> FormatArtifact:
    """Build one artifact by format key.

    Raises
    ------
    ValueError
        If the key is not a known format.
    """
    key = parse_format_key(key)
    spec = FORMAT_SPECS[key]
    content = spec.builder(definition)
    reason = None
    if content is None:
        reason = MISSING_ALIAS
        logger.debug(f"{key.value} unavailable for {definition.id}: {reason}")
    return FormatArtifact(
        key=key,
        content=content,
        filename=spec.filename.format(id=definition.id),
        media_type=spec.media_type,
        reason=reason,
        compatibility=esri_compatibility(definition) if spec.vendor else None,
    )


def build_all_artifacts(definition: ProjectionDefinition) -> Dict[FormatKey, FormatArtifact]:
    """Every artifact of a definition, keyed by format, in FormatKey order."""
    return {key: build_artifact(definition, key) for key in FormatKey}
