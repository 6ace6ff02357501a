"""
Artifact Export.

Writes a definition's downloadable artifacts to disk: the shapefile
``.prj``, the readable WKT-2 text and the JSON document by default.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from crs_formats.dispatcher import FormatKey, build_artifact

logger = get_logger(__name__)


@dataclass
class ExportConfig:
    """Configuration for artifact export.

    Attributes
    ----------
    output_dir : Path
        Directory to write into; created if missing.
    formats : tuple of FormatKey
        Which artifacts to write.
    encoding : str
        Text encoding of the written files.
    """
    output_dir: Path = field(default_factory=lambda: Path("."))
    formats: Tuple[FormatKey, ...] = (FormatKey.PRJ, FormatKey.WKT2, FormatKey.JSON)
    encoding: str = "utf-8"


def export_artifacts(definition: ProjectionDefinition, config: Optional[ExportConfig] = None) -> List[Path]:
    """Write the configured artifacts of a definition.

    Unavailable artifacts are skipped with a warning.

    Parameters
    ----------
    definition : ProjectionDefinition
        Definition to export.
    config : ExportConfig, optional
        Export settings.

    Returns
    -------
    List[Path]
        Paths of the files written.
    """
    config = config or ExportConfig()
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for key in config.formats:
        artifact = build_artifact(definition, key)
        if not artifact.available:
            logger.warning(f"Skipping {key.value} for {definition.id}: {artifact.reason}")
            continue
        path = output_dir / artifact.filename
        path.write_text(artifact.content, encoding=config.encoding)
        written.append(path)
        logger.info(f"Wrote {path}")
    return written
