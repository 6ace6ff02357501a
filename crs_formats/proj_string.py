"""
PROJ Projection String Emitter.

Grammar::

    +proj=<alias> +<flag>=<value>... <+R=6371000 | +datum=WGS84> +units=m +no_defs

Only definitions with a command alias have a projection string. For the
rest `build_proj_string` returns None, which callers must treat as "not
available" rather than as an empty string.
"""

from typing import Optional

from catalog.model import ProjectionDefinition
from crs_formats.datums import datum_spec
from crs_formats.tables import format_number, proj_flag


def build_proj_string(definition: ProjectionDefinition) -> Optional[str]:
    """Projection string, or None when the definition has no alias."""
    if not definition.command_alias:
        return None
    flags = " ".join(
        f"+{proj_flag(p.name)}={format_number(p.value)}"
        for p in definition.effective_parameters
    )
    return (
        f"+proj={definition.command_alias} {flags} "
        f"{datum_spec(definition.datum_kind).proj_clause} +units=m +no_defs"
    )
