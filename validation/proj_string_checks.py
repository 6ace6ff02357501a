"""
Projection String Checks.

Parses ``+key=value`` projection strings and verifies that a generated
string carries every parameter of its definition under the right flag.
"""

import math
from typing import Dict, List, Optional

from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from crs_formats.datums import datum_spec
from crs_formats.proj_string import build_proj_string
from crs_formats.tables import proj_flag
from validation.wkt_checks import StructureViolation, ValidationResult

logger = get_logger(__name__)


def parse_proj_string(text: str) -> Dict[str, Optional[str]]:
    """Split a projection string into flags.

    Parameters
    ----------
    text : str
        Whitespace-separated ``+key=value`` and ``+flag`` tokens.

    Returns
    -------
    Dict[str, Optional[str]]
        Flag name → value; bare flags such as ``+no_defs`` map to None.

    Raises
    ------
    ValueError
        If a token does not start with ``+`` or a flag repeats.
    """
    flags: Dict[str, Optional[str]] = {}
    for token in text.split():
        if not token.startswith("+") or len(token) == 1:
            raise ValueError(f"Malformed projection string token {token!r}")
        key, sep, value = token[1:].partition("=")
        if key in flags:
            raise ValueError(f"Duplicate projection string flag +{key}")
        flags[key] = value if sep else None
    return flags


class ProjStringChecker:
    """Checker for generated projection strings.

    Parameters
    ----------
    strict_mode : bool
        If True, raise exceptions on violations.
    tolerance : float
        Absolute tolerance when comparing parameter values.
    """

    def __init__(self, strict_mode: bool = False, tolerance: float = 1e-12):
        self.strict_mode = strict_mode
        self.tolerance = tolerance

    def check_round_trip(self, definition: ProjectionDefinition) -> ValidationResult:
        """Check that parsing the generated string recovers the definition."""
        text = build_proj_string(definition)
        if text is None:
            return ValidationResult(
                test_name="proj_round_trip",
                passed=True,
                message=f"No projection string for {definition.id}",
                details={'available': False},
            )

        flags = parse_proj_string(text)
        problems: List[str] = []

        if flags.get("proj") != definition.command_alias:
            problems.append(f"proj={flags.get('proj')!r}")
        for p in definition.effective_parameters:
            raw = flags.get(proj_flag(p.name))
            if raw is None or not math.isclose(float(raw), p.value, abs_tol=self.tolerance):
                problems.append(f"{p.name}={raw!r}")

        datum_key, _, datum_value = datum_spec(definition.datum_kind).proj_clause[1:].partition("=")
        if flags.get(datum_key) != datum_value:
            problems.append(f"{datum_key}={flags.get(datum_key)!r}")
        if flags.get("units") != "m":
            problems.append(f"units={flags.get('units')!r}")
        if list(flags)[-1] != "no_defs":
            problems.append("no_defs not last")

        result = ValidationResult(
            test_name="proj_round_trip",
            passed=not problems,
            message=f"Projection string round trip: {len(problems)} problems",
            details={'flags': flags, 'problems': problems},
        )
        if problems:
            logger.warning(f"{definition.id}: {', '.join(problems)}")
            if self.strict_mode:
                raise StructureViolation(f"proj_round_trip: {', '.join(problems)}")
        return result
