"""
Structural Checks for Generated WKT.

These checks verify that emitted WKT texts are well formed and carry the
clauses downstream readers rely on, without a full WKT parser.

Check Categories
----------------
1. Bracket balance (outside quoted names)
2. Keyword counts (one PROJCS/GEOGCS/PROJECTION, one PARAMETER per parameter)
3. Axis declarations (WKT-2: east then north, ORDER[1] then ORDER[2])
4. Unit annotations (WKT-2: every PARAMETER carries a unit)
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List

from catalog.model import ProjectionDefinition
from common.logging_config import get_logger
from crs_formats.wkt1 import build_wkt1, build_wkt1_pretty
from crs_formats.wkt2 import build_wkt2, build_wkt2_pretty

logger = get_logger(__name__)

_QUOTED = re.compile(r'"[^"]*"')
_KEYWORD = re.compile(r'\b([A-Z][A-Z0-9_]*)\[')
_ORDER = re.compile(r'ORDER\[\s*(\d+)\s*\]')
_UNIT_KEYWORDS = ("LENGTHUNIT", "ANGLEUNIT", "SCALEUNIT", "UNIT")


class StructureViolation(ValueError):
    """Raised by a checker in strict mode when a check fails."""


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


def strip_quoted(text: str) -> str:
    """Blank out quoted names so their contents never count as syntax."""
    return _QUOTED.sub('""', text)


def keyword_counts(text: str) -> Counter:
    """Occurrences of each ``KEYWORD[`` outside quoted strings."""
    return Counter(_KEYWORD.findall(strip_quoted(text)))


def clause_bodies(text: str, keyword: str) -> List[str]:
    """Contents of every ``keyword[...]`` clause, quotes blanked.

    Parameters
    ----------
    text : str
        WKT text.
    keyword : str
        Clause keyword, e.g. ``"PARAMETER"``.

    Returns
    -------
    List[str]
        The text between each clause's brackets, in order of appearance.
    """
    stripped = strip_quoted(text)
    bodies = []
    for match in re.finditer(rf'\b{keyword}\[', stripped):
        start = match.end()
        depth = 1
        pos = start
        while pos < len(stripped) and depth:
            if stripped[pos] == "[":
                depth += 1
            elif stripped[pos] == "]":
                depth -= 1
            pos += 1
        bodies.append(stripped[start:pos - 1])
    return bodies


class WktStructureChecker:
    """Checker for the structure of emitted WKT texts.

    Each check returns a `ValidationResult`; failures are logged and, in
    strict mode, raised as `StructureViolation`.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize WKT checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise exceptions on violations.
        log_violations : bool
            Whether to log violations.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("WktStructureChecker")

    def _record(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{result.test_name}: {result.message}")
            if self.strict_mode:
                raise StructureViolation(f"{result.test_name}: {result.message}")
        return result

    def check_all(self, definition: ProjectionDefinition) -> List[ValidationResult]:
        """Run every check on all four WKT renderings of a definition.

        Parameters
        ----------
        definition : ProjectionDefinition
            Definition whose texts are generated and checked.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        n_params = len(definition.effective_parameters)
        results = []

        for label, text in (("wkt1", build_wkt1(definition)), ("wkt1-pretty", build_wkt1_pretty(definition))):
            results.append(self.check_brackets(text, label))
            results.append(self.check_wkt1_keywords(text, n_params, label))

        for label, text in (("wkt2", build_wkt2(definition)), ("wkt2-pretty", build_wkt2_pretty(definition))):
            results.append(self.check_brackets(text, label))
            results.append(self.check_wkt2_keywords(text, n_params, label))
            results.append(self.check_axes(text, label))
            results.append(self.check_parameter_units(text, label))

        failed = sum(not r.passed for r in results)
        logger.debug(f"WKT checks for {definition.id}: {len(results) - failed} passed, {failed} failed")
        return results

    def check_brackets(self, text: str, label: str = "wkt") -> ValidationResult:
        """Check that brackets balance and never close before opening."""
        depth = 0
        min_depth = 0
        for ch in strip_quoted(text):
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
                min_depth = min(min_depth, depth)

        return self._record(ValidationResult(
            test_name=f"{label}_brackets",
            passed=depth == 0 and min_depth == 0,
            message=f"Bracket balance check: final depth {depth}",
            details={'final_depth': depth, 'min_depth': min_depth},
        ))

    def check_wkt1_keywords(self, text: str, n_params: int, label: str = "wkt1") -> ValidationResult:
        """Check the WKT-1 clause counts."""
        expected = {
            'PROJCS': 1,
            'GEOGCS': 1,
            'DATUM': 1,
            'SPHEROID': 1,
            'PRIMEM': 1,
            'PROJECTION': 1,
            'PARAMETER': n_params,
            'UNIT': 2,
        }
        return self._check_counts(text, expected, f"{label}_keywords")

    def check_wkt2_keywords(self, text: str, n_params: int, label: str = "wkt2") -> ValidationResult:
        """Check the WKT-2 clause counts."""
        expected = {
            'PROJCRS': 1,
            'BASEGEOGCRS': 1,
            'CONVERSION': 1,
            'METHOD': 1,
            'PARAMETER': n_params,
            'CS': 1,
            'AXIS': 2,
        }
        return self._check_counts(text, expected, f"{label}_keywords")

    def _check_counts(self, text: str, expected: Dict[str, int], test_name: str) -> ValidationResult:
        counts = keyword_counts(text)
        mismatches = {
            kw: {'expected': n, 'found': counts.get(kw, 0)}
            for kw, n in expected.items()
            if counts.get(kw, 0) != n
        }
        return self._record(ValidationResult(
            test_name=test_name,
            passed=not mismatches,
            message=f"Keyword count check: {len(mismatches)} mismatches",
            details={'mismatches': mismatches, 'counts': dict(counts)},
        ))

    def check_axes(self, text: str, label: str = "wkt2") -> ValidationResult:
        """Check two AXIS clauses: east with ORDER[1], then north with ORDER[2]."""
        axes = clause_bodies(text, "AXIS")
        directions = [body.split(",")[1].strip() if "," in body else "" for body in axes]
        orders = []
        for body in axes:
            m = _ORDER.search(body)
            orders.append(int(m.group(1)) if m else None)

        passed = directions == ["east", "north"] and orders == [1, 2]
        return self._record(ValidationResult(
            test_name=f"{label}_axes",
            passed=passed,
            message=f"Axis check: directions={directions}, orders={orders}",
            details={'directions': directions, 'orders': orders},
        ))

    def check_parameter_units(self, text: str, label: str = "wkt2") -> ValidationResult:
        """Check that every PARAMETER clause carries a unit annotation."""
        bodies = clause_bodies(text, "PARAMETER")
        missing = [
            i for i, body in enumerate(bodies)
            if not any(f"{kw}[" in body for kw in _UNIT_KEYWORDS)
        ]
        return self._record(ValidationResult(
            test_name=f"{label}_parameter_units",
            passed=not missing,
            message=f"Parameter unit check: {len(missing)} of {len(bodies)} without unit",
            details={'missing_indices': missing, 'num_parameters': len(bodies)},
        ))
