"""
Validation Framework for generated CRS texts.

This module provides structural checkers for WKT and projection strings.
"""

from validation.wkt_checks import (
    StructureViolation,
    ValidationResult,
    WktStructureChecker,
    keyword_counts,
)

from validation.proj_string_checks import (
    ProjStringChecker,
    parse_proj_string,
)

__all__ = [
    "StructureViolation",
    "ValidationResult",
    "WktStructureChecker",
    "keyword_counts",
    "ProjStringChecker",
    "parse_proj_string",
]
