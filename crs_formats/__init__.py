"""
CRS Format Generator.

Pure functions mapping a `ProjectionDefinition` to each textual encoding:
WKT-1 (pretty/compact), WKT-2 (pretty/compact), vendor WKT, PROJ string
and a JSON document. No emitter mutates its input or keeps state.
"""

from crs_formats.wkt1 import build_wkt1, build_wkt1_pretty
from crs_formats.wkt2 import build_wkt2, build_wkt2_pretty
from crs_formats.proj_string import build_proj_string
from crs_formats.projjson import build_json, build_json_document
from crs_formats.vendor import EsriCompatibility, VendorWkt, build_vendor_wkt
from crs_formats.dispatcher import (
    FormatArtifact,
    FormatKey,
    build_all_artifacts,
    build_artifact,
)

__all__ = [
    "build_wkt1",
    "build_wkt1_pretty",
    "build_wkt2",
    "build_wkt2_pretty",
    "build_proj_string",
    "build_json",
    "build_json_document",
    "EsriCompatibility",
    "VendorWkt",
    "build_vendor_wkt",
    "FormatArtifact",
    "FormatKey",
    "build_all_artifacts",
    "build_artifact",
]
