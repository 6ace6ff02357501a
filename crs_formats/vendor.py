"""
Vendor (ESRI) WKT and Compatibility Metadata.

ESRI WKT shares its grammar with WKT-1, so the text comes from the WKT-1
emitter. What distinguishes it is whether ArcGIS can actually apply it,
which depends on the projection being registered in the ESRI Projection
Engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from catalog.model import ProjectionDefinition
from crs_formats.proj_string import build_proj_string
from crs_formats.wkt1 import build_wkt1


class EsriCompatibility(Enum):
    """How well ArcGIS handles a definition's .prj/ESRI WKT."""
    SUPPORTED = "supported"
    LIMITED = "limited"
    NONE = "none"


@dataclass(frozen=True)
class VendorWkt:
    """ESRI WKT text with its compatibility metadata.

    Attributes
    ----------
    content : str
        WKT text, identical to the compact WKT-1.
    compatibility : EsriCompatibility
        Support level in the ESRI Projection Engine.
    wkid : int, optional
        ESRI WKID when registered.
    message : str
        Explanation suitable for display next to the text.
    """
    content: str
    compatibility: EsriCompatibility
    wkid: Optional[int]
    message: str

    @property
    def registered(self) -> bool:
        return self.compatibility is EsriCompatibility.SUPPORTED


def esri_compatibility(definition: ProjectionDefinition) -> EsriCompatibility:
    if definition.esri_wkid:
        return EsriCompatibility.SUPPORTED
    if definition.command_alias:
        return EsriCompatibility.LIMITED
    return EsriCompatibility.NONE


def compatibility_message(definition: ProjectionDefinition) -> str:
    """Human-readable compatibility note."""
    pn = definition.projection_name
    level = esri_compatibility(definition)
    if level is EsriCompatibility.SUPPORTED:
        return (
            f"ArcGIS Pro & ArcMap - Fully Supported: {definition.name} is registered in the "
            f"ESRI Projection Engine as WKID {definition.esri_wkid} ({pn})."
        )
    if level is EsriCompatibility.LIMITED:
        return (
            f"ArcGIS Pro / ArcMap - Limited Support: {pn} is not registered in the ESRI "
            f"Projection Engine. Use the PROJ string in QGIS or GDAL instead: "
            f"{build_proj_string(definition)}"
        )
    return (
        "No Standard Software Support: this projection lacks a standard PROJ "
        "implementation and is not in the ESRI Projection Engine."
    )


def build_vendor_wkt(definition: ProjectionDefinition) -> VendorWkt:
    """ESRI WKT with compatibility metadata attached."""
    return VendorWkt(
        content=build_wkt1(definition),
        compatibility=esri_compatibility(definition),
        wkid=definition.esri_wkid,
        message=compatibility_message(definition),
    )
