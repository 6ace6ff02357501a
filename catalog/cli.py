"""
Command-line interface for the projection catalog.

Usage:
    prj-catalog list
    prj-catalog show nicolosi-globular --format wkt2
    prj-catalog project robinson 45 30
    prj-catalog export nicolosi-globular --output-dir ./out
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from catalog.registry import UnknownProjectionError, default_registry
from common.constants import SPHERE_RADIUS_M
from common.logging_config import get_logger, set_level
from common.types import GeoCoordinate
from common.units import angle_to_radians
from crs_formats.dispatcher import FormatKey, build_artifact
from crs_formats.export import ExportConfig, export_artifacts

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prj-catalog",
        description="Reference catalog of map projections: CRS texts and forward transforms",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List catalog projections")

    show = sub.add_parser("show", help="Print one CRS artifact")
    show.add_argument("projection_id")
    show.add_argument(
        "--format", "-f",
        default=FormatKey.WKT1.value,
        choices=[k.value for k in FormatKey],
        help="Artifact to print (default: wkt1)",
    )

    project = sub.add_parser("project", help="Forward-project a point given in degrees")
    project.add_argument("projection_id")
    project.add_argument("lat", type=float, help="Latitude in degrees")
    project.add_argument("lon", type=float, help="Longitude in degrees")
    project.add_argument("--central-meridian", type=float, default=0.0, help="Degrees")
    project.add_argument("--radius", type=float, default=SPHERE_RADIUS_M, help="Sphere radius in metres")

    export = sub.add_parser("export", help="Write .prj, WKT-2 and JSON files")
    export.add_argument("projection_id")
    export.add_argument("--output-dir", "-o", type=Path, default=Path("."))

    return parser


def _cmd_list() -> int:
    for definition in default_registry():
        alias = definition.command_alias or "-"
        props = ", ".join(definition.properties.active())
        print(f"{definition.id:<24} {definition.name:<24} +proj={alias:<8} {props}")
    return 0


def _cmd_show(projection_id: str, fmt: str) -> int:
    definition = default_registry().get_definition(projection_id)
    artifact = build_artifact(definition, fmt)
    if not artifact.available:
        logger.error(f"{fmt} is not available for {projection_id} ({artifact.reason})")
        return 1
    print(artifact.content)
    return 0


def _cmd_project(args: argparse.Namespace) -> int:
    registry = default_registry()
    transform = registry.get_transform(args.projection_id)
    if transform is None:
        logger.error(f"No forward transform implemented for {args.projection_id}")
        return 1
    coord = GeoCoordinate.from_degrees(args.lat, args.lon)
    point = transform.forward(
        coord.latitude,
        coord.longitude,
        angle_to_radians(args.central_meridian),
        args.radius,
    )
    print(f"{point.x:.3f} {point.y:.3f}")
    return 0


def _cmd_export(projection_id: str, output_dir: Path) -> int:
    definition = default_registry().get_definition(projection_id)
    paths = export_artifacts(definition, ExportConfig(output_dir=output_dir))
    logger.info(f"Exported {len(paths)} files for {projection_id}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_level(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "list":
            return _cmd_list()
        if args.command == "show":
            return _cmd_show(args.projection_id, args.format)
        if args.command == "project":
            return _cmd_project(args)
        if args.command == "export":
            return _cmd_export(args.projection_id, args.output_dir)
    except UnknownProjectionError as e:
        logger.error(e.args[0])
        return 2
    except ValueError as e:
        logger.error(str(e))
        return 2
    return 1


if __name__ == "__main__":
    sys.exit(main())
