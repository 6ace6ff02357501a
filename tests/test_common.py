import logging
import math

import pint
import pytest

from common.constants import DEGREE_FACTOR_TEXT, GeodeticConstants, SPHERE_RADIUS_M
from common.logging_config import LOG_FORMAT, get_logger, set_level
from common.types import GeoCoordinate, PlanarPoint
from common.units import Q_, UnitKind, angle_to_degrees, angle_to_radians


def test_angle_conversions() -> None:
    assert angle_to_radians(180.0) == pytest.approx(math.pi)
    assert angle_to_radians(Q_(90.0, "degree")) == pytest.approx(math.pi / 2)
    assert angle_to_degrees(math.pi / 2) == pytest.approx(90.0)


def test_non_angular_quantity_is_rejected() -> None:
    with pytest.raises(pint.DimensionalityError):
        angle_to_radians(Q_(5.0, "meter"))


@pytest.mark.parametrize(
    ("kind", "compact", "pretty"),
    [
        (UnitKind.METRE, 'LENGTHUNIT["metre",1]', 'LENGTHUNIT["metre", 1]'),
        (UnitKind.DEGREE, f'ANGLEUNIT["degree",{DEGREE_FACTOR_TEXT}]', f'ANGLEUNIT["degree", {DEGREE_FACTOR_TEXT}]'),
        (UnitKind.UNITY, 'SCALEUNIT["unity",1]', 'SCALEUNIT["unity", 1]'),
    ],
)
def test_wkt_unit_clauses(kind: UnitKind, compact: str, pretty: str) -> None:
    assert kind.wkt_clause() == compact
    assert kind.wkt_clause(pretty=True) == pretty


def test_unit_quantities() -> None:
    assert UnitKind.METRE.quantity(500.0).to("kilometer").magnitude == pytest.approx(0.5)
    assert angle_to_radians(UnitKind.DEGREE.quantity(45.0)) == pytest.approx(math.pi / 4)


def test_degree_factor_matches_pi() -> None:
    assert float(DEGREE_FACTOR_TEXT) == pytest.approx(math.pi / 180, rel=1e-15)
    assert GeodeticConstants.DEGREE_IN_RADIANS.value == pytest.approx(math.pi / 180)


def test_constants() -> None:
    assert SPHERE_RADIUS_M == GeodeticConstants.SPHERE_RADIUS.value == 6371000.0
    assert GeodeticConstants.WGS84_INVERSE_FLATTENING.value == 298.257223563
    assert GeodeticConstants.ROBINSON_X_SCALE.unit


def test_geo_coordinate() -> None:
    coord = GeoCoordinate.from_degrees(45.0, -90.0)
    assert coord.to_degrees() == pytest.approx((45.0, -90.0))
    with pytest.raises(ValueError, match="radians"):
        GeoCoordinate(latitude=45.0, longitude=0.0)


def test_planar_point_unpacks() -> None:
    x, y = PlanarPoint(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


def test_logger_is_configured_once() -> None:
    logger = get_logger("tests.common")
    again = get_logger("tests.common")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_set_level_applies_to_catalog_loggers() -> None:
    logger = get_logger("tests.levels")
    set_level(logging.DEBUG)
    assert logger.level == logging.DEBUG
    set_level(logging.INFO)
    assert logger.level == logging.INFO
