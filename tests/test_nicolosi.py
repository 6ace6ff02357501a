import math

import numpy as np
import pytest

from common.constants import SPHERE_RADIUS_M as EARTH_RADIUS
from projections.base import ForwardConfig, delta_longitude, delta_longitude_array
from projections.nicolosi import NicolosiGlobular, nicolosi_forward

HALF_PI = math.pi / 2


def test_central_meridian_is_straight_and_equidistant() -> None:
    x, y = nicolosi_forward(0.5, 0.0, 0.0, EARTH_RADIUS)
    assert x == 0.0
    assert y == pytest.approx(EARTH_RADIUS * 0.5)


def test_equator_is_straight_and_equidistant() -> None:
    x, y = nicolosi_forward(0.0, 0.7, 0.0, EARTH_RADIUS)
    assert x == pytest.approx(EARTH_RADIUS * 0.7)
    assert y == 0.0


def test_equator_point_on_earth_sphere() -> None:
    x, y = nicolosi_forward(0.0, 0.1, 0.0, 6371000.0)
    assert x == pytest.approx(637100.0)
    assert y == 0.0


@pytest.mark.parametrize("dlam", [HALF_PI, -HALF_PI])
def test_bounding_meridian_is_a_circle(dlam: float) -> None:
    x, y = nicolosi_forward(0.3, dlam, 0.0, 1.0)
    assert x == pytest.approx(dlam * math.cos(0.3))
    assert y == pytest.approx(HALF_PI * math.sin(0.3))
    assert math.hypot(x, y) == pytest.approx(HALF_PI)


@pytest.mark.parametrize("lat", [HALF_PI, -HALF_PI])
def test_poles_map_to_central_meridian(lat: float) -> None:
    x, y = nicolosi_forward(lat, 0.7, 0.0, EARTH_RADIUS)
    assert x == 0.0
    assert y == pytest.approx(EARTH_RADIUS * lat)


def test_origin_takes_first_special_case() -> None:
    assert nicolosi_forward(0.0, 0.0) == (0.0, 0.0)


def test_special_cases_use_configured_tolerance() -> None:
    # Within 1e-6 of the central meridian: exact only with a looser tolerance.
    loose = nicolosi_forward(0.5, 1e-7, 0.0, 1.0, ForwardConfig(tolerance=1e-6))
    assert loose == (0.0, 0.5)
    strict = nicolosi_forward(0.5, 1e-7, 0.0, 1.0)
    assert strict.x != 0.0


def test_general_case_is_continuous_with_central_meridian() -> None:
    x, y = nicolosi_forward(0.5, 1e-6, 0.0, 1.0)
    assert x == pytest.approx(0.0, abs=1e-5)
    assert y == pytest.approx(0.5, abs=1e-5)


@pytest.mark.parametrize(
    ("lat", "lon"),
    [(0.4, 0.6), (1.2, 0.2), (0.1, 1.5), (-0.8, -1.0), (1.5, 1.4)],
)
def test_general_case_is_symmetric(lat: float, lon: float) -> None:
    x, y = nicolosi_forward(lat, lon)
    assert nicolosi_forward(lat, -lon) == pytest.approx((-x, y))
    assert nicolosi_forward(-lat, lon) == pytest.approx((x, -y))


def test_hemisphere_maps_inside_bounding_circle() -> None:
    lats = np.linspace(-HALF_PI, HALF_PI, 37)
    lons = np.linspace(-HALF_PI, HALF_PI, 37)
    for lat in lats:
        for lon in lons:
            x, y = nicolosi_forward(float(lat), float(lon))
            assert math.isfinite(x) and math.isfinite(y)
            assert math.hypot(x, y) <= HALF_PI * (1 + 1e-9)


def test_central_meridian_shifts_longitude() -> None:
    shifted = nicolosi_forward(0.4, 1.0, 0.5, 1.0)
    assert shifted == pytest.approx(nicolosi_forward(0.4, 0.5, 0.0, 1.0))


def test_longitude_difference_is_wrapped() -> None:
    assert delta_longitude(3 * math.pi / 2, 0.0) == pytest.approx(-HALF_PI)
    assert nicolosi_forward(0.3, 2 * math.pi + 0.6) == pytest.approx(nicolosi_forward(0.3, 0.6))


def test_scalar_and_array_wrapping_agree() -> None:
    lons = np.array([-7.0, -math.pi, 0.0, math.pi, 9.0])
    wrapped = delta_longitude_array(lons, 0.0)
    assert list(wrapped) == pytest.approx([delta_longitude(float(v), 0.0) for v in lons])


@pytest.mark.parametrize("radius", [0.0, -1.0, float("nan"), float("inf")])
def test_invalid_radius_fails_fast(radius: float) -> None:
    with pytest.raises(ValueError, match="radius"):
        nicolosi_forward(0.1, 0.1, 0.0, radius)


def test_class_matches_function(nicol: NicolosiGlobular) -> None:
    assert nicol.name == "Nicolosi Globular"
    assert nicol.command_alias == "nicol"
    assert nicol.forward(0.4, 0.6, 0.0, 2.0) == nicolosi_forward(0.4, 0.6, 0.0, 2.0)


def test_domain_is_one_hemisphere(nicol: NicolosiGlobular) -> None:
    assert nicol.in_domain(0.0, HALF_PI, 0.0)
    assert nicol.in_domain(0.0, -HALF_PI, 0.0)
    assert not nicol.in_domain(0.0, 2.0, 0.0)
    assert nicol.in_domain(0.0, 2.0, 1.0)


def test_forward_many_broadcasts(nicol: NicolosiGlobular) -> None:
    lats = np.array([[0.0], [0.5], [1.0]])
    lons = np.array([-1.0, 0.0, 1.0])
    xs, ys = nicol.forward_many(lats, lons, 0.0, 1.0)
    assert xs.shape == (3, 3)
    for i in range(3):
        for j in range(3):
            expected = nicolosi_forward(float(lats[i, 0]), float(lons[j]))
            assert (xs[i, j], ys[i, j]) == pytest.approx(expected)
