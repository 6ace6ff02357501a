import math

import numpy as np
import pytest

from projections.robinson import (
    ROBINSON_TABLE,
    X_SCALE,
    Y_SCALE,
    Robinson,
    robinson_forward,
    robinson_xy,
)

R = 6_378_137.0


@pytest.mark.parametrize(
    ("lat_deg", "x", "y"),
    [
        (0.0, 1.0, 0.0),
        (5.0, 0.9986, 0.0620),
        (45.0, 0.8962, 0.5571),
        (85.0, 0.5722, 0.9761),
        (90.0, 0.5322, 1.0),
    ],
)
def test_table_nodes_are_exact(lat_deg: float, x: float, y: float) -> None:
    assert robinson_xy(lat_deg) == pytest.approx((x, y))


def test_midpoint_interpolation() -> None:
    ratios = robinson_xy(47.5)
    assert ratios.x == pytest.approx(0.88205)
    assert ratios.y == pytest.approx(0.58735)


def test_interpolation_uses_magnitude() -> None:
    assert robinson_xy(-47.5) == robinson_xy(47.5)


def test_latitudes_beyond_pole_clamp_to_last_row() -> None:
    assert robinson_xy(95.0) == robinson_xy(90.0)
    assert robinson_xy(-180.0) == robinson_xy(90.0)


def test_table_is_read_only() -> None:
    with pytest.raises(ValueError):
        ROBINSON_TABLE[0, 1] = 2.0


def test_table_is_monotonic() -> None:
    assert np.all(np.diff(ROBINSON_TABLE[:, 1]) < 0)
    assert np.all(np.diff(ROBINSON_TABLE[:, 2]) > 0)


def test_equator_spans_full_width() -> None:
    x, y = robinson_forward(0.0, math.pi, 0.0, R)
    assert x == pytest.approx(X_SCALE * R * math.pi)
    assert y == 0.0


def test_pole_height() -> None:
    x, y = robinson_forward(math.pi / 2, 1.0, 0.0, R)
    assert x == pytest.approx(X_SCALE * R * 0.5322)
    assert y == pytest.approx(Y_SCALE * R)


def test_southern_hemisphere_is_mirrored() -> None:
    north = robinson_forward(0.5, 0.8, 0.0, R)
    south = robinson_forward(-0.5, 0.8, 0.0, R)
    assert south.x == pytest.approx(north.x)
    assert south.y == pytest.approx(-north.y)


def test_out_of_range_latitude_is_clamped() -> None:
    assert robinson_forward(2.0, 0.5, 0.0, R).y == pytest.approx(Y_SCALE * R)


def test_longitude_wraps_around_central_meridian() -> None:
    assert robinson_forward(0.3, 3 * math.pi / 2, 0.0, R) == pytest.approx(
        robinson_forward(0.3, -math.pi / 2, 0.0, R)
    )
    assert robinson_forward(0.3, 0.0, math.radians(-170), R).x == pytest.approx(
        X_SCALE * R * robinson_xy(math.degrees(0.3)).x * math.radians(170)
    )


def test_invalid_radius_fails_fast() -> None:
    with pytest.raises(ValueError):
        robinson_forward(0.0, 0.0, 0.0, -R)


def test_vectorized_matches_scalar(robin: Robinson) -> None:
    lats = np.radians(np.linspace(-90.0, 90.0, 25))[:, None]
    lons = np.linspace(-math.pi, math.pi, 13)[None, :]
    xs, ys = robin.forward_many(lats, lons, 0.3, R)
    assert xs.shape == (25, 13)
    for i in range(25):
        for j in range(13):
            x, y = robinson_forward(float(lats[i, 0]), float(lons[0, j]), 0.3, R)
            assert xs[i, j] == pytest.approx(x, abs=1e-6)
            assert ys[i, j] == pytest.approx(y, abs=1e-6)


def test_vectorized_rejects_bad_radius(robin: Robinson) -> None:
    with pytest.raises(ValueError):
        robin.forward_many([0.0], [0.0], 0.0, 0.0)


def test_class_identity(robin: Robinson) -> None:
    assert robin.name == "Robinson"
    assert robin.command_alias == "robin"
    assert robin.in_domain(math.pi / 2, 3.0, 0.0)
