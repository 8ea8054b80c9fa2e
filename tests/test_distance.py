import math

import pytest
from pytest import approx

from uvoxid import FrameMismatchError, UvoxId
from uvoxid._const import EARTH_RADIUS_UM
from uvoxid.distance import haversine_distance, linear_distance


EARTH_RADIUS_M = 6_371_000


def test_linear_distance():
    uv1 = UvoxId.earth(EARTH_RADIUS_UM, 0, 0)
    uv2 = UvoxId.earth(EARTH_RADIUS_UM, 0, 1_000_000)  # 1 degree east

    expected = 2 * EARTH_RADIUS_M * math.sin(math.radians(0.5))
    assert linear_distance(uv1, uv2) == approx(expected, rel=1e-9)
    assert linear_distance(uv1, uv2) > 100_000

    # Purely radial separation
    uv3 = UvoxId.earth(EARTH_RADIUS_UM + 5_000_000, 0, 0)
    assert linear_distance(uv1, uv3) == approx(5., abs=1e-6)

    # Opposite sides of the sphere
    uv4 = UvoxId.earth(EARTH_RADIUS_UM, 0, -180_000_000)
    assert linear_distance(uv1, uv4) == approx(2 * EARTH_RADIUS_M, rel=1e-9)

    assert linear_distance(uv1, uv1) == 0.


def test_haversine_distance():
    uv1 = UvoxId.earth(EARTH_RADIUS_UM, 0, 0)
    uv2 = UvoxId.earth(EARTH_RADIUS_UM, 0, 1_000_000)

    expected = EARTH_RADIUS_M * math.radians(1)
    assert haversine_distance(uv1, uv2) == approx(expected, rel=1e-9)
    assert 110_000 < haversine_distance(uv1, uv2) < 112_000

    # Antimeridian test
    uv3 = UvoxId.earth(EARTH_RADIUS_UM, 0, 179_000_000)
    uv4 = UvoxId.earth(EARTH_RADIUS_UM, 0, -179_000_000)
    assert haversine_distance(uv3, uv4) == approx(222389.853289, abs=1e-3)

    # Surface distance always exceeds the chord
    assert haversine_distance(uv1, uv2) > linear_distance(uv1, uv2)


def test_distance_cross_frame():
    with pytest.raises(FrameMismatchError):
        _ = linear_distance(UvoxId(0, 1, 0, 0), UvoxId(1, 1, 0, 0))

    with pytest.raises(FrameMismatchError):
        _ = haversine_distance(UvoxId(0, 1, 0, 0), UvoxId(1, 1, 0, 0))
