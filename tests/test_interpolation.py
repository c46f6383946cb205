import pytest

from common.types import Correction
from transformation.interpolation import bilinear, bilinear_weights, interpolate, to_displacement


CORNERS = (
    Correction(-0.00622, 0.01516, 0.0946),
    Correction(-0.00663, 0.01492, 0.10374),
    Correction(-0.0062, 0.01529, 0.08972),
    Correction(-0.00664, 0.01506, 0.10087),
)


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (0.25, 0.75), (0.5, 0.5), (0.999, 0.001)])
def test_weights_sum_to_one(x, y):
    assert sum(bilinear_weights(x, y)) == pytest.approx(1.0)


def test_bilinear_at_corners_and_center():
    assert bilinear(1.0, 2.0, 3.0, 4.0, 0.0, 0.0) == 1.0
    assert bilinear(1.0, 2.0, 3.0, 4.0, 1.0, 0.0) == 2.0
    assert bilinear(1.0, 2.0, 3.0, 4.0, 0.0, 1.0) == 3.0
    assert bilinear(1.0, 2.0, 3.0, 4.0, 1.0, 1.0) == 4.0
    assert bilinear(1.0, 2.0, 3.0, 4.0, 0.5, 0.5) == pytest.approx(2.5)


def test_interpolate_sample_cell():
    result = interpolate(CORNERS, 0.405680656, 0.49059496)
    # (36.103773017086695 - 36.10377479) deg in arcseconds
    assert result.latitude == pytest.approx(-0.0063824879, abs=1e-9)
    assert result.altitude == pytest.approx(2.4363138578103 - 2.34, abs=1e-9)


def test_interpolate_on_sw_node():
    assert interpolate(CORNERS, 0.0, 0.0) == CORNERS[0]


def test_to_displacement_scales_angles_only():
    d = to_displacement(Correction(3600.0, -36.0, 1.5))
    assert d.latitude == pytest.approx(1.0)
    assert d.longitude == pytest.approx(-0.01)
    assert d.altitude == 1.5
