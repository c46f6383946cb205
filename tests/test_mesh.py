import math

import pytest

from common.errors import OutOfRangeError
from common.types import Point
from meshcode.cell import MeshCell, cell_corners
from meshcode.mesh import MeshCoord, MeshNode, MeshUnit, from_point, to_point


def test_from_point_one_and_five():
    assert from_point(36.10377479, 140.087855041, MeshUnit.ONE) == 54401027
    assert from_point(36.10377479, 140.087855041, MeshUnit.FIVE) == 54401005


def test_from_point_origin():
    assert from_point(35.0, 135.0, MeshUnit.ONE) == 52354000
    assert from_point(35.0, 135.0, MeshUnit.FIVE) == 52354000


def test_to_point_returns_south_west_corner():
    p = to_point(54401005)
    assert p.latitude == pytest.approx(2.0 * 54.125 / 3.0, abs=1e-12)
    assert p.longitude == pytest.approx(140.0625, abs=1e-12)
    assert p.altitude == 0.0


@pytest.mark.parametrize("lat, lon", [
    (35.0, 135.0),
    (36.10377479, 140.087855041),
    (20.42, 122.93),
    (45.52, 148.95),
    (0.0, 100.0),
    (66.66, 179.99),
    (36.125, 140.0625),
])
@pytest.mark.parametrize("unit", [MeshUnit.ONE, MeshUnit.FIVE])
def test_origin_is_lower_left_and_reencodes(lat, lon, unit):
    code = from_point(lat, lon, unit)
    origin = to_point(code)
    assert origin.latitude <= lat + 1e-12
    assert origin.longitude <= lon + 1e-12
    assert from_point(origin.latitude, origin.longitude, unit) == code


@pytest.mark.parametrize("lat, lon", [
    (-0.1, 135.0),
    (66.67, 135.0),
    (35.0, 99.9),
    (35.0, 180.0),
    (math.nan, 135.0),
])
def test_from_point_out_of_range(lat, lon):
    with pytest.raises(OutOfRangeError):
        from_point(lat, lon, MeshUnit.ONE)


@pytest.mark.parametrize("code", [-1, 100_000_000, 54408005, 54801005])
def test_to_point_invalid_meshcode(code):
    with pytest.raises(OutOfRangeError):
        to_point(code)


def test_meshcode_digits():
    node = MeshNode.from_meshcode(54401027)
    assert node.latitude == MeshCoord(54, 1, 2)
    assert node.longitude == MeshCoord(40, 0, 7)
    assert node.meshcode == 54401027
    assert node.is_aligned(MeshUnit.ONE)
    assert not node.is_aligned(MeshUnit.FIVE)


def test_next_up():
    assert MeshCoord(54, 1, 5).next_up(MeshUnit.FIVE) == MeshCoord(54, 2, 0)
    assert MeshCoord(54, 7, 5).next_up(MeshUnit.FIVE) == MeshCoord(55, 0, 0)
    assert MeshCoord(54, 1, 2).next_up(MeshUnit.ONE) == MeshCoord(54, 1, 3)
    assert MeshCoord(54, 1, 9).next_up(MeshUnit.ONE) == MeshCoord(54, 2, 0)
    with pytest.raises(OutOfRangeError):
        MeshCoord(99, 7, 9).next_up(MeshUnit.ONE)


def test_next_down():
    assert MeshCoord(54, 2, 0).next_down(MeshUnit.FIVE) == MeshCoord(54, 1, 5)
    assert MeshCoord(54, 0, 0).next_down(MeshUnit.ONE) == MeshCoord(53, 7, 9)
    with pytest.raises(OutOfRangeError):
        MeshCoord(0, 0, 0).next_down(MeshUnit.ONE)


def test_next_up_requires_alignment():
    with pytest.raises(ValueError):
        MeshCoord(54, 1, 2).next_up(MeshUnit.FIVE)


def test_unit_spans():
    assert MeshUnit.ONE.longitude_span == pytest.approx(1.0 / 80.0)
    assert MeshUnit.FIVE.latitude_span == pytest.approx(1.0 / 24.0)


def test_cell_corners_order_and_fraction():
    codes, x, y = cell_corners(Point(36.10377479, 140.087855041), MeshUnit.FIVE)
    assert codes == (54401005, 54401100, 54401055, 54401150)
    assert x == pytest.approx(0.405680656, abs=1e-9)
    assert y == pytest.approx(0.49059496, abs=1e-9)


def test_cell_corners_one_unit():
    codes, x, y = cell_corners(Point(36.10377479, 140.087855041), MeshUnit.ONE)
    assert codes == (54401027, 54401028, 54401037, 54401038)
    assert 0.0 <= x < 1.0
    assert 0.0 <= y < 1.0


def test_point_on_grid_line_has_zero_fraction():
    codes, x, y = cell_corners(Point(35.0, 135.0), MeshUnit.FIVE)
    assert codes == (52354000, 52354005, 52354050, 52354055)
    assert x == 0.0
    assert y == 0.0

    codes, x, y = cell_corners(Point(36.125, 140.0625), MeshUnit.FIVE)
    assert codes[0] == 54401055
    assert x == 0.0
    assert y == 0.0


def test_point_on_reconstructed_grid_line():
    # 2/3 scaling does not round-trip exactly; the origin must still map to itself
    origin = to_point(54401000)
    codes, x, y = cell_corners(origin, MeshUnit.FIVE)
    assert codes[0] == 54401000
    assert (x, y) == (0.0, 0.0)


def test_cell_corners_north_east_outside_domain():
    with pytest.raises(OutOfRangeError):
        cell_corners(Point(35.0, 179.99), MeshUnit.ONE)


def test_mesh_cell_from_node_requires_alignment():
    with pytest.raises(ValueError):
        MeshCell.from_node(MeshNode.from_meshcode(54401027), MeshUnit.FIVE)
