import math

import pint
import pytest

from common.errors import OutOfRangeError
from common.types import Correction, Displacement, Point
from common.units import Q_, to_arcseconds, to_degrees, to_meters


def test_unit_reduction():
    assert to_degrees(Q_(30.0, "arcminute")) == pytest.approx(0.5)
    assert to_degrees(Q_(math.pi, "radian")) == pytest.approx(180.0)
    assert to_degrees(12.5) == 12.5
    assert to_arcseconds(Q_(0.5, "degree")) == pytest.approx(1800.0)
    assert to_meters(Q_(2.0, "kilometer")) == pytest.approx(2000.0)


def test_unit_reduction_rejects_wrong_dimension():
    with pytest.raises(pint.DimensionalityError):
        to_degrees(Q_(1.0, "meter"))


@pytest.mark.parametrize("lat, lon, alt", [
    (90.5, 135.0, 0.0),
    (35.0, -181.0, 0.0),
    (math.nan, 135.0, 0.0),
    (35.0, 135.0, math.inf),
])
def test_point_validation(lat, lon, alt):
    with pytest.raises(OutOfRangeError):
        Point(lat, lon, alt)


def test_point_from_quantities():
    p = Point.from_quantities(Q_(2100.0, "arcminute"), Q_(135.0, "degree"), Q_(234.0, "centimeter"))
    assert p.latitude == pytest.approx(35.0)
    assert p.longitude == 135.0
    assert p.altitude == pytest.approx(2.34)


def test_point_displacement_arithmetic():
    p = Point(35.0, 135.0, 2.0)
    d = Displacement(0.5, -0.25, 1.0)
    assert p + d == Point(35.5, 134.75, 3.0)
    assert p - d == Point(34.5, 135.25, 1.0)
    assert (p + d) + (-d) == p
    assert d.horizontal == 0.5


def test_correction_coerce():
    c = Correction(1.0, 2.0, 3.0)
    assert Correction.coerce(c) is c
    assert Correction.coerce([1, 2, 3]) == c
    assert Correction.coerce({"latitude": 1.0, "longitude": 2.0, "altitude": 3.0}) == c
    with pytest.raises(ValueError):
        Correction.coerce((1.0, 2.0, 3.0, 4.0))
