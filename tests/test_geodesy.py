import numpy as np
import pytest

from common.types import Point
from geospatial.distance_calculations import (
    geodesic_distance,
    geodesic_distance_batch,
    point_distance,
)


def test_zero_distance():
    assert geodesic_distance(35.0, 135.0, 35.0, 135.0) == pytest.approx(0.0, abs=1e-9)


def test_one_degree_of_meridian_at_equator():
    # GRS80 meridian arc from 0 to 1 degree
    assert geodesic_distance(0.0, 135.0, 1.0, 135.0) == pytest.approx(110574.3, rel=1e-5)


def test_point_distance_ignores_altitude():
    a = Point(36.1, 140.09, 0.0)
    b = Point(36.1, 140.09, 100.0)
    assert point_distance(a, b) == pytest.approx(0.0, abs=1e-9)


def test_parameter_scale_residual():
    # 1e-5 arcsec of latitude is about 0.3 mm on the ground
    d = geodesic_distance(36.1, 140.09, 36.1 + 1e-5 / 3600.0, 140.09)
    assert 2e-4 < d < 4e-4


def test_batch_matches_scalar():
    lat1 = np.array([35.0, 36.1])
    lon1 = np.array([135.0, 140.09])
    lat2 = np.array([35.1, 36.2])
    lon2 = np.array([135.1, 140.19])
    batch = geodesic_distance_batch(lat1, lon1, lat2, lon2)
    assert batch.shape == (2,)
    for i in range(2):
        assert batch[i] == pytest.approx(geodesic_distance(lat1[i], lon1[i], lat2[i], lon2[i]))
