"""
Geodesic Distances on the GRS80 Ellipsoid.

This module turns angular residuals of the transformation into ground
distances, so that a failed verification can be reported in meters.
JGD2000 and JGD2011 are both realised on GRS80.

Implementation
--------------
This module wraps the `pyproj` library, which uses the GeographicLib
algorithms by Charles Karney.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

import numpy as np
from numpy.typing import NDArray

from pyproj import Geod

from common.types import Point


# Create the geodesic calculator for GRS80
_grs80_geod = Geod(ellps='GRS80')


def geodesic_distance(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float
) -> float:
    """Compute geodesic distance between two points.

    Parameters
    ----------
    lat1_deg, lon1_deg : float
        First point in degrees.
    lat2_deg, lon2_deg : float
        Second point in degrees.

    Returns
    -------
    float
        Distance in meters.
    """
    _, _, distance_m = _grs80_geod.inv(lon1_deg, lat1_deg, lon2_deg, lat2_deg)
    return float(distance_m)


def point_distance(a: Point, b: Point) -> float:
    """Horizontal geodesic distance between two points in meters (altitude ignored)."""
    return geodesic_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def geodesic_distance_batch(
    lat1_deg: NDArray[np.float64],
    lon1_deg: NDArray[np.float64],
    lat2_deg: NDArray[np.float64],
    lon2_deg: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Vectorized geodesic distance in meters.

    Parameters
    ----------
    lat1_deg, lon1_deg, lat2_deg, lon2_deg : ndarray
        Coordinates in degrees, all of the same shape.

    Returns
    -------
    ndarray
        Distances in meters.
    """
    _, _, distance_m = _grs80_geod.inv(
        np.asarray(lon1_deg, dtype=np.float64),
        np.asarray(lat1_deg, dtype=np.float64),
        np.asarray(lon2_deg, dtype=np.float64),
        np.asarray(lat2_deg, dtype=np.float64)
    )
    return np.asarray(distance_m, dtype=np.float64)
