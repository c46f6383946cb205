"""
Geospatial Module.

Geodesic distances on GRS80, used to express angular residuals as ground
distances.
"""

from geospatial.distance_calculations import (
    geodesic_distance,
    geodesic_distance_batch,
    point_distance,
)

__all__ = [
    "geodesic_distance",
    "geodesic_distance_batch",
    "point_distance",
]
