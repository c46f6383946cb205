"""
Bilinear Interpolation of Corner Parameters.

Corners are always given in (sw, se, nw, ne) order with fractional offsets
x (east) and y (north) inside the cell. Latitude and longitude parameters
stay in arcseconds until ``to_displacement`` converts them to degrees; no
cos(latitude) scaling is applied anywhere.
"""

from typing import Sequence, Tuple

from common.constants import GridConstants
from common.types import Correction, Displacement


def bilinear_weights(x: float, y: float) -> Tuple[float, float, float, float]:
    """Weights of the (sw, se, nw, ne) corners; they sum to 1."""
    return (1.0 - x) * (1.0 - y), x * (1.0 - y), (1.0 - x) * y, x * y


def bilinear(sw: float, se: float, nw: float, ne: float, x: float, y: float) -> float:
    w_sw, w_se, w_nw, w_ne = bilinear_weights(x, y)
    return sw * w_sw + se * w_se + nw * w_nw + ne * w_ne


def interpolate(corners: Sequence[Correction], x: float, y: float) -> Correction:
    """Blend four corner parameters at offset (x, y).

    Parameters
    ----------
    corners : sequence of Correction
        Parameters in (sw, se, nw, ne) order.
    x, y : float
        Longitude and latitude fractions in [0, 1).

    Returns
    -------
    Correction
        Interpolated parameter (arcsec, arcsec, m).
    """
    sw, se, nw, ne = corners
    return Correction(
        latitude=bilinear(sw.latitude, se.latitude, nw.latitude, ne.latitude, x, y),
        longitude=bilinear(sw.longitude, se.longitude, nw.longitude, ne.longitude, x, y),
        altitude=bilinear(sw.altitude, se.altitude, nw.altitude, ne.altitude, x, y)
    )


def to_displacement(correction: Correction) -> Displacement:
    """Convert an arcsecond parameter into a degree displacement."""
    scale = GridConstants.ARCSEC_PER_DEGREE.value
    return Displacement(
        latitude=correction.latitude / scale,
        longitude=correction.longitude / scale,
        altitude=correction.altitude
    )
