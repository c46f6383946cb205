"""
Unit Registry for Coordinate Inputs.

This module provides a centralized unit system using the `pint` library so
that angles and heights can be handed to the transformation as quantities
(degrees, arcminutes, radians, meters, ...) instead of bare floats. The
transformation itself runs on plain floats in degrees and meters; this
module is the boundary where quantities are reduced to those units.

Example Usage
-------------
>>> from common.units import Q_, to_degrees
>>> to_degrees(Q_(35.0, 'degree'))
35.0
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

QuantityLike = Union[float, int, pint.Quantity]


def to_degrees(value: QuantityLike) -> float:
    """Reduce an angle to a float in degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number is taken to be in degrees already.

    Returns
    -------
    float
        The angle in degrees.

    Raises
    ------
    pint.DimensionalityError
        If a quantity is not an angle.
    """
    if isinstance(value, pint.Quantity):
        return float(value.to(ureg.degree).magnitude)
    return float(value)


def to_meters(value: QuantityLike) -> float:
    """Reduce a length to a float in meters.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number is taken to be in meters already.

    Returns
    -------
    float
        The length in meters.
    """
    if isinstance(value, pint.Quantity):
        return float(value.to(ureg.meter).magnitude)
    return float(value)


def to_arcseconds(value: QuantityLike) -> float:
    """Reduce an angle to a float in arcseconds.

    Bare numbers are taken to be arcseconds, the unit of par-file shifts.
    """
    if isinstance(value, pint.Quantity):
        return float(value.to(ureg.arcsecond).magnitude)
    return float(value)
