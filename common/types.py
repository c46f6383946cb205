"""
Type Definitions with Units for the Transformation System.

This module defines the value types exchanged between the mesh, grid and
transformation modules. Units are fixed per field and documented here;
pint quantities are accepted only through the explicit constructors.

Design Rationale
----------------
Points, parameters and displacements are all (latitude, longitude,
altitude) triples but in different units. Keeping them as separate frozen
dataclasses stops an arcsecond shift from being added to a degree
coordinate by accident.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple, Union
import math

from common.errors import OutOfRangeError
from common.units import QuantityLike, to_arcseconds, to_degrees, to_meters


@dataclass(frozen=True)
class Point:
    """A geodetic position.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in DEGREES. Range: [-90, 90].
    longitude : float
        Geodetic longitude in DEGREES. Range: [-180, 180].
    altitude : float, optional
        Height in METERS. Default is 0.

    Examples
    --------
    >>> p = Point(35.0, 135.0, 2.34)
    >>> p.latitude
    35.0
    """
    latitude: float  # degrees
    longitude: float  # degrees
    altitude: float = 0.0  # meters

    def __post_init__(self):
        """Validate coordinate ranges."""
        if math.isnan(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            raise OutOfRangeError(
                f"latitude {self.latitude} deg out of range [-90, 90]"
            )
        if math.isnan(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            raise OutOfRangeError(
                f"longitude {self.longitude} deg out of range [-180, 180]"
            )
        if not math.isfinite(self.altitude):
            raise OutOfRangeError(f"altitude {self.altitude} m is not finite")

    @classmethod
    def from_quantities(
        cls,
        latitude: QuantityLike,
        longitude: QuantityLike,
        altitude: QuantityLike = 0.0
    ) -> 'Point':
        """Create a point from pint quantities (bare numbers keep default units).

        Parameters
        ----------
        latitude, longitude : float or pint.Quantity
            Angles; bare numbers are degrees.
        altitude : float or pint.Quantity, optional
            Height; a bare number is meters.

        Returns
        -------
        Point
        """
        return cls(
            latitude=to_degrees(latitude),
            longitude=to_degrees(longitude),
            altitude=to_meters(altitude)
        )

    def __add__(self, other: 'Displacement') -> 'Point':
        if not isinstance(other, Displacement):
            return NotImplemented
        return Point(
            latitude=self.latitude + other.latitude,
            longitude=self.longitude + other.longitude,
            altitude=self.altitude + other.altitude
        )

    def __sub__(self, other: 'Displacement') -> 'Point':
        if not isinstance(other, Displacement):
            return NotImplemented
        return Point(
            latitude=self.latitude - other.latitude,
            longitude=self.longitude - other.longitude,
            altitude=self.altitude - other.altitude
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.latitude, self.longitude, self.altitude


@dataclass(frozen=True)
class Correction:
    """A published per-node parameter (a.k.a. Parameter).

    Attributes
    ----------
    latitude : float
        Latitude shift in ARCSECONDS.
    longitude : float
        Longitude shift in ARCSECONDS.
    altitude : float
        Height shift in METERS.
    """
    latitude: float  # arcsec
    longitude: float  # arcsec
    altitude: float  # meters

    @classmethod
    def coerce(cls, value: Union['Correction', Sequence[float], Mapping[str, Any]]) -> 'Correction':
        """Build a Correction from a Correction, a 3-sequence or a mapping.

        Sequence items and mapping values may be pint quantities.

        Raises
        ------
        ValueError
            If the value does not hold exactly three components.
        """
        if isinstance(value, Correction):
            return value
        if isinstance(value, Mapping):
            try:
                items = (value["latitude"], value["longitude"], value["altitude"])
            except KeyError as e:
                raise ValueError(f"parameter mapping is missing key {e}") from e
        else:
            items = tuple(value)
            if len(items) != 3:
                raise ValueError(
                    f"parameter needs 3 components (latitude, longitude, altitude), "
                    f"got {len(items)}"
                )
        return cls(
            latitude=to_arcseconds(items[0]),
            longitude=to_arcseconds(items[1]),
            altitude=to_meters(items[2])
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return self.latitude, self.longitude, self.altitude


# Name used in the GIAJ par file documentation
Parameter = Correction


@dataclass(frozen=True)
class Displacement:
    """An interpolated correction ready to be applied to a Point.

    Attributes
    ----------
    latitude : float
        Latitude shift in DEGREES.
    longitude : float
        Longitude shift in DEGREES.
    altitude : float
        Height shift in METERS.
    """
    latitude: float  # degrees
    longitude: float  # degrees
    altitude: float  # meters

    def __neg__(self) -> 'Displacement':
        return Displacement(-self.latitude, -self.longitude, -self.altitude)

    @property
    def horizontal(self) -> float:
        """Largest of the absolute latitude and longitude shifts, in degrees."""
        return max(abs(self.latitude), abs(self.longitude))
