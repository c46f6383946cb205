"""
Meshcode Addressing (JIS X 0410).

A meshcode is an 8-digit integer naming a node of the standard grid
squares. Each axis is addressed by three digits:

- first  : 0..99, one step is 40 arcmin of latitude / 1 degree of longitude
- second : 0..7,  one eighth of a first-level step
- third  : 0..9,  one tenth of a second-level step

and the meshcode interleaves them as ``LL OO l o t u`` (latitude first,
longitude first, latitude second, longitude second, latitude third,
longitude third). Latitudes are multiplied by 1.5 before the digits are
taken; longitudes are offset by 100 degrees.

Parameter grids come in two resolutions (MeshUnit): every third-level
node (ONE) or every fifth one (FIVE, third digit 0 or 5).

Examples
--------
>>> from_point(36.10377479, 140.087855041, MeshUnit.ONE)
54401027
>>> from_point(36.10377479, 140.087855041, MeshUnit.FIVE)
54401005
"""

from dataclasses import dataclass
from enum import IntEnum
import math
import operator

from common.constants import GridConstants
from common.errors import OutOfRangeError
from common.types import Point


_THIRD_PER_FIRST = int(GridConstants.THIRD_LEVEL_DIVISIONS.value)  # 80
_FIRST_LIMIT = 100
_LONGITUDE_FIRST_LIMIT = int(
    GridConstants.MESH_LONGITUDE_MAX.value - GridConstants.MESH_LONGITUDE_MIN.value
)  # 80


class MeshUnit(IntEnum):
    """Resolution of a parameter grid, as the step of the third digit."""
    ONE = 1
    FIVE = 5

    @property
    def latitude_span(self) -> float:
        """Cell height in degrees."""
        return 2.0 * self.value / (3.0 * _THIRD_PER_FIRST)

    @property
    def longitude_span(self) -> float:
        """Cell width in degrees."""
        return self.value / _THIRD_PER_FIRST


def _snap_floor(value: float) -> int:
    """Floor, except that values within round-off of an integer snap onto it."""
    nearest = round(value)
    if abs(value - nearest) < GridConstants.MESH_SNAP_TOLERANCE.value:
        return int(nearest)
    return math.floor(value)


@dataclass(frozen=True)
class MeshCoord:
    """One axis of a mesh node.

    Attributes
    ----------
    first : int
        First-level digit(s), 0..99.
    second : int
        Second-level digit, 0..7.
    third : int
        Third-level digit, 0..9.
    """
    first: int
    second: int
    third: int

    def __post_init__(self):
        if not 0 <= self.first < _FIRST_LIMIT:
            raise OutOfRangeError(f"first-level digit {self.first} out of range [0, 99]")
        if not 0 <= self.second <= 7:
            raise OutOfRangeError(f"second-level digit {self.second} out of range [0, 7]")
        if not 0 <= self.third <= 9:
            raise OutOfRangeError(f"third-level digit {self.third} out of range [0, 9]")

    @classmethod
    def _from_index(cls, index: int, unit: MeshUnit) -> 'MeshCoord':
        """Build from a count of third-level steps, truncated to ``unit``."""
        first, rest = divmod(index, _THIRD_PER_FIRST)
        second, third = divmod(rest, 10)
        return cls(first, second, third - third % unit)

    @classmethod
    def from_latitude(cls, degree: float, unit: MeshUnit) -> 'MeshCoord':
        """Latitude axis of the node at or south of ``degree``.

        Raises
        ------
        OutOfRangeError
            Unless 0 <= degree < 66.666...
        """
        scaled = GridConstants.LATITUDE_SCALE.value * degree
        if math.isnan(scaled) or not 0.0 <= scaled < _FIRST_LIMIT:
            raise OutOfRangeError(
                f"latitude {degree} deg outside meshcode domain "
                f"[{GridConstants.MESH_LATITUDE_MIN.value}, "
                f"{GridConstants.MESH_LATITUDE_MAX.value})"
            )
        index = _snap_floor(_THIRD_PER_FIRST * scaled)
        if index >= _FIRST_LIMIT * _THIRD_PER_FIRST:
            raise OutOfRangeError(f"latitude {degree} deg rounds onto the domain edge")
        return cls._from_index(index, unit)

    @classmethod
    def from_longitude(cls, degree: float, unit: MeshUnit) -> 'MeshCoord':
        """Longitude axis of the node at or west of ``degree``.

        Raises
        ------
        OutOfRangeError
            Unless 100 <= degree < 180.
        """
        lo = GridConstants.MESH_LONGITUDE_MIN.value
        hi = GridConstants.MESH_LONGITUDE_MAX.value
        if math.isnan(degree) or not lo <= degree < hi:
            raise OutOfRangeError(
                f"longitude {degree} deg outside meshcode domain [{lo}, {hi})"
            )
        index = _snap_floor(_THIRD_PER_FIRST * (degree - lo))
        if index >= _LONGITUDE_FIRST_LIMIT * _THIRD_PER_FIRST:
            raise OutOfRangeError(f"longitude {degree} deg rounds onto the domain edge")
        return cls._from_index(index, unit)

    def _value(self) -> float:
        return self.first + self.second / 8.0 + self.third / 80.0

    def to_latitude(self) -> float:
        """South edge of this coordinate in degrees."""
        return 2.0 * self._value() / 3.0

    def to_longitude(self) -> float:
        """West edge of this coordinate in degrees."""
        return (
            GridConstants.MESH_LONGITUDE_MIN.value
            + self.first + self.second / 8.0 + self.third / 80.0
        )

    def is_aligned(self, unit: MeshUnit) -> bool:
        return self.third % unit == 0

    def next_up(self, unit: MeshUnit) -> 'MeshCoord':
        """The coordinate one ``unit`` step north / east.

        Raises
        ------
        OutOfRangeError
            When stepping past first-level digit 99.
        """
        if not self.is_aligned(unit):
            raise ValueError(f"{self} is not aligned to {unit!r}")
        if self.third + unit <= 9:
            return MeshCoord(self.first, self.second, self.third + unit)
        if self.second < 7:
            return MeshCoord(self.first, self.second + 1, 0)
        if self.first + 1 >= _FIRST_LIMIT:
            raise OutOfRangeError(f"{self} has no next coordinate")
        return MeshCoord(self.first + 1, 0, 0)

    def next_down(self, unit: MeshUnit) -> 'MeshCoord':
        """The coordinate one ``unit`` step south / west.

        Raises
        ------
        OutOfRangeError
            When stepping below 0.
        """
        if not self.is_aligned(unit):
            raise ValueError(f"{self} is not aligned to {unit!r}")
        last = 10 - unit
        if self.third > 0:
            return MeshCoord(self.first, self.second, self.third - unit)
        if self.second > 0:
            return MeshCoord(self.first, self.second - 1, last)
        if self.first == 0:
            raise OutOfRangeError(f"{self} has no previous coordinate")
        return MeshCoord(self.first - 1, 7, last)


@dataclass(frozen=True)
class MeshNode:
    """A grid node, the south-west corner of the cell it names.

    Attributes
    ----------
    latitude : MeshCoord
        Latitude axis digits.
    longitude : MeshCoord
        Longitude axis digits; the first-level digit is below 80
        (the node lies west of 180 degrees).
    """
    latitude: MeshCoord
    longitude: MeshCoord

    def __post_init__(self):
        if self.longitude.first >= _LONGITUDE_FIRST_LIMIT:
            raise OutOfRangeError(
                f"longitude first-level digit {self.longitude.first} lies at or beyond 180 deg"
            )

    @classmethod
    def from_point(cls, latitude: float, longitude: float, unit: MeshUnit) -> 'MeshNode':
        """Node at the south-west corner of the ``unit`` cell holding the position."""
        return cls(
            MeshCoord.from_latitude(latitude, unit),
            MeshCoord.from_longitude(longitude, unit)
        )

    @classmethod
    def from_meshcode(cls, meshcode: int) -> 'MeshNode':
        """Decode an 8-digit meshcode.

        Raises
        ------
        OutOfRangeError
            If the code is negative, longer than 8 digits or has an
            invalid digit.
        """
        code = operator.index(meshcode)
        if not 0 <= code < 100_000_000:
            raise OutOfRangeError(f"meshcode {meshcode} is not an 8-digit code")
        lat_first, rest = divmod(code, 1_000_000)
        lon_first, rest = divmod(rest, 10_000)
        lat_second, rest = divmod(rest, 1000)
        lon_second, rest = divmod(rest, 100)
        lat_third, lon_third = divmod(rest, 10)
        return cls(
            MeshCoord(lat_first, lat_second, lat_third),
            MeshCoord(lon_first, lon_second, lon_third)
        )

    @property
    def meshcode(self) -> int:
        lat, lon = self.latitude, self.longitude
        return (
            lat.first * 1_000_000
            + lon.first * 10_000
            + lat.second * 1000
            + lon.second * 100
            + lat.third * 10
            + lon.third
        )

    def is_aligned(self, unit: MeshUnit) -> bool:
        """Whether this node belongs to a grid of resolution ``unit``."""
        return self.latitude.is_aligned(unit) and self.longitude.is_aligned(unit)

    def to_point(self) -> Point:
        return Point(
            latitude=self.latitude.to_latitude(),
            longitude=self.longitude.to_longitude(),
            altitude=0.0
        )


def from_point(latitude: float, longitude: float, unit: MeshUnit) -> int:
    """Meshcode of the ``unit`` cell enclosing a position.

    Truncates toward the south-west; never rounds to nearest.

    Raises
    ------
    OutOfRangeError
        Outside 0 <= latitude < 66.666... and 100 <= longitude < 180.
    """
    return MeshNode.from_point(latitude, longitude, unit).meshcode


def to_point(meshcode: int) -> Point:
    """South-west corner (origin) of the cell named by ``meshcode``.

    Raises
    ------
    OutOfRangeError
        For an invalid meshcode.
    """
    return MeshNode.from_meshcode(meshcode).to_point()
