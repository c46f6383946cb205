"""
Mesh cells: the four nodes around a point and the point's offset inside.
"""

from dataclasses import dataclass
from typing import Tuple
import math

from common.constants import GridConstants
from common.types import Point
from meshcode.mesh import MeshNode, MeshUnit

# Fixed corner order used by every caller
CORNER_NAMES: Tuple[str, str, str, str] = ("sw", "se", "nw", "ne")

_BELOW_ONE = math.nextafter(1.0, 0.0)


def _clamp_fraction(value: float) -> float:
    # round-off around grid lines
    if value < GridConstants.MESH_SNAP_TOLERANCE.value:
        return 0.0
    return min(value, _BELOW_ONE)


@dataclass(frozen=True)
class MeshCell:
    """A grid cell of resolution ``unit``, given by its four corner nodes.

    Attributes
    ----------
    south_west, south_east, north_west, north_east : MeshNode
        Corner nodes.
    unit : MeshUnit
        Resolution of the cell.
    """
    south_west: MeshNode
    south_east: MeshNode
    north_west: MeshNode
    north_east: MeshNode
    unit: MeshUnit

    @classmethod
    def from_node(cls, node: MeshNode, unit: MeshUnit) -> 'MeshCell':
        """Cell whose south-west corner is ``node``.

        Raises
        ------
        ValueError
            If ``node`` is not aligned to ``unit``.
        OutOfRangeError
            If the north or east neighbour leaves the meshcode domain.
        """
        if not node.is_aligned(unit):
            raise ValueError(f"meshcode {node.meshcode} is not aligned to {unit!r}")
        north = node.latitude.next_up(unit)
        east = node.longitude.next_up(unit)
        return cls(
            south_west=node,
            south_east=MeshNode(node.latitude, east),
            north_west=MeshNode(north, node.longitude),
            north_east=MeshNode(north, east),
            unit=unit
        )

    @classmethod
    def from_point(cls, point: Point, unit: MeshUnit) -> 'MeshCell':
        """Cell of resolution ``unit`` enclosing ``point``.

        A point on a grid line belongs to the cell it is the south/west
        edge of.
        """
        node = MeshNode.from_point(point.latitude, point.longitude, unit)
        return cls.from_node(node, unit)

    @property
    def nodes(self) -> Tuple[MeshNode, MeshNode, MeshNode, MeshNode]:
        return self.south_west, self.south_east, self.north_west, self.north_east

    @property
    def meshcodes(self) -> Tuple[int, int, int, int]:
        """Corner meshcodes in (sw, se, nw, ne) order."""
        return tuple(node.meshcode for node in self.nodes)

    def position(self, point: Point) -> Tuple[float, float]:
        """Fractional offset of ``point`` from the south-west corner.

        Returns
        -------
        Tuple[float, float]
            (y, x): latitude and longitude fractions, each in [0, 1).

        Notes
        -----
        A third-level step is 1/120 degree of latitude and 1/80 degree
        of longitude, since latitudes are scaled by 1.5 before the digits
        are taken.
        """
        lat = point.latitude - self.south_west.latitude.to_latitude()
        lon = point.longitude - self.south_west.longitude.to_longitude()
        y = lat * (120.0 / self.unit)
        x = lon * (80.0 / self.unit)
        return _clamp_fraction(y), _clamp_fraction(x)


def cell_corners(
    point: Point,
    unit: MeshUnit
) -> Tuple[Tuple[int, int, int, int], float, float]:
    """Corner meshcodes of the cell enclosing ``point`` and its offset.

    Parameters
    ----------
    point : Point
        Position in degrees.
    unit : MeshUnit
        Grid resolution.

    Returns
    -------
    tuple
        ((sw, se, nw, ne), frac_x, frac_y) with both fractions in [0, 1).

    Raises
    ------
    OutOfRangeError
        If the point, or the north-east corner of its cell, lies outside
        the meshcode domain.
    """
    cell = MeshCell.from_point(point, unit)
    y, x = cell.position(point)
    return cell.meshcodes, x, y
