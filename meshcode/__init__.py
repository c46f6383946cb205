"""
Meshcode Module.

Grid-square addressing under JIS X 0410: encode/decode positions to and
from meshcodes at a given resolution, and locate the cell enclosing a point.
"""

from meshcode.mesh import (
    MeshUnit,
    MeshCoord,
    MeshNode,
    from_point,
    to_point,
)

from meshcode.cell import (
    CORNER_NAMES,
    MeshCell,
    cell_corners,
)

__all__ = [
    "MeshUnit",
    "MeshCoord",
    "MeshNode",
    "from_point",
    "to_point",
    "CORNER_NAMES",
    "MeshCell",
    "cell_corners",
]
