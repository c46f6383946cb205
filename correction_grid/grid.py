"""
Parameter Grid.

Read-only mapping from meshcode to published parameter, tagged with the
grid resolution. Coverage may be sparse: a missing key is a legitimate
answer and is reported as ``None``, never replaced by a zero parameter.
"""

import collections.abc
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from common.types import Correction
from meshcode.mesh import MeshUnit

CornerParameters = Tuple[
    Optional[Correction], Optional[Correction], Optional[Correction], Optional[Correction]
]


class ParameterGrid(collections.abc.Mapping):
    """Immutable meshcode -> Correction mapping at one resolution.

    The grid copies the parameters it is given into a read-only view, so it
    can be shared between threads without locking.

    Parameters
    ----------
    unit : MeshUnit
        Resolution the meshcodes are aligned to.
    parameters : Mapping[int, Correction]
        Published parameters.

    Examples
    --------
    >>> grid = ParameterGrid(MeshUnit.FIVE, {54401005: Correction(-0.00622, 0.01516, 0.0946)})
    >>> grid.get(54401005)
    Correction(latitude=-0.00622, longitude=0.01516, altitude=0.0946)
    >>> grid.get(54401055) is None
    True
    """

    def __init__(self, unit: MeshUnit, parameters: Mapping[int, Correction]):
        self._unit = MeshUnit(unit)
        self._parameters = MappingProxyType(dict(parameters))

    @property
    def unit(self) -> MeshUnit:
        return self._unit

    def __getitem__(self, meshcode: int) -> Correction:
        return self._parameters[meshcode]

    def __iter__(self) -> Iterator[int]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def get(self, meshcode: int, default: Optional[Correction] = None) -> Optional[Correction]:
        """Direct lookup; ``default`` (None) for a node without a parameter."""
        return self._parameters.get(meshcode, default)

    def corners(self, meshcodes: Sequence[int]) -> CornerParameters:
        """Parameters of four corners in (sw, se, nw, ne) order.

        Missing corners come back as ``None`` for the caller to report.
        """
        if len(meshcodes) != 4:
            raise ValueError(f"expected 4 corner meshcodes, got {len(meshcodes)}")
        get = self._parameters.get
        return get(meshcodes[0]), get(meshcodes[1]), get(meshcodes[2]), get(meshcodes[3])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unit={self._unit!r}, size={len(self)})"
