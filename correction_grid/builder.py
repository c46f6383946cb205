"""
Transformer Builder.

A plain accumulator of (meshcode, parameter) pairs and a Format, finalized
into an immutable Transformer. Finalizing without a format raises
ConfigurationError instead of aborting.

Examples
--------
>>> builder = TransformerBuilder(Format.SEMI_DYNA_EXE)
>>> builder.add(54401005, (-0.00622, 0.01516, 0.0946))
>>> builder.add(54401055, (-0.0062, 0.01529, 0.08972))
>>> tf = builder.build()
>>> tf.mesh_unit
<MeshUnit.FIVE: 5>
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
import operator

from common.errors import ConfigurationError
from common.logging_config import get_logger
from common.types import Correction
from correction_grid.formats import Format
from correction_grid.grid import ParameterGrid
from meshcode.mesh import MeshNode
from transformation.transformer import Transformer, TransformerConfig

logger = get_logger(__name__)

ParameterLike = Union[Correction, Tuple[float, float, float], Mapping[str, Any]]


class TransformerBuilder:
    """Mutable accumulator for a Transformer.

    Parameters
    ----------
    format : Format or str, optional
        Par family; may also be assigned later through ``format``.
    description : str, optional
        Description handed to the Transformer.

    Attributes
    ----------
    format : Format or None
        Selected family; ``build`` fails while this is None.
    description : str or None
        Free text description.
    """

    def __init__(
        self,
        format: Optional[Union[Format, str]] = None,
        description: Optional[str] = None
    ):
        self.format = None if format is None else Format.coerce(format)
        self.description = description
        self._parameters: Dict[int, Correction] = {}

    def __len__(self) -> int:
        return len(self._parameters)

    def add(self, meshcode: int, parameter: ParameterLike) -> None:
        """Add or replace the parameter of one node.

        Raises
        ------
        OutOfRangeError
            If ``meshcode`` is not a valid meshcode.
        ValueError
            If ``parameter`` does not hold three components.
        """
        node = MeshNode.from_meshcode(operator.index(meshcode))
        self._parameters[node.meshcode] = Correction.coerce(parameter)

    def extend(
        self,
        parameters: Union[Mapping[int, ParameterLike], Iterable[Tuple[int, ParameterLike]]]
    ) -> None:
        """Add many (meshcode, parameter) pairs."""
        items = parameters.items() if isinstance(parameters, Mapping) else parameters
        for meshcode, parameter in items:
            self.add(meshcode, parameter)

    def build(self, config: Optional[TransformerConfig] = None) -> Transformer:
        """Finalize into an immutable Transformer.

        Raises
        ------
        ConfigurationError
            If no format has been selected, or the format is unknown.
        """
        if self.format is None:
            raise ConfigurationError("format is not assigned")
        fmt = Format.coerce(self.format)

        grid = ParameterGrid(fmt.mesh_unit, self._parameters)
        logger.info(f"Built {fmt.value} transformer with {len(grid)} parameters")
        return Transformer(grid, fmt, description=self.description, config=config)
