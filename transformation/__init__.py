"""
Transformation Module.

Bilinear interpolation of grid parameters and the point-level forward,
backward and verified backward transformations.
"""

from transformation.interpolation import (
    bilinear_weights,
    interpolate,
    to_displacement,
)

from transformation.transformer import (
    Transformer,
    TransformerConfig,
)

__all__ = [
    "bilinear_weights",
    "interpolate",
    "to_displacement",
    "Transformer",
    "TransformerConfig",
]
