"""
Correction Grid Module.

Parameter file families, the read-only parameter grid and its statistics.

The par parser (`correction_grid.parser`), the builder
(`correction_grid.builder`) and JSON serialization
(`correction_grid.serialization`) produce Transformers and are imported
from their modules directly.
"""

from correction_grid.formats import (
    Component,
    Format,
    FormatSpec,
)

from correction_grid.grid import ParameterGrid

from correction_grid.statistics import (
    StatisticalSummary,
    GridStatistics,
    grid_statistics,
)

__all__ = [
    "Component",
    "Format",
    "FormatSpec",
    "ParameterGrid",
    "StatisticalSummary",
    "GridStatistics",
    "grid_statistics",
]
