"""
Summary Statistics of Parameter Grids.

Per-component descriptive statistics over every published parameter of a
grid, for sanity checks of freshly parsed par files.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from correction_grid.formats import Component, COMPONENT_ORDER
from correction_grid.grid import ParameterGrid


@dataclass
class StatisticalSummary:
    """Statistics of one parameter component.

    Attributes
    ----------
    count : int
        Number of parameters.
    mean : float, optional
        Mean value.
    std : float, optional
        Population standard deviation.
    abs : float, optional
        Mean of absolute values.
    min : float, optional
        Minimum value.
    max : float, optional
        Maximum value.

    Notes
    -----
    Every field but ``count`` is None for an empty grid.
    """
    count: int
    mean: Optional[float] = None
    std: Optional[float] = None
    abs: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass
class GridStatistics:
    """Statistics of a grid, one summary per component.

    Components the par family does not carry are None.
    Latitude and longitude are in arcseconds, altitude in meters.
    """
    latitude: Optional[StatisticalSummary]
    longitude: Optional[StatisticalSummary]
    altitude: Optional[StatisticalSummary]


def summarize(values: NDArray[np.float64]) -> StatisticalSummary:
    """Compute the statistics of a 1-D array of values."""
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return StatisticalSummary(count=0)
    return StatisticalSummary(
        count=int(values.size),
        mean=float(np.mean(values)),
        std=float(np.std(values)),
        abs=float(np.mean(np.abs(values))),
        min=float(np.min(values)),
        max=float(np.max(values))
    )


def grid_statistics(
    grid: ParameterGrid,
    components: Component = Component.ALL
) -> GridStatistics:
    """Statistics of every component of ``grid`` listed in ``components``.

    Parameters
    ----------
    grid : ParameterGrid
        The parameters.
    components : Component
        Components with meaning (typically from the grid's FormatSpec).

    Returns
    -------
    GridStatistics
    """
    table = np.array(
        [parameter.to_tuple() for parameter in grid.values()],
        dtype=np.float64
    ).reshape(-1, 3)

    summaries = {}
    for column, (name, flag) in enumerate(COMPONENT_ORDER):
        summaries[name] = summarize(table[:, column]) if flag in components else None
    return GridStatistics(**summaries)
