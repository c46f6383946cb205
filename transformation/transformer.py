"""
Coordinate Transformer by Gridded Correction Parameters.

This module applies a GIAJ parameter grid to points. The forward
transformation is closed-form: the parameters of the cell holding the
source point are bilinearly interpolated and added. The correction field is
evaluated at the *source* coordinate, so the backward transformation has no
closed form and is solved by fixed-point iteration.

Algorithm
---------
Backward, for a target point p:

    x_0 = p
    x_{n+1} = p - corr(x_n)        (= x_n + (p - forward(x_n)))

stopping once the update is below the tolerance. The map is a strong
contraction because the parameters change by at most a few hundredths of
an arcsecond across a cell, so convergence takes two or three forward
evaluations in practice.

The verified backward transformation re-applies forward to the result and
accepts it only when it lands within the published parameter resolution
of p.

References
----------
- TKY2JGD for Windows Ver.1.3.79 (reference implementation)
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

import numpy as np
from numpy.typing import NDArray

from common.constants import GridConstants
from common.errors import (
    ConfigurationError,
    NotConvergedError,
    ParameterNotFoundError,
    VerificationFailedError,
)
from common.logging_config import get_logger, log_residual_check
from common.types import Correction, Displacement, Point
from correction_grid.formats import Format, FormatSpec
from correction_grid.grid import ParameterGrid
from correction_grid.statistics import GridStatistics, grid_statistics
from geospatial.distance_calculations import point_distance
from meshcode.cell import CORNER_NAMES, MeshCell
from meshcode.mesh import MeshUnit
from transformation.interpolation import interpolate, to_displacement

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransformerConfig:
    """Numerical settings of the backward transformation.

    Attributes
    ----------
    max_iterations : int
        Forward evaluations allowed in one backward transformation.
    tolerance : float
        Convergence threshold on the lat/lon update, in degrees.
    verification_epsilon : float
        Largest accepted round-trip residual of ``backward_safe``, in degrees.
    """
    max_iterations: int = int(GridConstants.BACKWARD_MAX_ITERATIONS.value)
    tolerance: float = GridConstants.BACKWARD_TOLERANCE.value
    verification_epsilon: float = GridConstants.VERIFICATION_EPSILON.value

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ConfigurationError("max_iterations must be at least 1")
        if not self.tolerance > 0.0:
            raise ConfigurationError("tolerance must be positive")
        if not self.verification_epsilon > 0.0:
            raise ConfigurationError("verification_epsilon must be positive")


class Transformer:
    """Forward and backward transformation by one parameter grid.

    The grid is never modified, and no call keeps state between calls, so
    one transformer can serve any number of threads.

    Parameters
    ----------
    grid : ParameterGrid
        Published parameters; its unit must match the format's.
    format : Format or str
        Par file family the parameters come from.
    description : str, optional
        Free text, usually the par file header.
    config : TransformerConfig, optional
        Iteration settings; defaults follow the reference implementation.

    Raises
    ------
    ConfigurationError
        If the grid resolution differs from the format's.

    Examples
    --------
    >>> tf = Transformer(
    ...     ParameterGrid(MeshUnit.FIVE, {
    ...         54401005: Correction(-0.00622, 0.01516, 0.0946),
    ...         54401055: Correction(-0.0062, 0.01529, 0.08972),
    ...         54401100: Correction(-0.00663, 0.01492, 0.10374),
    ...         54401150: Correction(-0.00664, 0.01506, 0.10087),
    ...     }),
    ...     Format.SEMI_DYNA_EXE,
    ... )
    >>> result = tf.forward(Point(36.10377479, 140.087855041, 2.34))
    """

    def __init__(
        self,
        grid: ParameterGrid,
        format: Union[Format, str],
        description: Optional[str] = None,
        config: Optional[TransformerConfig] = None
    ):
        self._format = Format.coerce(format)
        self._format_spec = self._format.spec
        if grid.unit != self._format_spec.mesh_unit:
            raise ConfigurationError(
                f"{self._format.value} parameters use {self._format_spec.mesh_unit!r}, "
                f"grid is {grid.unit!r}"
            )
        self._grid = grid
        self._description = description
        self._config = config or TransformerConfig()

    @property
    def grid(self) -> ParameterGrid:
        return self._grid

    @property
    def format(self) -> Format:
        return self._format

    @property
    def format_spec(self) -> FormatSpec:
        """Resolution, meaningful components and header length of the format."""
        return self._format_spec

    @property
    def mesh_unit(self) -> MeshUnit:
        return self._format_spec.mesh_unit

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def config(self) -> TransformerConfig:
        return self._config

    def get(self, meshcode: int) -> Optional[Correction]:
        """Published parameter of ``meshcode``, or None."""
        return self._grid.get(meshcode)

    def statistics(self) -> GridStatistics:
        """Statistics of the components the format carries."""
        return grid_statistics(self._grid, self._format_spec.components)

    # =========================================================================
    # Forward
    # =========================================================================

    def forward_corr(self, point: Point) -> Displacement:
        """Interpolated correction at ``point``, in degrees and meters.

        Raises
        ------
        OutOfRangeError
            If the point's cell lies outside the meshcode domain.
        ParameterNotFoundError
            If any corner of the cell has no parameter.
        """
        cell = MeshCell.from_point(point, self.mesh_unit)
        meshcodes = cell.meshcodes
        corners = self._grid.corners(meshcodes)
        for name, meshcode, parameter in zip(CORNER_NAMES, meshcodes, corners):
            if parameter is None:
                raise ParameterNotFoundError(meshcode, name)

        y, x = cell.position(point)
        return to_displacement(interpolate(corners, x, y))

    def forward(self, point: Point) -> Point:
        """Transform ``point`` from the source to the target datum."""
        return point + self.forward_corr(point)

    # =========================================================================
    # Backward
    # =========================================================================

    def backward_corr(self, point: Point, max_iterations: Optional[int] = None) -> Displacement:
        """Correction taking ``point`` back to the source datum.

        Parameters
        ----------
        point : Point
            Point in the target datum.
        max_iterations : int, optional
            Overrides the configured iteration budget.

        Returns
        -------
        Displacement
            Add to ``point`` to get the source position.

        Raises
        ------
        NotConvergedError
            If the update is still above tolerance after the budget.
        OutOfRangeError, ParameterNotFoundError
            From the forward evaluations.
        """
        budget = self._config.max_iterations if max_iterations is None else max_iterations
        if budget < 1:
            raise ValueError("max_iterations must be at least 1")
        tolerance = self._config.tolerance

        latitude, longitude = point.latitude, point.longitude
        residual = float("inf")
        for iteration in range(1, budget + 1):
            corr = self.forward_corr(Point(latitude, longitude))

            delta_latitude = point.latitude - (latitude + corr.latitude)
            delta_longitude = point.longitude - (longitude + corr.longitude)
            residual = max(abs(delta_latitude), abs(delta_longitude))

            latitude = point.latitude - corr.latitude
            longitude = point.longitude - corr.longitude

            if residual < tolerance:
                logger.debug(
                    f"Backward converged after {iteration} iterations "
                    f"(residual={residual:.3e} deg)"
                )
                return -corr

        candidate = Point(latitude, longitude, point.altitude - corr.altitude)
        logger.warning(
            f"Backward did not converge in {budget} iterations at "
            f"({point.latitude}, {point.longitude}); residual={residual:.3e} deg"
        )
        raise NotConvergedError(candidate=candidate, iterations=budget, residual=residual)

    def backward(self, point: Point, max_iterations: Optional[int] = None) -> Point:
        """Transform ``point`` from the target back to the source datum.

        Altitude is corrected with the parameter at the converged position;
        it does not take part in the iteration.

        Raises
        ------
        NotConvergedError
            Carries the best candidate, which a caller may accept explicitly.
        """
        return point + self.backward_corr(point, max_iterations=max_iterations)

    def backward_safe(self, point: Point) -> Point:
        """Backward transformation checked by a forward round trip.

        Returns
        -------
        Point
            A source point whose forward image is within
            ``config.verification_epsilon`` of ``point`` in latitude and
            longitude.

        Raises
        ------
        NotConvergedError
            If the iteration did not converge; verification is not attempted.
        VerificationFailedError
            If it converged but the round trip misses ``point`` by more than
            the bound.
        """
        result = self.backward(point)
        check = self.forward(result)

        residual = max(
            abs(check.latitude - point.latitude),
            abs(check.longitude - point.longitude)
        )
        epsilon = self._config.verification_epsilon
        passed = log_residual_check(
            logger,
            "backward_safe",
            residual,
            epsilon,
            context={"latitude": point.latitude, "longitude": point.longitude}
        )
        if not passed:
            raise VerificationFailedError(
                result=result,
                residual=residual,
                epsilon=epsilon,
                residual_m=point_distance(check, point)
            )
        return result

    # =========================================================================
    # Convenience
    # =========================================================================

    def transform(self, point: Point, backward: bool = False) -> Point:
        """Forward, or verified backward when ``backward`` is set."""
        if backward:
            return self.backward_safe(point)
        return self.forward(point)

    def transform_many(
        self,
        points: Union[NDArray[np.float64], Iterable[Iterable[float]]],
        backward: bool = False
    ) -> NDArray[np.float64]:
        """Transform rows of (latitude, longitude, altitude).

        Parameters
        ----------
        points : array-like
            Shape (N, 3), or (N, 2) with altitude taken as 0.
        backward : bool
            Use the verified backward transformation.

        Returns
        -------
        ndarray
            Shape (N, 3) transformed coordinates. The first failing row
            raises its error.
        """
        array = np.asarray(points, dtype=np.float64)
        if array.ndim != 2 or array.shape[1] not in (2, 3):
            raise ValueError(f"points must have shape (N, 2) or (N, 3), got {array.shape}")
        if array.shape[1] == 2:
            array = np.column_stack([array, np.zeros(len(array))])

        out = np.empty_like(array)
        for i, (lat, lon, alt) in enumerate(array):
            out[i] = self.transform(Point(float(lat), float(lon), float(alt)), backward=backward).to_tuple()
        return out

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(format={self._format.value}, "
            f"unit={self.mesh_unit!r}, parameters={len(self._grid)})"
        )
