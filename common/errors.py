"""
Error kinds raised by the transformation system.

Runtime conditions (out-of-range input, missing parameters, backward
iteration failures) are distinct from construction-time misconfiguration
and from malformed par files. Each kind also derives from the builtin
exception a caller would expect (ValueError, LookupError, RuntimeError).
"""

from typing import Optional, Any


class GridTransformError(Exception):
    """Base class of every error raised by this package."""


class OutOfRangeError(GridTransformError, ValueError):
    """A coordinate or meshcode lies outside the supported domain."""


class ParameterNotFoundError(GridTransformError, LookupError):
    """A grid corner required by the interpolation has no published parameter.

    Attributes
    ----------
    meshcode : int
        The meshcode with no parameter.
    corner : str, optional
        Which corner of the cell it is ('sw', 'se', 'nw' or 'ne').
    """

    def __init__(self, meshcode: int, corner: Optional[str] = None):
        self.meshcode = meshcode
        self.corner = corner
        where = f" ({corner} corner)" if corner else ""
        super().__init__(f"parameter not found for meshcode {meshcode}{where}")


class NotConvergedError(GridTransformError, RuntimeError):
    """The backward iteration budget ran out before reaching the tolerance.

    Attributes
    ----------
    candidate : Point
        The last (best) iterate; callers may accept it explicitly.
    iterations : int
        Forward evaluations spent.
    residual : float
        Last lat/lon update in degrees.
    """

    def __init__(self, candidate: Any, iterations: int, residual: float):
        self.candidate = candidate
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"backward transformation did not converge in {iterations} iterations "
            f"(residual={residual:.3e} deg)"
        )


class VerificationFailedError(GridTransformError, RuntimeError):
    """The backward result does not round-trip within the precision bound.

    Attributes
    ----------
    result : Point
        The converged, unverified backward result.
    residual : float
        Round-trip residual max(|dlat|, |dlon|) in degrees.
    epsilon : float
        The bound that was exceeded, in degrees.
    residual_m : float
        Geodesic length of the residual in meters.
    """

    def __init__(self, result: Any, residual: float, epsilon: float, residual_m: float):
        self.result = result
        self.residual = residual
        self.epsilon = epsilon
        self.residual_m = residual_m
        super().__init__(
            f"backward result failed verification: residual={residual:.3e} deg "
            f"({residual_m:.3e} m) exceeds {epsilon:.3e} deg"
        )


class ConfigurationError(GridTransformError, ValueError):
    """A transformer was requested from an incomplete or inconsistent setup."""


class ParseError(GridTransformError, ValueError):
    """A par file row could not be read.

    Attributes
    ----------
    lineno : int
        1-based line number in the par text.
    column : str
        Name of the offending column ('meshcode', 'latitude', ...).
    """

    def __init__(self, message: str, lineno: int, column: Optional[str] = None):
        self.lineno = lineno
        self.column = column
        where = f"line {lineno}" + (f", column '{column}'" if column else "")
        super().__init__(f"{where}: {message}")
