"""
Common utilities and infrastructure for the gridded datum correction system.

This package provides foundational components used across all modules:
- Numerical constants with provenance
- Unit registry for quantity inputs
- Value types (points, parameters, displacements)
- Error kinds
- Logging infrastructure
"""

from common.constants import GridConstants
from common.errors import (
    GridTransformError,
    OutOfRangeError,
    ParameterNotFoundError,
    NotConvergedError,
    VerificationFailedError,
    ConfigurationError,
    ParseError,
)
from common.units import ureg, Q_
from common.types import (
    Point,
    Correction,
    Parameter,
    Displacement,
)
from common.logging_config import get_logger

__all__ = [
    "GridConstants",
    "GridTransformError",
    "OutOfRangeError",
    "ParameterNotFoundError",
    "NotConvergedError",
    "VerificationFailedError",
    "ConfigurationError",
    "ParseError",
    "ureg",
    "Q_",
    "Point",
    "Correction",
    "Parameter",
    "Displacement",
    "get_logger",
]
