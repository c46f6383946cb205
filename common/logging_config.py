"""
Logging Configuration.

This module provides the package loggers. Transformations themselves are
silent at INFO level; parsing, building and failed backward checks are
reported so that a batch run can be traced afterwards.
"""

import logging
import sys
from typing import Any, Dict, Optional


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the transformation system.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def log_residual_check(
    logger: logging.Logger,
    check_name: str,
    residual_value: float,
    tolerance: float,
    context: Optional[Dict[str, Any]] = None
) -> bool:
    """Log a residual against its tolerance.

    Parameters
    ----------
    logger : logging.Logger
        Where to write the record.
    check_name : str
        Which check was run (e.g. 'backward_safe').
    residual_value : float
        The computed residual.
    tolerance : float
        The acceptable tolerance.
    context : dict, optional
        Additional context appended to the record.

    Returns
    -------
    bool
        Whether the residual is within tolerance.
    """
    passed = abs(residual_value) <= tolerance

    status = "PASS" if passed else "FAIL"
    log_msg = (
        f"RESIDUAL CHECK | {check_name} | {status} | "
        f"residual={residual_value:.6e} (tolerance={tolerance:.6e})"
    )
    if context:
        log_msg += " | " + ", ".join(f"{k}={v}" for k, v in context.items())

    if passed:
        logger.debug(log_msg)
    else:
        logger.warning(log_msg)
    return passed
