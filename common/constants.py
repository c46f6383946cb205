"""
Numerical Constants for Gridded Datum Correction.

This module provides the constants of the GIAJ mesh standard and the
numerical bounds of the transformation engine. Every constant carries its
unit and the source it is traceable to.

References
----------
- JIS X 0410: Standard grid square (mesh) codes
- GIAJ par file documentation (TKY2JGD, PatchJGD, SemiDynaEXE, POS2JGD)
- TKY2JGD for Windows Ver.1.3.79 (reference transformation outputs)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A numerical constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GridConstants:
    """Registry of constants used throughout the system.

    Mesh Geometry
    -------------
    A first-level cell spans 40 arcmin of latitude and 1 degree of
    longitude. It is divided 8 times (second level) and then 10 times
    (third level). Latitudes are scaled by 1.5 so that both axes share
    the same digit arithmetic.

    Transformation Bounds
    ---------------------
    Iteration budget and tolerances of the backward transformation. They
    are matched to the published outputs of the reference implementation.
    """

    # =========================================================================
    # Unit conversion
    # =========================================================================

    ARCSEC_PER_DEGREE: Final[Constant] = Constant(
        value=3600.0,
        unit="arcsec/degree",
        source="Definition",
        description="Arcseconds in one degree; par files store lat/lon shifts in arcsec"
    )

    # =========================================================================
    # Mesh geometry (JIS X 0410)
    # =========================================================================

    LATITUDE_SCALE: Final[Constant] = Constant(
        value=1.5,
        unit="dimensionless",
        source="JIS X 0410",
        description="First-level latitude index is floor(1.5 * latitude)"
    )

    MESH_LATITUDE_MIN: Final[Constant] = Constant(
        value=0.0,
        unit="degree",
        source="JIS X 0410",
        description="Lowest latitude addressable by a meshcode (inclusive)"
    )

    MESH_LATITUDE_MAX: Final[Constant] = Constant(
        value=200.0 / 3.0,
        unit="degree",
        source="JIS X 0410",
        description="Upper latitude bound of a meshcode (exclusive), 1.5 * lat < 100"
    )

    MESH_LONGITUDE_MIN: Final[Constant] = Constant(
        value=100.0,
        unit="degree",
        source="JIS X 0410",
        description="Lowest longitude addressable by a meshcode (inclusive)"
    )

    MESH_LONGITUDE_MAX: Final[Constant] = Constant(
        value=180.0,
        unit="degree",
        source="JIS X 0410",
        description="Upper longitude bound of a meshcode (exclusive)"
    )

    THIRD_LEVEL_DIVISIONS: Final[Constant] = Constant(
        value=80.0,
        unit="cells/first-level cell",
        source="JIS X 0410",
        description="Third-level cells along one axis of a first-level cell (8 * 10)"
    )

    MESH_SNAP_TOLERANCE: Final[Constant] = Constant(
        value=1e-9,
        unit="third-level cell",
        source="Floating point round-off of 2/3 latitude scaling",
        description="Distance to a grid line under which a point is taken to lie on it"
    )

    # =========================================================================
    # Backward transformation
    # =========================================================================

    PARAMETER_RESOLUTION: Final[Constant] = Constant(
        value=1e-5,
        unit="arcsec",
        source="GIAJ par files (5 decimal places)",
        description="Resolution of published latitude/longitude parameters"
    )

    BACKWARD_MAX_ITERATIONS: Final[Constant] = Constant(
        value=10,
        unit="iterations",
        source="TKY2JGD for Windows Ver.1.3.79 (matched outputs)",
        description="Forward evaluations allowed in one backward transformation"
    )

    BACKWARD_TOLERANCE: Final[Constant] = Constant(
        value=2.5e-9,
        unit="degree",
        source="TKY2JGD for Windows Ver.1.3.79 (matched outputs)",
        description="Largest lat/lon update accepted as converged (~0.3 mm)"
    )

    VERIFICATION_EPSILON: Final[Constant] = Constant(
        value=PARAMETER_RESOLUTION.value / ARCSEC_PER_DEGREE.value,
        unit="degree",
        source="GIAJ par files (5 decimal places)",
        description="Largest round-trip residual of a verified backward transformation"
    )
