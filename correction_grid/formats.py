"""
Parameter File Families.

GIAJ distributes one par file per transformation family. The family fixes
the grid resolution, which of the three parameter components carry
meaning, and the length of the text header. This is resolved once per
Format into a FormatSpec.
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Dict, Tuple, Union

from common.errors import ConfigurationError
from meshcode.mesh import MeshUnit


class Component(Flag):
    """Parameter components carried by a par file."""
    LATITUDE = auto()
    LONGITUDE = auto()
    ALTITUDE = auto()
    HORIZONTAL = LATITUDE | LONGITUDE
    ALL = LATITUDE | LONGITUDE | ALTITUDE


# Column order in every par file
COMPONENT_ORDER: Tuple[Tuple[str, Component], ...] = (
    ("latitude", Component.LATITUDE),
    ("longitude", Component.LONGITUDE),
    ("altitude", Component.ALTITUDE),
)


@dataclass(frozen=True)
class FormatSpec:
    """What a parameter family implies.

    Attributes
    ----------
    mesh_unit : MeshUnit
        Grid resolution of the family.
    components : Component
        Components with meaning; the others are zero.
    header_lines : int
        Text lines preceding the parameter rows in a par file.
    description : str
        Datums the family converts between.
    """
    mesh_unit: MeshUnit
    components: Component
    header_lines: int
    description: str

    @property
    def columns(self) -> Tuple[str, ...]:
        """Names of the value columns following the meshcode, in file order."""
        return tuple(name for name, flag in COMPONENT_ORDER if flag in self.components)

    def carries(self, component: Component) -> bool:
        return component in self.components


class Format(Enum):
    """Par file families."""
    TKY2JGD = "TKY2JGD"
    PATCH_JGD = "PatchJGD"
    PATCH_JGD_H = "PatchJGD_H"
    PATCH_JGD_HV = "PatchJGD_HV"
    HYOKO_REV = "HyokoRev"
    SEMI_DYNA_EXE = "SemiDynaEXE"
    GEONET_F3 = "geonetF3"
    ITRF2014 = "ITRF2014"

    @property
    def spec(self) -> FormatSpec:
        return _FORMAT_SPECS[self]

    @property
    def mesh_unit(self) -> MeshUnit:
        return _FORMAT_SPECS[self].mesh_unit

    @classmethod
    def coerce(cls, value: Union['Format', str]) -> 'Format':
        """Resolve a Format from itself, its file-family name or its member name.

        Raises
        ------
        ConfigurationError
            For an unknown name.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value or value == member.name:
                return member
        raise ConfigurationError(
            f"unknown format {value!r}; expected one of "
            f"{', '.join(m.value for m in cls)}"
        )


_FORMAT_SPECS: Dict[Format, FormatSpec] = {
    Format.TKY2JGD: FormatSpec(
        mesh_unit=MeshUnit.ONE,
        components=Component.HORIZONTAL,
        header_lines=2,
        description="Tokyo Datum to JGD2000",
    ),
    Format.PATCH_JGD: FormatSpec(
        mesh_unit=MeshUnit.ONE,
        components=Component.HORIZONTAL,
        header_lines=16,
        description="JGD2000 to JGD2011 (horizontal)",
    ),
    Format.PATCH_JGD_H: FormatSpec(
        mesh_unit=MeshUnit.ONE,
        components=Component.ALTITUDE,
        header_lines=16,
        description="JGD2000 to JGD2011 (vertical)",
    ),
    Format.PATCH_JGD_HV: FormatSpec(
        mesh_unit=MeshUnit.ONE,
        components=Component.ALL,
        header_lines=16,
        description="JGD2000 to JGD2011 (horizontal and vertical)",
    ),
    Format.HYOKO_REV: FormatSpec(
        mesh_unit=MeshUnit.ONE,
        components=Component.ALTITUDE,
        header_lines=16,
        description="Height revision of benchmarks",
    ),
    Format.SEMI_DYNA_EXE: FormatSpec(
        mesh_unit=MeshUnit.FIVE,
        components=Component.ALL,
        header_lines=16,
        description="Semi-dynamic correction (JGD2011 epoch to survey epoch)",
    ),
    Format.GEONET_F3: FormatSpec(
        mesh_unit=MeshUnit.FIVE,
        components=Component.ALL,
        header_lines=18,
        description="GEONET F3 solution (POS2JGD)",
    ),
    Format.ITRF2014: FormatSpec(
        mesh_unit=MeshUnit.FIVE,
        components=Component.ALL,
        header_lines=18,
        description="ITRF2014 solution (POS2JGD)",
    ),
}
