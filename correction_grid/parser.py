"""
Par File Parser.

Reads the text parameter files distributed by GIAJ into a Transformer.

File Layout
-----------
A par file is a fixed number of header lines (see FormatSpec.header_lines)
followed by one row per node::

    MeshCode   dB(sec)   dL(sec)   dH(m)
    54401005  -0.00622   0.01516   0.0946

The first column is the meshcode; the value columns are the components the
family carries, in latitude, longitude, altitude order. Components a family
does not carry are stored as 0.0.
"""

from pathlib import Path
from typing import Dict, Optional, Union
import math

from common.errors import OutOfRangeError, ParseError
from common.logging_config import get_logger
from common.types import Correction
from correction_grid.formats import Format
from correction_grid.grid import ParameterGrid
from meshcode.mesh import MeshNode, MeshUnit
from transformation.transformer import Transformer, TransformerConfig

logger = get_logger(__name__)

# Encodings seen in distributed par files
_ENCODINGS = ("utf-8", "cp932")


def _parse_meshcode(token: str, lineno: int, unit: MeshUnit) -> int:
    if not token.isdigit():
        raise ParseError(f"meshcode {token!r} is not an integer", lineno, "meshcode")
    try:
        node = MeshNode.from_meshcode(int(token))
    except OutOfRangeError as e:
        raise ParseError(str(e), lineno, "meshcode") from e
    if not node.is_aligned(unit):
        raise ParseError(
            f"meshcode {token} is not aligned to {unit!r}", lineno, "meshcode"
        )
    return node.meshcode


def _parse_value(token: str, lineno: int, column: str) -> float:
    try:
        value = float(token)
    except ValueError as e:
        raise ParseError(f"{token!r} is not a number", lineno, column) from e
    if not math.isfinite(value):
        raise ParseError(f"{token!r} is not finite", lineno, column)
    return value


def parse(
    text: str,
    format: Union[Format, str],
    description: Optional[str] = None,
    config: Optional[TransformerConfig] = None
) -> Transformer:
    """Parse par-formatted text.

    Parameters
    ----------
    text : str
        Whole par file contents.
    format : Format or str
        Family of the file.
    description : str, optional
        Description of the transformer; the header text when omitted.
    config : TransformerConfig, optional
        Passed to the Transformer.

    Returns
    -------
    Transformer

    Raises
    ------
    ParseError
        On the first malformed row.
    """
    fmt = Format.coerce(format)
    spec = fmt.spec
    columns = spec.columns

    lines = text.splitlines()
    if len(lines) < spec.header_lines:
        raise ParseError(
            f"{fmt.value} needs {spec.header_lines} header lines, file has {len(lines)}",
            len(lines)
        )

    parameters: Dict[int, Correction] = {}
    first_row = spec.header_lines + 1
    for lineno, line in enumerate(lines[spec.header_lines:], start=first_row):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 1 + len(columns):
            raise ParseError(
                f"expected {1 + len(columns)} columns, got {len(tokens)}", lineno
            )

        meshcode = _parse_meshcode(tokens[0], lineno, spec.mesh_unit)
        if meshcode in parameters:
            raise ParseError(f"duplicate meshcode {meshcode}", lineno, "meshcode")

        values = {"latitude": 0.0, "longitude": 0.0, "altitude": 0.0}
        for column, token in zip(columns, tokens[1:]):
            values[column] = _parse_value(token, lineno, column)
        parameters[meshcode] = Correction(**values)

    if description is None:
        description = "\n".join(lines[:spec.header_lines])

    logger.info(f"Parsed {len(parameters)} {fmt.value} parameters")
    grid = ParameterGrid(spec.mesh_unit, parameters)
    return Transformer(grid, fmt, description=description, config=config)


def load(
    path: Union[str, Path],
    format: Union[Format, str],
    description: Optional[str] = None,
    config: Optional[TransformerConfig] = None
) -> Transformer:
    """Read and parse a par file.

    The file is decoded as UTF-8, falling back to cp932 (Shift_JIS), which
    older GIAJ distributions use for their Japanese header text.
    """
    path = Path(path)
    raw = path.read_bytes()
    for encoding in _ENCODINGS:
        try:
            text = raw.decode(encoding)
            break
        except UnicodeDecodeError:
            logger.debug(f"{path} is not {encoding}")
    else:
        raise ParseError(f"{path} is neither {' nor '.join(_ENCODINGS)} text", 0)

    logger.info(f"Loading {Format.coerce(format).value} parameters from {path}")
    return parse(text, format, description=description, config=config)
