import pytest

from common.types import Correction
from correction_grid.builder import TransformerBuilder
from correction_grid.formats import Format


# from SemiDyna2023.par
SEMIDYNA_SAMPLE = {
    54401005: (-0.00622, 0.01516, 0.0946),
    54401055: (-0.0062, 0.01529, 0.08972),
    54401100: (-0.00663, 0.01492, 0.10374),
    54401150: (-0.00664, 0.01506, 0.10087),
}

# 5-unit nodes around (35.0, 135.0), incl. the row to the south and the column to the west
ORIGIN_NODES = (
    52343755, 52353050, 52353055,
    52344705, 52354000, 52354005,
    52344755, 52354050, 52354055,
)
ORIGIN_PARAMETER = (-0.00608, 0.02238, -0.00892)


@pytest.fixture
def sample_transformer():
    builder = TransformerBuilder(Format.SEMI_DYNA_EXE)
    builder.extend(SEMIDYNA_SAMPLE)
    return builder.build()


@pytest.fixture
def origin_transformer():
    builder = TransformerBuilder(Format.SEMI_DYNA_EXE)
    for meshcode in ORIGIN_NODES:
        builder.add(meshcode, ORIGIN_PARAMETER)
    return builder.build()


@pytest.fixture
def zero_transformer():
    builder = TransformerBuilder(Format.SEMI_DYNA_EXE)
    for meshcode in SEMIDYNA_SAMPLE:
        builder.add(meshcode, Correction(0.0, 0.0, 0.0))
    return builder.build()


@pytest.fixture
def steep_parameters():
    # 36 arcsec of longitude shift across one 5-unit cell
    return {
        54401005: (0.0, 0.0, 0.0),
        54401100: (0.0, 36.0, 0.0),
        54401055: (0.0, 0.0, 0.0),
        54401150: (0.0, 36.0, 0.0),
    }
