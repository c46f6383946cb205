import json

import pytest

from common.errors import ConfigurationError
from common.types import Point
from correction_grid import serialization
from correction_grid.formats import Format


def test_to_dict_layout(sample_transformer):
    obj = serialization.to_dict(sample_transformer)
    assert obj["format"] == "SemiDynaEXE"
    assert obj["description"] is None
    assert list(obj["parameter"]) == ["54401005", "54401055", "54401100", "54401150"]
    assert obj["parameter"]["54401005"] == {
        "latitude": -0.00622, "longitude": 0.01516, "altitude": 0.0946
    }


def test_json_round_trip(sample_transformer):
    restored = serialization.loads(serialization.dumps(sample_transformer, indent=2))
    assert restored.format is Format.SEMI_DYNA_EXE
    assert dict(restored.grid) == dict(sample_transformer.grid)

    p = Point(36.10377479, 140.087855041, 2.34)
    assert restored.forward(p) == sample_transformer.forward(p)


def test_file_round_trip(sample_transformer, tmp_path):
    path = tmp_path / "semidyna.json"
    serialization.dump(sample_transformer, path)
    assert json.loads(path.read_text(encoding="utf-8"))["format"] == "SemiDynaEXE"

    restored = serialization.load(path)
    assert len(restored.grid) == 4


def test_from_dict_requires_format():
    with pytest.raises(ConfigurationError):
        serialization.from_dict({"parameter": {}})


def test_from_dict_rejects_unknown_format():
    with pytest.raises(ConfigurationError):
        serialization.from_dict({"format": "PatchJGD_X", "parameter": {}})


def test_from_dict_rejects_bad_key():
    obj = {
        "format": "SemiDynaEXE",
        "parameter": {"north": {"latitude": 0.0, "longitude": 0.0, "altitude": 0.0}},
    }
    with pytest.raises(ConfigurationError):
        serialization.from_dict(obj)


def test_from_dict_accepts_member_name():
    tf = serialization.from_dict({"format": "PATCH_JGD_HV", "description": "hv"})
    assert tf.format is Format.PATCH_JGD_HV
    assert tf.description == "hv"
    assert len(tf.grid) == 0
