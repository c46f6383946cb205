"""
JSON Serialization of Transformers.

Layout::

    {
      "format": "SemiDynaEXE",
      "description": "...",
      "parameter": {
        "54401005": {"latitude": -0.00622, "longitude": 0.01516, "altitude": 0.0946}
      }
    }

Meshcodes become string keys because JSON objects only have string keys.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from common.errors import ConfigurationError
from correction_grid.builder import TransformerBuilder
from transformation.transformer import Transformer, TransformerConfig


def to_dict(transformer: Transformer) -> Dict[str, Any]:
    """Plain-data representation of ``transformer``."""
    return {
        "format": transformer.format.value,
        "description": transformer.description,
        "parameter": {
            str(meshcode): {
                "latitude": parameter.latitude,
                "longitude": parameter.longitude,
                "altitude": parameter.altitude,
            }
            for meshcode, parameter in sorted(transformer.grid.items())
        },
    }


def from_dict(obj: Mapping[str, Any], config: Optional[TransformerConfig] = None) -> Transformer:
    """Rebuild a Transformer from ``to_dict`` output.

    Raises
    ------
    ConfigurationError
        If the format is missing or unknown, or a key is not a meshcode.
    """
    if "format" not in obj:
        raise ConfigurationError("serialized transformer has no 'format'")

    builder = TransformerBuilder(obj["format"], description=obj.get("description"))
    for key, parameter in obj.get("parameter", {}).items():
        try:
            meshcode = int(key)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"parameter key {key!r} is not a meshcode") from e
        builder.add(meshcode, parameter)
    return builder.build(config=config)


def dumps(transformer: Transformer, **kwargs: Any) -> str:
    """Serialize to a JSON string; ``kwargs`` go to ``json.dumps``."""
    return json.dumps(to_dict(transformer), **kwargs)


def loads(text: str, config: Optional[TransformerConfig] = None) -> Transformer:
    return from_dict(json.loads(text), config=config)


def dump(transformer: Transformer, path: Union[str, Path], **kwargs: Any) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(to_dict(transformer), f, **kwargs)


def load(path: Union[str, Path], config: Optional[TransformerConfig] = None) -> Transformer:
    with open(path, 'r', encoding='utf-8') as f:
        return from_dict(json.load(f), config=config)
