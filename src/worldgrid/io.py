from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema

from .grid import WorldGrid


PathLike = Union[str, Path]

_INDEX_LIST = {"type": "array", "items": {"type": "integer", "minimum": 0}}
_VEC3 = {"type": "array", "items": {"type": "number"}, "minItems": 3, "maxItems": 3}
_OPTIONAL_NUMBER = {"type": ["number", "null"]}

GRID_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["version", "level", "cells", "vertices", "edges"],
    "properties": {
        "version": {"type": "string"},
        "level": {"type": "integer", "minimum": 0},
        "radius": _OPTIONAL_NUMBER,
        "has_metrics": {"type": "boolean"},
        "cells": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "position", "neighbors", "vertices", "edges"],
                "properties": {
                    "index": {"type": "integer", "minimum": 0},
                    "position": _VEC3,
                    "neighbors": {**_INDEX_LIST, "minItems": 5, "maxItems": 6},
                    "vertices": {**_INDEX_LIST, "minItems": 5, "maxItems": 6},
                    "edges": {**_INDEX_LIST, "minItems": 5, "maxItems": 6},
                    "latitude": _OPTIONAL_NUMBER,
                    "longitude": _OPTIONAL_NUMBER,
                    "elevation": _OPTIONAL_NUMBER,
                    "area": _OPTIONAL_NUMBER,
                },
            },
        },
        "vertices": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "position", "cells", "vertices", "edges"],
                "properties": {
                    "index": {"type": "integer", "minimum": 0},
                    "position": _VEC3,
                    "cells": {**_INDEX_LIST, "minItems": 3, "maxItems": 3},
                    "vertices": {**_INDEX_LIST, "minItems": 3, "maxItems": 3},
                    "edges": {**_INDEX_LIST, "minItems": 3, "maxItems": 3},
                    "latitude": _OPTIONAL_NUMBER,
                    "longitude": _OPTIONAL_NUMBER,
                    "elevation": _OPTIONAL_NUMBER,
                },
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "cells", "vertices"],
                "properties": {
                    "index": {"type": "integer", "minimum": 0},
                    "cells": {**_INDEX_LIST, "minItems": 2, "maxItems": 2},
                    "vertices": {**_INDEX_LIST, "minItems": 2, "maxItems": 2},
                },
            },
        },
    },
}


def validate_payload(payload: Dict[str, Any]) -> None:
    """Raise ``jsonschema.ValidationError`` if *payload* is not a grid document."""
    jsonschema.validate(instance=payload, schema=GRID_SCHEMA)


def load_json(path: PathLike) -> WorldGrid:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    validate_payload(data)
    return WorldGrid.from_dict(data)


def save_json(grid: WorldGrid, path: PathLike, indent: int | None = None) -> None:
    Path(path).write_text(grid.to_json(indent=indent), encoding="utf-8")
