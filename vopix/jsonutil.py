"""Helpers for reading and writing engine JSON documents."""

from __future__ import annotations

import json
from numbers import Real
from typing import Any, Mapping

from vopix.vector import Vector3


def open_json(path: str, name: str) -> Any:
    """Load the JSON file ``name`` from directory ``path``.

    Raises ``OSError`` if the file cannot be read and
    ``json.JSONDecodeError`` if it is not valid JSON.
    """
    full_path = path if path.endswith("/") else path + "/"
    full_path += name
    with open(full_path, "rb") as handle:
        return json.loads(handle.read())


def _as_number(value: Any) -> float:
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    return 0.0


def get_number(obj: Mapping[str, Any], key: str, default: float) -> float:
    """Number under ``key``; ``default`` if absent, 0 if not a number."""
    if key not in obj:
        return default
    return _as_number(obj[key])


def get_vector3(obj: Mapping[str, Any], key: str, default: Vector3) -> Vector3:
    """Vector from a ``[x, y, z]`` array; missing components are 0."""
    if key not in obj:
        return default
    array = obj[key]
    if not isinstance(array, (list, tuple)):
        return Vector3()
    components = [_as_number(value) for value in array[:3]]
    components += [0.0] * (3 - len(components))
    return Vector3(*components)


def vector3_to_json(vector: Vector3) -> list:
    """``[x, y, z]`` list for serialisation."""
    return [vector.x, vector.y, vector.z]