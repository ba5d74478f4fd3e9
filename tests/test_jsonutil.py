import json

import pytest

from vopix.jsonutil import get_number, get_vector3, open_json, vector3_to_json
from vopix.vector import Vector3


def test_open_json_joins_path(tmp_path):
    (tmp_path / "scene.json").write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert open_json(str(tmp_path), "scene.json") == {"a": 1}
    assert open_json(str(tmp_path) + "/", "scene.json") == {"a": 1}


def test_open_json_missing_file(tmp_path):
    with pytest.raises(OSError):
        open_json(str(tmp_path), "nope.json")


def test_open_json_invalid(tmp_path):
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        open_json(str(tmp_path), "bad.json")


def test_get_number():
    obj = {"mass": 2.5, "count": 4, "flag": True, "name": "x"}
    assert get_number(obj, "mass", 1.0) == 2.5
    assert get_number(obj, "count", 1.0) == 4.0
    assert get_number(obj, "missing", 7.0) == 7.0
    assert get_number(obj, "name", 7.0) == 0.0
    assert get_number(obj, "flag", 7.0) == 0.0


def test_get_vector3_full_and_partial():
    obj = {"pos": [1, 2, 3], "short": [5], "scalar": 4}
    assert get_vector3(obj, "pos", Vector3()) == Vector3(1, 2, 3)
    assert get_vector3(obj, "short", Vector3(9, 9, 9)) == Vector3(5, 0, 0)
    assert get_vector3(obj, "scalar", Vector3(9, 9, 9)) == Vector3(0, 0, 0)


def test_get_vector3_default_when_missing():
    default = Vector3(0.75, 0.2, -1.5)
    assert get_vector3({}, "sunDirection", default) == default


def test_vector_round_trip():
    v = Vector3(1.5, -2.0, 3.25)
    doc = json.loads(json.dumps({"v": vector3_to_json(v)}))
    assert get_vector3(doc, "v", Vector3()) == v