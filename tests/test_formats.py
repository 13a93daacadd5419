import json

import pytest

from xplr.formats import FormatError, parse_any, parse_json, parse_toml, parse_yaml

TOML_DOC = """Age = 25
Cats = [ "Cauchy", "Plato" ]
Perfection = [ 6, 28, 496, 8128 ]
[children]
	alpha = 10
	bravo = 20"""

YAML_DOC = """---
foo: 1
bar: c
baz: [3, 4]
bad:
  guy: moriarty
"""


def test_parse_json_round_trip():
    m = {"foo": 1, "bar": "two", "baz": {"bad": [1, 2]}}
    data = json.dumps(m).encode()
    assert parse_json(data) == m


def test_parse_json_accepts_str():
    assert parse_json('{"a": true}') == {"a": True}


def test_parse_json_rejects_invalid():
    with pytest.raises(FormatError):
        parse_json(b"{not json")


def test_parse_json_rejects_non_object():
    with pytest.raises(FormatError):
        parse_json(b"[1, 2]")


def test_parse_toml():
    m = parse_toml(TOML_DOC.encode())
    assert len(m) == 4
    assert m["Age"] == 25
    assert sorted(m["Cats"]) == ["Cauchy", "Plato"]
    assert sorted(m["Perfection"]) == [6, 28, 496, 8128]
    assert len(m["children"]) == 2
    assert m["children"]["alpha"] == 10
    assert m["children"]["bravo"] == 20


def test_parse_toml_rejects_invalid():
    with pytest.raises(FormatError):
        parse_toml(b"= broken")


def test_parse_yaml():
    m = parse_yaml(YAML_DOC.encode())
    assert len(m) == 4
    assert m["foo"] == 1
    assert m["bar"] == "c"
    assert sorted(m["baz"]) == [3, 4]
    assert len(m["bad"]) == 1
    assert m["bad"]["guy"] == "moriarty"


def test_parse_yaml_rejects_scalar():
    with pytest.raises(FormatError):
        parse_yaml(b"just a string")


def test_parse_any_json():
    assert parse_any(b'{"x": [1, 2]}') == {"x": [1, 2]}


def test_parse_any_yaml():
    assert parse_any(YAML_DOC.encode())["bad"] == {"guy": "moriarty"}


def test_parse_any_falls_back_to_toml():
    assert parse_any(TOML_DOC.encode())["children"] == {"alpha": 10, "bravo": 20}


def test_parse_any_fails_for_garbage():
    with pytest.raises(FormatError):
        parse_any(b"[unclosed")