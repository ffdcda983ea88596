import base64
import json

import pytest

from siojson.convert import (
    json_string_to_array,
    json_string_to_value,
    to_json_object,
    to_json_string,
)


def test_none_renders_empty():
    assert to_json_string(None) == ""


def test_string_renders_unchanged():
    assert to_json_string("hello world") == "hello world"


def test_number_uses_six_decimals():
    assert to_json_string(2.5) == "2.500000"


def test_bool_renders_as_integer():
    assert to_json_string(True) == "1"


def test_binary_renders_as_base64():
    data = b"\x00\x01\xfe\xff"
    assert base64.b64decode(to_json_string(data)) == data


def test_object_round_trip():
    source = {"name": "ada", "flag": True, "items": [1.5, "x", None], "inner": {"k": "v"}}
    text = to_json_string(source)
    assert json.loads(text) == source


def test_object_is_condensed():
    text = to_json_string({"a": [1, 2], "b": {"c": "d"}})
    assert " " not in text
    assert "\n" not in text


def test_integral_float_written_without_fraction():
    text = to_json_string({"n": 3.0})
    assert ".0" not in text
    assert json.loads(text) == {"n": 3}


def test_array_round_trip():
    source = [1.25, "two", False, {"x": None}]
    assert json.loads(to_json_string(source)) == source


def test_binary_inside_object_is_base64_string():
    data = b"payload"
    parsed = json.loads(to_json_string({"blob": data}))
    assert base64.b64decode(parsed["blob"]) == data


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        to_json_string(object())


def test_unsupported_nested_type_raises():
    with pytest.raises(TypeError):
        to_json_string({"bad": {1, 2}})


def test_empty_string_is_null():
    assert json_string_to_value("") is None


@pytest.mark.parametrize("text", ["42", "-7", "+3.5", "0.25"])
def test_numeric_strings_become_numbers(text):
    result = json_string_to_value(text)
    assert isinstance(result, float)
    assert result == float(text)


def test_lone_sign_counts_as_numeric():
    assert json_string_to_value("-") == 0.0


def test_exponent_is_not_numeric():
    assert json_string_to_value("1e5") == "1e5"


def test_two_dots_is_not_numeric():
    assert json_string_to_value("1.2.3") == "1.2.3"


def test_object_text_becomes_dict():
    assert json_string_to_value('{"a": 1, "b": "c"}') == {"a": 1.0, "b": "c"}


def test_broken_object_text_becomes_empty_dict():
    assert json_string_to_value("{not json") == {}


def test_array_text_becomes_list():
    assert json_string_to_value('[1, "x", true]') == [1.0, "x", True]


def test_broken_array_text_stays_string():
    assert json_string_to_value("[broken") == "[broken"


@pytest.mark.parametrize("text,expected", [("true", True), ("false", False)])
def test_booleans(text, expected):
    assert json_string_to_value(text) is expected


def test_other_text_stays_string():
    assert json_string_to_value("hello") == "hello"


def test_json_string_to_array_parses():
    assert json_string_to_array('[1, {"a": "b"}, null]') == [1.0, {"a": "b"}, None]


def test_json_string_to_array_rejects_object():
    assert json_string_to_array('{"a": 1}') == []


def test_json_string_to_array_rejects_garbage():
    assert json_string_to_array("nope") == []


def test_to_json_object_parses():
    assert to_json_object('{"k": [1, 2], "s": "t"}') == {"k": [1.0, 2.0], "s": "t"}


def test_to_json_object_rejects_array():
    assert to_json_object("[1, 2]") == {}


def test_to_json_object_rejects_invalid():
    assert to_json_object("{") == {}


def test_to_json_object_rejects_nan():
    assert to_json_object('{"x": NaN}') == {}


def test_object_string_round_trip():
    source = {"list": [1.0, 2.5], "text": "é", "nested": {"ok": False}}
    assert to_json_object(to_json_string(source)) == source