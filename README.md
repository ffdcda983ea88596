# siojson

JSON values and objects that can carry raw binary payloads, with typed
access to the fields of an object. Values are held in Python's own types:
`None` for null, `str`, `float`/`int` for numbers, `bool`, `list`, `dict`,
and `bytes` for binary payloads. A binary payload behaves like a string
when serialised and is written out as base64.

## Install

```
pip install siojson
```

For running the tests:

```
pip install "siojson[test]"
```

## Converting text and values

`siojson.convert` has four functions:

- `to_json_string(value)`: objects and arrays become condensed JSON text.
  Scalars are rendered directly: null gives `""`, a string is returned as
  is, a number is formatted with six decimals (`"42.000000"`), a boolean as
  `"1"` or `"0"`, and bytes as base64.
- `json_string_to_value(text)`: guesses what a string stands for. An empty
  string is `None`, a numeric string a float, text starting with `{` an
  object, text starting with `[` an array when it parses, `"true"` and
  `"false"` booleans; anything else stays a string.
- `json_string_to_array(text)`: parses a JSON array, giving `[]` when the
  text is not one.
- `to_json_object(text)`: parses a JSON object, giving `{}` when the text
  is not one.

Parsed numbers are always floats.

## Values

`siojson.value.JsonValue` wraps one JSON value and reports its `JsonType`:
`NONE` (holds nothing, as `JsonValue()`), `NULL`, `STRING`, `NUMBER`,
`BOOLEAN`, `ARRAY`, `OBJECT` or `BINARY`.

```python
from siojson.value import JsonValue, JsonType

v = JsonValue.binary(b"\x01\x02")
assert v.type() is JsonType.BINARY
assert v.type_string() == "String"
assert v.as_binary() == b"\x01\x02"

n = JsonValue.from_json_string("42")
assert n.as_number() == 42.0
```

Constructors: `number`, `string`, `boolean`, `array` (from other
`JsonValue`s), `object`, `binary` and `from_json_string`.

Conversions: `as_number`, `as_string`, `as_bool`, `as_array`, `as_object`,
`as_binary` and `encode_json`. A value that cannot be read as the kind
asked for raises `TypeError`. `as_string()` returns the text of a string
value and `encode_json()` of anything else. `as_binary()` returns the bytes
of a binary payload and reads a string as hex, giving `b""` when it is not
valid hex.

The module also offers `is_binary(raw)` and `raw_as_binary(raw)`, which
decodes a string as base64.

## Objects

`siojson.json_object.JsonObject` is a mutable JSON object whose fields live
in the dict `root`:

```python
from siojson.json_object import JsonObject

obj = JsonObject()
obj.set_string_field("name", "probe")
obj.set_number_field("count", 3)
obj.set_number_array_field("samples", [1.0, 2.5])
print(obj.encode_json())   # {"name":"probe","count":3,"samples":[1,2.5]}

other = JsonObject()
other.decode_json('{"name":"other","extra":true}')
obj.merge(other, False)    # only "extra" is added
```

- `decode_json(text)` replaces the fields; on invalid text it empties the
  object and raises `ValueError`.
- `encode_json()` and `encode_json_to_single_string()` give condensed text.
- `field_names`, `has_field`, `remove_field`, `get_field`, `set_field`,
  `merge` and `reset` work on fields generically.
- `get_number_field`, `get_string_field`, `get_bool_field` and
  `get_object_field` raise `KeyError` when the field is missing and
  `TypeError` when it has another type.
- `try_get_number_field`, `try_get_string_field`, `try_get_bool_field` and
  `try_get_object_field` return `None` instead.
- `get_binary_field` returns the bytes of a binary field or decodes a
  base64 string; `set_binary_field` stores bytes.

Array fields come from `siojson.typed_arrays.ArrayFields`, which
`JsonObject` extends: `get_array_field`/`set_array_field` for
`JsonValue`s, and number, string, bool and object variants
(`get_number_array_field`, `set_string_array_field`, and so on).

## What it does not do

The package only models JSON data. It does not convert dataclasses or
other Python classes to and from JSON, does not rewrite generated field
names, reads and writes no files, and makes no network requests.