"""Conversions between JSON text and plain Python JSON values.

Values are represented with Python's own types: ``None`` for null, ``str``,
``int``/``float`` for numbers, ``bool``, ``list`` for arrays, ``dict`` for
objects and ``bytes`` for binary payloads.  A binary payload travels as a
string and is written out base64 encoded.
"""

from __future__ import annotations

import base64
import json
import math
import re
from typing import Any

__all__ = [
    "to_json_string",
    "json_string_to_value",
    "json_string_to_array",
    "to_json_object",
]

_NUMERIC = re.compile(r"[+-]?[0-9]*\.?[0-9]*")
_MAX_EXACT_INTEGER = 2**53


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _parse(text: str) -> Any:
    """Parse JSON text, storing every number as a float."""
    return json.loads(text, parse_int=float, parse_constant=_reject_constant)


def _prepare(value: Any) -> Any:
    """Turn a value tree into something the standard encoder writes condensed."""
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < _MAX_EXACT_INTEGER:
            return int(value)
        return value
    if isinstance(value, dict):
        return {str(key): _prepare(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    raise TypeError(f"cannot convert {type(value).__name__} to JSON")


def _dumps(value: Any) -> str:
    return json.dumps(_prepare(value), separators=(",", ":"), ensure_ascii=False)


def to_json_string(value: Any) -> str:
    """Render a value as a string.

    Objects and arrays become condensed JSON text.  Scalars are rendered
    directly: null gives an empty string, a string is returned as is, a
    number is formatted with six decimals, a boolean as ``1`` or ``0`` and
    binary data as base64.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, bool):
        return "%d" % value
    if isinstance(value, (int, float)):
        return "%f" % float(value)
    if isinstance(value, (dict, list, tuple)):
        return _dumps(value)
    raise TypeError(f"cannot convert {type(value).__name__} to JSON")


def _to_double(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def json_string_to_value(text: str) -> Any:
    """Guess the JSON value a string stands for.

    An empty string is null, a numeric string a number, text starting with
    ``{`` an object and text starting with ``[`` an array when it parses.
    ``true`` and ``false`` are booleans; anything else stays a string.
    """
    if not text:
        return None
    if _NUMERIC.fullmatch(text):
        return _to_double(text)
    if text.startswith("{"):
        return to_json_object(text)
    if text.startswith("["):
        try:
            parsed = _parse(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return parsed
    if text in ("true", "false"):
        return text == "true"
    return text


def json_string_to_array(text: str) -> list[Any]:
    """Parse a JSON array; text that is not a valid array gives an empty list."""
    try:
        parsed = _parse(text)
    except ValueError:
        return []
    return parsed if isinstance(parsed, list) else []


def to_json_object(text: str) -> dict[str, Any]:
    """Parse a JSON object; text that is not a valid object gives an empty dict."""
    try:
        parsed = _parse(text)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}