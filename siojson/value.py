"""A typed wrapper around a single JSON value.

The wrapped value uses Python's own types: ``None`` for null, ``str``,
``float``/``int`` for numbers, ``bool``, ``list`` for arrays, ``dict`` for
objects and ``bytes`` for binary payloads.  A binary payload behaves like a
string when serialised and is written out base64 encoded.
"""

from __future__ import annotations

import base64
import binascii
import enum
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .convert import json_string_to_value, to_json_string

__all__ = ["JsonType", "JsonValue", "is_binary", "raw_as_binary"]

logger = logging.getLogger(__name__)

_HEX_BLOB = re.compile(r"(?:[0-9a-fA-F]{2})*")
_NUMERIC = re.compile(r"[+-]?[0-9]*\.?[0-9]*")


class _Unset:
    """Marker for a value that holds nothing at all."""

    def __repr__(self) -> str:
        return "UNSET"


_UNSET: Any = _Unset()


class JsonType(enum.IntEnum):
    """Every kind a JSON value can be."""

    NONE = 0
    NULL = 1
    STRING = 2
    NUMBER = 3
    BOOLEAN = 4
    ARRAY = 5
    OBJECT = 6
    BINARY = 7


def is_binary(raw: Any) -> bool:
    """Tell whether a raw value is a binary payload."""
    return isinstance(raw, (bytes, bytearray, memoryview))


def raw_as_binary(raw: Any) -> bytes:
    """Get bytes out of a raw value.

    Binary payloads are returned as they are; strings are decoded as base64
    (an undecodable string gives empty bytes); anything else gives empty bytes.
    """
    if is_binary(raw):
        return bytes(raw)
    if isinstance(raw, str):
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("couldn't decode %s as a binary.", raw)
            return b""
    return b""


def _raw_type(raw: Any) -> JsonType:
    if raw is _UNSET:
        return JsonType.NONE
    if raw is None:
        return JsonType.NULL
    if isinstance(raw, bool):
        return JsonType.BOOLEAN
    if isinstance(raw, (int, float)):
        return JsonType.NUMBER
    if isinstance(raw, str):
        return JsonType.STRING
    if is_binary(raw):
        return JsonType.BINARY
    if isinstance(raw, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(raw, dict):
        return JsonType.OBJECT
    return JsonType.NONE


_TYPE_NAMES = {
    JsonType.NONE: "None",
    JsonType.NULL: "Null",
    JsonType.STRING: "String",
    JsonType.BINARY: "String",
    JsonType.NUMBER: "Number",
    JsonType.BOOLEAN: "Boolean",
    JsonType.ARRAY: "Array",
    JsonType.OBJECT: "Object",
}


@dataclass
class JsonValue:
    """One JSON value; ``JsonValue()`` holds no value at all."""

    raw: Any = _UNSET

    # Construction

    @classmethod
    def number(cls, number: float) -> JsonValue:
        """Create a number value."""
        return cls(float(number))

    @classmethod
    def string(cls, text: str) -> JsonValue:
        """Create a string value."""
        return cls(str(text))

    @classmethod
    def boolean(cls, flag: bool) -> JsonValue:
        """Create a boolean value."""
        return cls(bool(flag))

    @classmethod
    def array(cls, values: Iterable[JsonValue]) -> JsonValue:
        """Create an array value from other values."""
        return cls([None if item.raw is _UNSET else item.raw for item in values])

    @classmethod
    def object(cls, json_object: Mapping[str, Any]) -> JsonValue:
        """Create an object value; a ``dict`` is shared, not copied."""
        if isinstance(json_object, dict):
            return cls(json_object)
        return cls(dict(json_object))

    @classmethod
    def binary(cls, data: bytes) -> JsonValue:
        """Create a binary value."""
        return cls(bytes(data))

    @classmethod
    def from_json_string(cls, text: str) -> JsonValue:
        """Create a value from text, guessing which kind it stands for."""
        return cls(json_string_to_value(text))

    # Inspection

    def type(self) -> JsonType:
        """The kind of value held."""
        return _raw_type(self.raw)

    def type_string(self) -> str:
        """The kind of value held, by name; binary payloads read as ``String``."""
        return _TYPE_NAMES[self.type()]

    def is_null(self) -> bool:
        """True for null and for a value that holds nothing."""
        return self.raw is _UNSET or self.raw is None

    def _misuse(self, wanted: str) -> TypeError:
        message = f"Json Value of type '{self.type_string()}' used as a '{wanted}'."
        logger.error(message)
        return TypeError(message)

    # Conversion

    def as_number(self) -> float:
        """The value as a number; a binary payload gives its length."""
        raw = self.raw
        kind = self.type()
        if kind is JsonType.NUMBER:
            return float(raw)
        if kind is JsonType.BOOLEAN:
            return 1.0 if raw else 0.0
        if kind is JsonType.BINARY:
            return float(len(raw))
        if kind is JsonType.STRING and raw and _NUMERIC.fullmatch(raw):
            try:
                return float(raw)
            except ValueError:
                pass
        raise self._misuse("Number")

    def as_string(self) -> str:
        """The value as a string; non-strings are encoded as JSON text."""
        if self.raw is _UNSET:
            raise self._misuse("String")
        if isinstance(self.raw, str):
            return self.raw
        return self.encode_json()

    def as_bool(self) -> bool:
        """The value as a boolean."""
        raw = self.raw
        kind = self.type()
        if kind is JsonType.BOOLEAN:
            return raw
        if kind is JsonType.NUMBER:
            return raw != 0
        if kind is JsonType.STRING:
            lowered = raw.lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        raise self._misuse("Boolean")

    def as_array(self) -> list[JsonValue]:
        """The items of an array value, each wrapped."""
        if self.type() is not JsonType.ARRAY:
            raise self._misuse("Array")
        return [JsonValue(item) for item in self.raw]

    def as_object(self) -> dict[str, Any]:
        """The fields of an object value; the mapping is shared, not copied."""
        if self.type() is not JsonType.OBJECT:
            raise self._misuse("Object")
        return self.raw

    def as_binary(self) -> bytes:
        """The value as bytes.

        A binary payload gives its bytes and a string is read as hex, giving
        empty bytes when it is not valid hex.  Anything else gives empty bytes.
        """
        if self.raw is _UNSET:
            raise self._misuse("Binary")
        if is_binary(self.raw):
            return raw_as_binary(self.raw)
        if isinstance(self.raw, str):
            if _HEX_BLOB.fullmatch(self.raw):
                return bytes.fromhex(self.raw)
            return b""
        return b""

    def encode_json(self) -> str:
        """Render the value as a string (JSON text for arrays and objects)."""
        if self.raw is _UNSET:
            return ""
        return to_json_string(self.raw)