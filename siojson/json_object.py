"""A JSON object with typed field access.

The fields live in a plain ``dict`` whose values use Python's own JSON types:
``None`` for null, ``str``, ``float`` for numbers, ``bool``, ``list``,
``dict`` and ``bytes`` for binary payloads.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .convert import to_json_string
from .typed_arrays import ArrayFields
from .value import JsonType, JsonValue, is_binary, raw_as_binary

__all__ = ["JsonObject"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


class JsonObject(ArrayFields):
    """A JSON object; ``root`` is the dict of its fields, or ``None`` for no data."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonObject):
            return self.root == other.root
        return NotImplemented

    def reset(self) -> None:
        """Drop all fields."""
        self.root = {}

    # Serialization

    def encode_json(self) -> str:
        """The object as condensed JSON text; empty when there is no data."""
        if self.root is None:
            return ""
        return to_json_string(self.root)

    def encode_json_to_single_string(self) -> str:
        """The object as JSON text on a single line."""
        return self.encode_json().replace("\r\n", "").replace("\n", "")

    def decode_json(self, text: str) -> None:
        """Replace the fields with those of a JSON object given as text.

        On failure the object is emptied and ``ValueError`` is raised.
        """
        try:
            parsed = json.loads(text, parse_int=float, parse_constant=_reject_constant)
        except ValueError:
            parsed = None
        if not isinstance(parsed, dict):
            self.reset()
            logger.error("Json decoding failed for: %s", text)
            raise ValueError(f"not a JSON object: {text!r}")
        self.root = parsed

    # Generic fields

    def _readable(self, name: str) -> bool:
        return self.root is not None and bool(name)

    def _raw(self, name: str) -> Any:
        """The raw value of a field; ``KeyError`` when it is absent."""
        if self.root is None or name not in self.root:
            raise KeyError(name)
        return self.root[name]

    def _typed(self, name: str, kind: JsonType, label: str) -> Any:
        try:
            raw = self._raw(name)
        except KeyError:
            logger.warning("No field with name %s of type %s", name, label)
            raise
        actual = JsonValue(raw).type()
        if actual is not kind and not (kind is JsonType.STRING and actual is JsonType.BINARY):
            logger.warning("No field with name %s of type %s", name, label)
            raise TypeError(f"field {name!r} is not of type {label}")
        return raw

    def field_names(self) -> list[str]:
        """Names of the fields, in insertion order."""
        if self.root is None:
            return []
        return list(self.root)

    def has_field(self, name: str) -> bool:
        """Whether a field with this name exists."""
        return self._readable(name) and name in self.root

    def remove_field(self, name: str) -> None:
        """Remove a field if it exists."""
        if self._readable(name):
            self.root.pop(name, None)

    def get_field(self, name: str) -> JsonValue | None:
        """A field wrapped as a value, or ``None`` when it does not exist."""
        if not self._readable(name) or name not in self.root:
            return None
        return JsonValue(self.root[name])

    def set_field(self, name: str, value: JsonValue) -> None:
        """Set a field to a value; a value holding nothing is stored as null."""
        if not self._readable(name):
            return
        self.root[name] = None if value.type() is JsonType.NONE else value.raw

    def merge(self, other: JsonObject, overwrite: bool) -> None:
        """Copy the fields of another object; existing ones are kept unless ``overwrite``."""
        for name in other.field_names():
            if not overwrite and self.has_field(name):
                continue
            value = other.get_field(name)
            if value is not None:
                self.set_field(name, value)

    # Numbers

    def try_get_number_field(self, name: str) -> float | None:
        """A field read as a number, or ``None`` when absent or not convertible."""
        if self.root is None or name not in self.root:
            return None
        try:
            return JsonValue(self.root[name]).as_number()
        except TypeError:
            return None

    def get_number_field(self, name: str) -> float:
        """A number field; ``KeyError`` when absent, ``TypeError`` when not a number."""
        return float(self._typed(name, JsonType.NUMBER, "Number"))

    def set_number_field(self, name: str, number: float) -> None:
        """Set a number field."""
        if self._readable(name):
            self.root[name] = float(number)

    # Strings

    def try_get_string_field(self, name: str) -> str | None:
        """A field read as a string, or ``None`` when absent or not convertible."""
        if self.root is None or name not in self.root:
            return None
        raw = self.root[name]
        if isinstance(raw, str):
            return raw
        if is_binary(raw):
            return to_json_string(raw)
        if isinstance(raw, bool):
            return "true" if raw else "false"
        if isinstance(raw, (int, float)):
            return repr(float(raw))
        return None

    def get_string_field(self, name: str) -> str:
        """A string field; binary payloads read as base64 text."""
        raw = self._typed(name, JsonType.STRING, "String")
        return raw if isinstance(raw, str) else to_json_string(raw)

    def set_string_field(self, name: str, text: str) -> None:
        """Set a string field."""
        if self._readable(name):
            self.root[name] = str(text)

    # Booleans

    def try_get_bool_field(self, name: str) -> bool | None:
        """A field read as a boolean, or ``None`` when absent or not convertible."""
        if self.root is None or name not in self.root:
            return None
        try:
            return JsonValue(self.root[name]).as_bool()
        except TypeError:
            return None

    def get_bool_field(self, name: str) -> bool:
        """A boolean field; ``KeyError`` when absent, ``TypeError`` when not a boolean."""
        return bool(self._typed(name, JsonType.BOOLEAN, "Boolean"))

    def set_bool_field(self, name: str, flag: bool) -> None:
        """Set a boolean field."""
        if self._readable(name):
            self.root[name] = bool(flag)

    # Objects

    def try_get_object_field(self, name: str) -> JsonObject | None:
        """An object field sharing its fields, or ``None`` when absent or not an object."""
        if self.root is None:
            return None
        raw = self.root.get(name)
        if isinstance(raw, dict):
            return type(self)(raw)
        return None

    def get_object_field(self, name: str) -> JsonObject:
        """An object field sharing its fields."""
        return type(self)(self._typed(name, JsonType.OBJECT, "Object"))

    def set_object_field(self, name: str, json_object: JsonObject | Mapping[str, Any]) -> None:
        """Set an object field; the fields are shared, not copied."""
        if not self._readable(name):
            return
        if isinstance(json_object, Mapping):
            self.root[name] = json_object if isinstance(json_object, dict) else dict(json_object)
        else:
            self.root[name] = json_object.root

    # Binary

    def get_binary_field(self, name: str) -> bytes:
        """A field read as bytes.

        Binary payloads give their bytes, strings are decoded as base64 and
        anything else gives empty bytes.  ``KeyError`` when absent.
        """
        try:
            raw = self._raw(name)
        except KeyError:
            logger.warning("JsonValue is null for %s, aborting parse.", name)
            raise
        return raw_as_binary(raw)

    def set_binary_field(self, name: str, data: bytes) -> None:
        """Set a binary field."""
        if self._readable(name):
            self.root[name] = bytes(data)