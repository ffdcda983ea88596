"""Helpers for reading and writing array-valued fields of a JSON object.

The fields live in a plain ``dict`` (``root``) whose values use Python's own
JSON types, as produced by :mod:`siojson.convert`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .value import JsonType, JsonValue

__all__ = ["ArrayFields"]

logger = logging.getLogger(__name__)


class ArrayFields:
    """Array field access over a dict of JSON fields.

    ``root`` may be set to ``None`` to stand for an object that holds no data;
    reads then give empty lists and writes are ignored.
    """

    def __init__(self, root: dict[str, Any] | None = None) -> None:
        self.root: dict[str, Any] | None = {} if root is None else root

    def _array(self, name: str) -> list[Any] | None:
        """The raw array stored under ``name``, or ``None`` when nothing can be read."""
        root = self.root
        if root is None or not name:
            return None
        if name not in root:
            logger.warning("No field with name %s of type Array", name)
            raise KeyError(name)
        raw = root[name]
        if not isinstance(raw, (list, tuple)):
            logger.warning("No field with name %s of type Array", name)
            raise TypeError(f"field {name!r} is not an array")
        return list(raw)

    def _writable(self, name: str) -> bool:
        return self.root is not None and bool(name)

    # Generic values

    def get_array_field(self, name: str) -> list[JsonValue]:
        """The items of an array field, each wrapped as a :class:`JsonValue`."""
        items = self._array(name)
        if items is None:
            return []
        return [JsonValue(item) for item in items]

    def set_array_field(self, name: str, values: Iterable[JsonValue]) -> None:
        """Store copies of ``values`` as an array field.

        Values that hold nothing and binary payloads are left out.
        """
        if not self._writable(name):
            return
        copied: list[Any] = []
        for value in values:
            kind = value.type()
            raw = value.raw
            if kind is JsonType.NULL:
                copied.append(None)
            elif kind is JsonType.STRING:
                copied.append(str(raw))
            elif kind is JsonType.NUMBER:
                copied.append(float(raw))
            elif kind is JsonType.BOOLEAN:
                copied.append(bool(raw))
            elif kind is JsonType.ARRAY:
                copied.append(list(raw))
            elif kind is JsonType.OBJECT:
                copied.append(raw)
            # NONE and BINARY are not copied.
        self.root[name] = copied

    # Uniform arrays

    def get_number_array_field(self, name: str) -> list[float]:
        """An array field read as numbers."""
        items = self._array(name)
        if items is None:
            return []
        numbers = []
        for item in items:
            value = JsonValue(item)
            if value.type() is not JsonType.NUMBER:
                logger.error("Not Number element in array with field name %s", name)
            numbers.append(value.as_number())
        return numbers

    def set_number_array_field(self, name: str, numbers: Iterable[float]) -> None:
        """Store numbers as an array field."""
        if self._writable(name):
            self.root[name] = [float(number) for number in numbers]

    def get_string_array_field(self, name: str) -> list[str]:
        """An array field read as strings."""
        items = self._array(name)
        if items is None:
            return []
        strings = []
        for item in items:
            value = JsonValue(item)
            if value.type() is not JsonType.STRING:
                logger.error("Not String element in array with field name %s", name)
            strings.append(value.as_string())
        return strings

    def set_string_array_field(self, name: str, strings: Iterable[str]) -> None:
        """Store strings as an array field."""
        if self._writable(name):
            self.root[name] = [str(text) for text in strings]

    def get_bool_array_field(self, name: str) -> list[bool]:
        """An array field read as booleans."""
        items = self._array(name)
        if items is None:
            return []
        flags = []
        for item in items:
            value = JsonValue(item)
            if value.type() is not JsonType.BOOLEAN:
                logger.error("Not Boolean element in array with field name %s", name)
            flags.append(value.as_bool())
        return flags

    def set_bool_array_field(self, name: str, flags: Iterable[bool]) -> None:
        """Store booleans as an array field."""
        if self._writable(name):
            self.root[name] = [bool(flag) for flag in flags]

    def get_object_array_field(self, name: str) -> list[ArrayFields]:
        """An array field read as objects, each wrapped in this class; fields are shared."""
        items = self._array(name)
        if items is None:
            return []
        objects = []
        for item in items:
            value = JsonValue(item)
            if value.type() is not JsonType.OBJECT:
                logger.error("Not Object element in array with field name %s", name)
            objects.append(type(self)(value.as_object()))
        return objects

    def set_object_array_field(self, name: str, objects: Iterable[Any]) -> None:
        """Store objects (wrappers with a ``root`` or plain mappings) as an array field."""
        if not self._writable(name):
            return
        entries = []
        for item in objects:
            if isinstance(item, Mapping):
                entries.append(item if isinstance(item, dict) else dict(item))
            else:
                entries.append(item.root)
        self.root[name] = entries