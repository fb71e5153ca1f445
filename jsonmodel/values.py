"""JSON value model: tagged values, ordered objects and arrays."""

from __future__ import annotations

import copy
import enum
import operator
from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class ValueType(enum.Enum):
    """Kind of data held by a :class:`JsonValue`."""

    NULL = "null"
    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class _Unset(enum.Enum):
    """Marker for a typed value whose payload has not been given yet."""

    UNSET = "unset"


_UNSET = _Unset.UNSET


def _classify(raw: Any) -> tuple[ValueType, Any]:
    """Return the value type of ``raw`` and an independent copy of its payload."""
    if isinstance(raw, JsonValue):
        return raw._type, copy.deepcopy(raw._payload)
    if raw is None:
        return ValueType.NULL, None
    if isinstance(raw, bool):
        return ValueType.BOOLEAN, raw
    if isinstance(raw, int):
        return ValueType.INT, raw
    if isinstance(raw, float):
        return ValueType.DOUBLE, raw
    if isinstance(raw, str):
        return ValueType.STRING, raw
    if isinstance(raw, JsonArray):
        return ValueType.ARRAY, copy.deepcopy(raw)
    if isinstance(raw, JsonObject):
        return ValueType.OBJECT, copy.deepcopy(raw)
    if isinstance(raw, (list, tuple)):
        return ValueType.ARRAY, JsonArray(raw)
    if isinstance(raw, Mapping):
        return ValueType.OBJECT, JsonObject(raw)
    raise TypeError(f"Cannot store {type(raw).__name__} in a JsonValue")


class JsonValue:
    """A single JSON value of one of the kinds in :class:`ValueType`.

    Values are stored by copy: building a value from an array, object or
    another value never shares state with the argument.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        self._type, self._payload = _classify(value)

    @property
    def type(self) -> ValueType:
        """The kind of data this value holds."""
        return self._type

    def reset(self, value_type: ValueType) -> None:
        """Change the kind of this value and drop its payload."""
        if not isinstance(value_type, ValueType):
            raise TypeError("Invalid value type!")
        self._type = value_type
        self._payload = None if value_type is ValueType.NULL else _UNSET

    @property
    def value(self) -> Any:
        """The payload as a plain Python object (``None`` for null)."""
        if self._payload is _UNSET:
            raise ValueError("No initialized value in value!")
        if self._type in (ValueType.ARRAY, ValueType.OBJECT):
            return copy.deepcopy(self._payload)
        return self._payload

    @value.setter
    def value(self, new: Any) -> None:
        new_type, payload = _classify(new)
        if new_type is not self._type:
            raise TypeError(
                f"Mismatched value type: expected {self._type.name}, got {new_type.name}"
            )
        self._payload = payload

    def _checked(self, expected: ValueType, name: str) -> Any:
        if self._type is not expected:
            raise TypeError(f"Mismatched value type in {name}()!")
        if self._payload is _UNSET:
            raise ValueError(f"No initialized value in {name}()!")
        return self._payload

    def as_bool(self) -> bool:
        return self._checked(ValueType.BOOLEAN, "as_bool")

    def as_int(self) -> int:
        return self._checked(ValueType.INT, "as_int")

    def as_float(self) -> float:
        return self._checked(ValueType.DOUBLE, "as_float")

    def as_str(self) -> str:
        return self._checked(ValueType.STRING, "as_str")

    def as_array(self) -> JsonArray:
        """Return a copy of the held array."""
        return copy.deepcopy(self._checked(ValueType.ARRAY, "as_array"))

    def as_object(self) -> JsonObject:
        """Return a copy of the held object."""
        return copy.deepcopy(self._checked(ValueType.OBJECT, "as_object"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._payload == other._payload

    def __str__(self) -> str:
        if self._type is ValueType.NULL:
            return "null"
        if self._payload is _UNSET:
            raise ValueError("No initialized value to print!")
        if self._type is ValueType.BOOLEAN:
            return "true" if self._payload else "false"
        if self._type is ValueType.INT:
            return str(self._payload)
        if self._type is ValueType.DOUBLE:
            return f"{self._payload:g}"
        if self._type is ValueType.STRING:
            return f'"{self._payload}"'
        return str(self._payload)

    def __repr__(self) -> str:
        if self._payload is _UNSET:
            return f"JsonValue(<unset {self._type.name}>)"
        return f"JsonValue({self._payload!r})"


class JsonArray:
    """An ordered sequence of :class:`JsonValue` items."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[JsonValue] = [JsonValue(item) for item in values]

    def __len__(self) -> int:
        return len(self._items)

    def _position(self, index: Any) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError("Index out of range in JsonArray")
        return position

    def __getitem__(self, index: int) -> JsonValue:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = JsonValue(value)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self._items == other._items

    def append(self, value: Any) -> None:
        """Add a copy of ``value`` at the end."""
        self._items.append(JsonValue(value))

    def __str__(self) -> str:
        from .formatters import get_formatter

        return get_formatter().format(self, 0)

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


class JsonObject:
    """A mapping of string keys to :class:`JsonValue`, kept in insertion order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        self._data: dict[str, JsonValue] = {}
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.add(key, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def _require(self, key: str) -> None:
        if key not in self._data:
            raise KeyError(f'Key "{key}" does not exist in JsonObject!')

    def __getitem__(self, key: str) -> JsonValue:
        self._require(key)
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        """Replace the value of an existing key."""
        self._require(key)
        self._data[key] = JsonValue(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._data == other._data

    def keys(self) -> list[str]:
        """Keys in insertion order."""
        return list(self._data)

    def values(self) -> list[JsonValue]:
        """Copies of the values, in key order."""
        return [JsonValue(value) for value in self._data.values()]

    def add(self, key: str, value: Any) -> None:
        """Insert a new key; an existing key is an error."""
        if not isinstance(key, str):
            raise TypeError("JsonObject keys must be strings")
        if key in self._data:
            raise KeyError(f'Key "{key}" already exists in JsonObject!')
        self._data[key] = JsonValue(value)

    def remove(self, key: str) -> None:
        """Delete an existing key."""
        self._require(key)
        del self._data[key]

    def __str__(self) -> str:
        from .formatters import get_formatter

        return get_formatter().format(self, 0)

    def __repr__(self) -> str:
        return f"JsonObject({self._data!r})"