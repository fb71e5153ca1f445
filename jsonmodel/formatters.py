"""Text renderers for JSON arrays and objects, plus the process-wide default."""

from __future__ import annotations

import abc
import operator
from typing import Union

from .values import JsonArray, JsonObject, JsonValue, ValueType

Container = Union[JsonArray, JsonObject]


def _check_indent(indent: int) -> int:
    level = operator.index(indent)
    if level < 0:
        raise ValueError("Indent level must not be negative")
    return level


def _not_a_container(value: object) -> TypeError:
    return TypeError(f"Cannot format {type(value).__name__}; expected JsonArray or JsonObject")


class JsonFormatter(abc.ABC):
    """Turns a :class:`JsonArray` or :class:`JsonObject` into text."""

    @abc.abstractmethod
    def format(self, value: Container, indent: int = 0) -> str:
        """Render ``value`` nested ``indent`` levels deep."""

    def _render(self, item: JsonValue, indent: int) -> str:
        if item.type is ValueType.ARRAY:
            return self.format(item.as_array(), indent)
        if item.type is ValueType.OBJECT:
            return self.format(item.as_object(), indent)
        return str(item)


class CompactJsonFormatter(JsonFormatter):
    """Renders without any whitespace; the indent level is ignored."""

    def format(self, value: Container, indent: int = 0) -> str:
        _check_indent(indent)
        if isinstance(value, JsonArray):
            return "[" + ",".join(self._render(item, 0) for item in value) + "]"
        if isinstance(value, JsonObject):
            members = (f'"{key}":{self._render(value[key], 0)}' for key in value)
            return "{" + ",".join(members) + "}"
        raise _not_a_container(value)


class PrettyJsonFormatter(JsonFormatter):
    """Renders one member per line, two spaces per nesting level.

    Output at the outermost level ends with a newline; empty containers
    are rendered as ``[]`` or ``{}`` on their own.
    """

    def format(self, value: Container, indent: int = 0) -> str:
        level = _check_indent(indent)
        if isinstance(value, JsonArray):
            if not len(value):
                return "[]"
            opening, closing = "[", "]"
            entries = [self._render(item, level + 1) for item in value]
        elif isinstance(value, JsonObject):
            if not len(value):
                return "{}"
            opening, closing = "{", "}"
            entries = [f'"{key}" : {self._render(value[key], level + 1)}' for key in value]
        else:
            raise _not_a_container(value)

        inner = "  " * (level + 1)
        body = ",\n".join(inner + entry for entry in entries)
        text = f"{opening}\n{body}\n{'  ' * level}{closing}"
        return text + "\n" if level == 0 else text


_current: JsonFormatter = CompactJsonFormatter()


def set_formatter(formatter: JsonFormatter) -> None:
    """Make ``formatter`` the one used by ``str()`` on arrays and objects."""
    global _current
    if not isinstance(formatter, JsonFormatter):
        raise TypeError("formatter must be a JsonFormatter")
    _current = formatter


def get_formatter() -> JsonFormatter:
    """Return the formatter currently used by ``str()``."""
    return _current