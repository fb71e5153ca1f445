# jsonmodel

A small JSON document model. It has typed values, arrays that keep their
order, and objects that keep keys in insertion order. Two interchangeable
formatters turn a model into text.

## Installation

```
pip install jsonmodel
```

## Building documents

```python
from jsonmodel.values import JsonArray, JsonObject, JsonValue, ValueType

tags = JsonArray([JsonValue("json"), JsonValue("model")])

doc = JsonObject()
doc.add("name", JsonValue("widget"))
doc.add("count", JsonValue(3))
doc.add("ratio", JsonValue(0.5))
doc.add("enabled", JsonValue(True))
doc.add("parent", JsonValue(None))
doc.add("tags", JsonValue(tags))

print(doc["count"].as_int())      # 3
print(doc.keys())                 # ['name', 'count', 'ratio', 'enabled', 'parent', 'tags']
print(doc["tags"].type)           # ValueType.ARRAY
```

`JsonValue`, `JsonArray` and `JsonObject` also accept plain Python values
and wrap them: `None`, `bool`, `int`, `float`, `str`, lists and tuples
(become arrays) and mappings (become objects). So
`JsonObject({"count": 3, "tags": ["json", "model"]})` builds the same kind of
structure. Anything else raises `TypeError`.

Values are stored by copy. Putting an array, object or value into another
container never shares state with the argument. `as_array()`, `as_object()`,
`JsonValue.value` (for arrays and objects) and `JsonObject.values()` hand
back copies as well.

The rules are strict:

- `JsonObject.add` raises `KeyError` if the key is already present, and
  `TypeError` if the key is not a string.
- `JsonObject.remove`, `obj[key]` and `obj[key] = value` raise `KeyError`
  if the key is missing. Item assignment only replaces existing keys.
- Array indexing and item assignment raise `IndexError` when the index is
  outside `0 <= index < len(array)`. Negative indexes are not accepted.
- The typed accessors (`as_bool`, `as_int`, `as_float`, `as_str`,
  `as_array`, `as_object`) raise `TypeError` when the value holds a
  different type.
- `reset(value_type)` changes a value's type and clears its payload. Until
  a new payload is assigned through `value`, reading it raises `ValueError`.
- Assigning to `JsonValue.value` raises `TypeError` if the new value is of a
  different type than the current one.

Values, arrays and objects compare equal when their types and contents are
equal. They are not hashable.

## Formatting

`str()` on a `JsonValue` writes scalars directly. It writes `null`,
`true`/`false`, integers, and floats in `%g` style (six significant digits).
Strings go between double quotes. `str()` on an array or an object uses the
formatter that is currently set. By default this is the compact formatter:

```python
print(doc)
# {"name":"widget","count":3,"ratio":0.5,"enabled":true,"parent":null,"tags":["json","model"]}
```

To switch to the indented, human-readable layout:

```python
from jsonmodel.formatters import PrettyJsonFormatter, set_formatter, get_formatter

set_formatter(PrettyJsonFormatter())
print(doc)
```

```
{
  "name" : "widget",
  "count" : 3,
  "ratio" : 0.5,
  "enabled" : true,
  "parent" : null,
  "tags" : [
    "json",
    "model"
  ]
}
```

The pretty formatter indents each level by two spaces and writes
`"key" : value`. Output at the outermost level ends with a newline. Empty
containers are written as `[]` and `{}`. The setting applies to the whole
process. `set_formatter` raises `TypeError` for anything that is not a
`JsonFormatter`, and `get_formatter()` returns the one in use.

Both formatters can also be called directly, with an optional nesting level:

```python
from jsonmodel.formatters import CompactJsonFormatter

text = CompactJsonFormatter().format(doc)
```

A negative indent raises `ValueError`. Passing something other than a
`JsonArray` or `JsonObject` raises `TypeError`. To write your own layout,
subclass `JsonFormatter` and implement `format(value, indent=0)`.

Strings and keys are written between quotes exactly as stored. They are
not escaped.

## What it does not do

The package only builds documents in memory and writes them out as text.
It does not parse JSON text, read or write files, or provide a command-line
tool.