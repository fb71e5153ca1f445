import pytest

from jsonmodel.values import JsonArray, JsonObject, JsonValue, ValueType


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ValueType.NULL),
        (True, ValueType.BOOLEAN),
        (7, ValueType.INT),
        (2.5, ValueType.DOUBLE),
        ("text", ValueType.STRING),
        (JsonArray(), ValueType.ARRAY),
        (JsonObject(), ValueType.OBJECT),
        ([1, 2], ValueType.ARRAY),
        ({"a": 1}, ValueType.OBJECT),
    ],
)
def test_type_is_inferred(raw, expected):
    assert JsonValue(raw).type is expected


def test_default_is_null():
    value = JsonValue()
    assert value.type is ValueType.NULL
    assert value.value is None


def test_getters_return_payload():
    assert JsonValue(True).as_bool() is True
    assert JsonValue(42).as_int() == 42
    assert JsonValue(1.5).as_float() == 1.5
    assert JsonValue("hi").as_str() == "hi"


@pytest.mark.parametrize(
    "raw, getter",
    [
        (1, "as_bool"),
        (True, "as_int"),
        (1, "as_float"),
        (1.0, "as_str"),
        ("x", "as_array"),
        ([1], "as_object"),
    ],
)
def test_getter_type_mismatch(raw, getter):
    with pytest.raises(TypeError):
        getattr(JsonValue(raw), getter)()


def test_reset_leaves_value_uninitialized():
    value = JsonValue("abc")
    value.reset(ValueType.INT)
    assert value.type is ValueType.INT
    with pytest.raises(ValueError):
        value.as_int()
    value.value = 5
    assert value.as_int() == 5


def test_reset_to_null():
    value = JsonValue(3)
    value.reset(ValueType.NULL)
    assert value.value is None
    assert value == JsonValue()


def test_value_setter_rejects_other_type():
    value = JsonValue(1)
    with pytest.raises(TypeError):
        value.value = "one"
    assert value.as_int() == 1


def test_value_setter_updates_same_type():
    value = JsonValue(2.0)
    value.value = 4.5
    assert value.as_float() == 4.5


def test_constructor_copies_array():
    source = JsonArray([1, 2])
    value = JsonValue(source)
    source.append(3)
    assert len(value.as_array()) == 2


def test_as_array_returns_copy():
    value = JsonValue([1, 2])
    copied = value.as_array()
    copied.append(9)
    assert len(value.as_array()) == 2


def test_copy_of_value_is_independent():
    original = JsonValue({"k": [1]})
    duplicate = JsonValue(original)
    assert duplicate == original
    duplicate.value = JsonObject({"k": [2]})
    assert original.as_object()["k"] == JsonValue([1])


def test_equality_distinguishes_types():
    assert JsonValue(1) != JsonValue(1.0)
    assert JsonValue("a") == JsonValue("a")
    assert JsonValue(None) == JsonValue()


@pytest.mark.parametrize(
    "raw, text",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (2.5, "2.5"),
        ("word", '"word"'),
    ],
)
def test_str_of_scalars(raw, text):
    assert str(JsonValue(raw)) == text


def test_str_of_float_uses_short_form():
    assert str(JsonValue(1.0)) == "1"


def test_str_of_uninitialized_raises():
    value = JsonValue(True)
    value.reset(ValueType.STRING)
    with pytest.raises(ValueError):
        str(value)
    assert value.type is ValueType.STRING
    value.value = "set"
    assert str(value) == '"set"'


def test_unsupported_payload_rejected():
    with pytest.raises(TypeError):
        JsonValue(object())


def test_array_access_and_iteration():
    array = JsonArray([1, "two", None])
    assert len(array) == 3
    assert array[1].as_str() == "two"
    assert [item.type for item in array] == [
        ValueType.INT,
        ValueType.STRING,
        ValueType.NULL,
    ]


@pytest.mark.parametrize("index", [3, -1, 100])
def test_array_index_out_of_range(index):
    array = JsonArray([1, 2, 3])
    with pytest.raises(IndexError):
        array[index]
    with pytest.raises(IndexError):
        array[index] = 0
    assert len(array) == 3
    assert array == JsonArray([1, 2, 3])


def test_array_setitem_and_in_place_edit():
    array = JsonArray([1, 2])
    array[0] = "first"
    array[1].value = 20
    assert array == JsonArray(["first", 20])


def test_array_append():
    array = JsonArray()
    array.append(JsonValue(True))
    array.append(3)
    assert len(array) == 2
    assert array[0].as_bool() is True
    assert array[1].as_int() == 3


def test_object_keeps_insertion_order():
    obj = JsonObject()
    for key in ["z", "a", "m"]:
        obj.add(key, key)
    assert obj.keys() == ["z", "a", "m"]
    assert list(obj) == ["z", "a", "m"]
    assert [v.as_str() for v in obj.values()] == ["z", "a", "m"]


def test_object_add_duplicate_raises():
    obj = JsonObject({"a": 1})
    with pytest.raises(KeyError):
        obj.add("a", 2)
    assert obj["a"].as_int() == 1


def test_object_from_pairs_duplicate_raises():
    with pytest.raises(KeyError):
        JsonObject([("a", 1), ("a", 2)])


def test_object_missing_key_errors():
    obj = JsonObject({"a": 1})
    with pytest.raises(KeyError):
        obj["b"]
    with pytest.raises(KeyError):
        obj["b"] = 2
    with pytest.raises(KeyError):
        obj.remove("b")
    assert len(obj) == 1


def test_object_set_and_remove():
    obj = JsonObject({"a": 1, "b": 2, "c": 3})
    obj["b"] = "changed"
    assert obj["b"].as_str() == "changed"
    obj.remove("a")
    assert "a" not in obj
    assert obj.keys() == ["b", "c"]
    assert len(obj) == 2


def test_object_values_are_copies():
    obj = JsonObject({"a": 1})
    obj.values()[0].value = 99
    assert obj["a"].as_int() == 1


def test_object_rejects_non_string_key():
    with pytest.raises(TypeError):
        JsonObject().add(1, "x")


def test_object_equality():
    assert JsonObject({"a": 1, "b": [True]}) == JsonObject({"a": 1, "b": [True]})
    assert JsonObject({"a": 1}) != JsonObject({"a": 2})


def test_nested_structure_round_trip():
    data = {"name": "x", "list": [1, 2.5, {"deep": None}]}
    value = JsonValue(data)
    nested = value.as_object()["list"].as_array()[2].as_object()
    assert nested["deep"].type is ValueType.NULL
    assert JsonValue(value) == value