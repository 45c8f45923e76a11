import pytest

from jsonx.types import (
    PROPERTY_MAX_SIZE,
    Element,
    ElementStatus,
    ElementType,
    array_value,
    boolean_value,
    number_value,
    object_empty,
    object_value,
    property_array,
    property_boolean,
    property_number,
    property_object,
    property_object_empty,
    property_string,
    string_value,
)


@pytest.mark.parametrize(
    "code, member",
    [
        (2, ElementType.BOOLEAN),
        (3, ElementType.NUMBER),
        (4, ElementType.STRING),
        (6, ElementType.OBJECT),
    ],
)
def test_element_type_codes_coerce(code, member):
    assert Element(type=code).type is member


def test_updated_status_code():
    element = property_number("x", 1)
    element.mark_updated()
    assert element.status == 1
    element.clear_status()
    assert element.status == 0


def test_set_string_at_limit_kept_whole():
    element = property_string("name", "")
    element.set_string("b" * PROPERTY_MAX_SIZE)
    assert element.value == "b" * PROPERTY_MAX_SIZE


def test_has_property():
    assert property_string("name", "Adam").has_property()
    assert not string_value("Adam").has_property()


def test_status_transitions():
    element = property_number("x", 1)
    assert not element.is_updated()
    element.mark_updated()
    assert element.is_updated()
    element.clear_status()
    assert element.status is ElementStatus.NOT_UPDATED


def test_set_bool_marks_updated():
    element = property_boolean("flag", False)
    element.set_bool(True)
    assert element.value is True
    assert element.is_updated()


def test_set_number_stores_float():
    element = number_value(0)
    element.set_number(56)
    assert element.value == 56.0
    assert isinstance(element.value, float)
    assert element.is_updated()


def test_set_string_truncates_to_limit():
    element = property_string("name", "")
    element.set_string("a" * (PROPERTY_MAX_SIZE + 10))
    assert element.value == "a" * PROPERTY_MAX_SIZE
    assert element.is_updated()


def test_set_string_short_value_kept():
    element = property_string("name", "Adam")
    element.set_string("Eve")
    assert element.value == "Eve"


def test_set_null_zeroes_value():
    element = Element(name="n", type=ElementType.NULL, value=7)
    element.set_null()
    assert element.value == 0
    assert element.is_updated()


def test_array_value_len_matches_children():
    children = [number_value(1), number_value(2)]
    element = property_array("position", children)
    assert element.value_len == len(children)
    assert element.type is ElementType.ARRAY
    assert element.name == "position"
    assert array_value(children).value_len == len(children)


def test_object_value_len_matches_children():
    children = [property_string("city", "X")]
    assert object_value(children).value_len == len(children)
    assert property_object("addr", children).type is ElementType.OBJECT


def test_empty_objects_have_one_slot_and_no_children():
    for element in (object_empty(), property_object_empty("meta")):
        assert element.elements is None
        assert element.value_len == 1
        assert element.type is ElementType.OBJECT


def test_boolean_value_coerces():
    assert boolean_value(1).value is True


def test_type_coerced_from_int():
    element = Element(type=4, value="x")
    assert element.type is ElementType.STRING


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Element(type=99)


def test_name_too_long_rejected():
    with pytest.raises(ValueError):
        property_string("n" * PROPERTY_MAX_SIZE, "x")


def test_name_at_limit_accepted():
    name = "n" * (PROPERTY_MAX_SIZE - 1)
    assert property_string(name, "x").name == name