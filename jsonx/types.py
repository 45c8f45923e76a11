"""Core types describing a JSON layout bound to Python values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence

PROPERTY_MAX_SIZE = 50
"""Size of a property name field, terminator included."""

MAX_NESTING_LEVEL = 3
"""Reserved nesting limit; not enforced."""


class ElementType(IntEnum):
    """Kind of JSON value an element describes."""

    INVALID = 0
    NULL = 1
    BOOLEAN = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class ElementStatus(IntEnum):
    """Whether an element received a value during parsing."""

    NOT_UPDATED = 0
    UPDATED = 1


class Format(IntEnum):
    """Output layout for serialization."""

    MINIFIED = 0
    FORMATTED = 1


class ParseMode(IntEnum):
    """How missing properties are treated while parsing."""

    RELAXED = 0
    STRICT = 1


@dataclass
class Element:
    """One node of a JSON layout.

    Scalar elements carry their value in ``value``; arrays and objects carry
    their children in ``elements``. ``value_len`` is the number of children.
    """

    name: str = ""
    type: ElementType = ElementType.INVALID
    value: Any = None
    elements: Optional[list[Element]] = None
    value_len: Optional[int] = None
    status: ElementStatus = ElementStatus.NOT_UPDATED

    def __post_init__(self) -> None:
        if len(self.name) >= PROPERTY_MAX_SIZE:
            raise ValueError(
                f"property name longer than {PROPERTY_MAX_SIZE - 1} characters: {self.name!r}"
            )
        self.type = ElementType(self.type)
        if self.elements is not None:
            self.elements = list(self.elements)
        if self.value_len is None:
            self.value_len = len(self.elements) if self.elements is not None else 0

    def has_property(self) -> bool:
        """Return True if the element has a non-empty property name."""
        return bool(self.name)

    def is_updated(self) -> bool:
        return self.status is ElementStatus.UPDATED

    def mark_updated(self) -> None:
        self.status = ElementStatus.UPDATED

    def clear_status(self) -> None:
        self.status = ElementStatus.NOT_UPDATED

    def set_bool(self, value: bool) -> None:
        self.value = bool(value)
        self.mark_updated()

    def set_number(self, value: float) -> None:
        self.value = float(value)
        self.mark_updated()

    def set_string(self, value: str) -> None:
        """Store a string, truncated to the property size limit."""
        self.value = value[:PROPERTY_MAX_SIZE]
        self.mark_updated()

    def set_null(self) -> None:
        self.value = 0
        self.mark_updated()


def string_value(value: str) -> Element:
    """Unnamed string element, used as an array item."""
    return Element(type=ElementType.STRING, value=value)


def boolean_value(value: bool) -> Element:
    return Element(type=ElementType.BOOLEAN, value=bool(value))


def number_value(value: float) -> Element:
    return Element(type=ElementType.NUMBER, value=float(value))


def array_value(elements: Sequence[Element]) -> Element:
    return Element(type=ElementType.ARRAY, elements=list(elements))


def object_value(elements: Sequence[Element]) -> Element:
    return Element(type=ElementType.OBJECT, elements=list(elements))


def object_empty() -> Element:
    """Unnamed object element with no children."""
    return Element(type=ElementType.OBJECT, elements=None, value_len=1)


def property_string(name: str, value: str) -> Element:
    return Element(name=name, type=ElementType.STRING, value=value)


def property_boolean(name: str, value: bool) -> Element:
    return Element(name=name, type=ElementType.BOOLEAN, value=bool(value))


def property_number(name: str, value: float) -> Element:
    return Element(name=name, type=ElementType.NUMBER, value=float(value))


def property_array(name: str, elements: Sequence[Element]) -> Element:
    return Element(name=name, type=ElementType.ARRAY, elements=list(elements))


def property_object(name: str, elements: Sequence[Element]) -> Element:
    return Element(name=name, type=ElementType.OBJECT, elements=list(elements))


def property_object_empty(name: str) -> Element:
    return Element(name=name, type=ElementType.OBJECT, elements=None, value_len=1)