"""Helpers that build common array layouts from plain Python sequences."""

from __future__ import annotations

from typing import Iterable, Sequence

from jsonx.types import Element, number_value, object_value, string_value


def number_array(values: Iterable[float]) -> list[Element]:
    """Return unnamed number elements, one per value, for use as array items."""
    return [number_value(value) for value in values]


def string_array(values: Iterable[str]) -> list[Element]:
    """Return unnamed string elements, one per value, for use as array items."""
    return [string_value(value) for value in values]


def object_array(*args: Sequence[Element]) -> list[Element]:
    """Return unnamed object elements, one per group of child elements."""
    return [object_value(children) for children in args]