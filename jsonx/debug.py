"""Human-readable dumps of element layouts."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from jsonx.types import Element, ElementType


def _describe_value(element: Element) -> str:
    kind = element.type
    value = element.value
    if kind is ElementType.STRING:
        return f'"{"" if value is None else value}"'
    if kind is ElementType.NUMBER:
        return "(no value)" if value is None else str(int(value))
    if kind is ElementType.BOOLEAN:
        return "true" if value else "false"
    if kind in (ElementType.ARRAY, ElementType.OBJECT):
        return f"[nested {element.value_len} elements]"
    return "(type unsupported for print)"


def format_structure(elements: Sequence[Element]) -> str:
    """Return one line per element: index, name, update status and value."""
    lines = []
    for index, element in enumerate(elements):
        status = "updated" if element.is_updated() else "not updated"
        name = element.name or "<no name>"
        lines.append(f"[{index:02d}] {name} ({status}): {_describe_value(element)}\n")
    return "".join(lines)


def dump_structure(elements: Sequence[Element], stream: Optional[TextIO] = None) -> None:
    """Write the description of ``elements`` to ``stream`` (stdout by default)."""
    target = sys.stdout if stream is None else stream
    target.write(format_structure(elements))