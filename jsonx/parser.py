"""Conversion between JSON text and element layouts, plus a memory context."""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, Optional, Sequence, Union

from jsonx.allocator import StaticAllocator
from jsonx.types import Element, ElementType, Format, ParseMode

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonXError(ValueError):
    """Raised when a layout cannot be serialized or JSON cannot be mapped onto it."""


class _Missing:
    """Marker for a property that is absent from a JSON object."""


_MISSING = _Missing()


class _JsonObject:
    """A JSON object that keeps member order and duplicate keys."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: Iterable[tuple[str, Any]]) -> None:
        self.pairs = list(pairs)

    def lookup(self, key: str) -> Any:
        """Return the first member named ``key``, or the missing marker."""
        for name, value in self.pairs:
            if name == key:
                return value
        return _MISSING

    def values(self) -> list[Any]:
        return [value for _, value in self.pairs]


class Parser:
    """Memory context for callers that want buffers managed by the library.

    With no pool, blocks come from the general heap. With a pool (a byte
    count, a writable buffer or a ready ``StaticAllocator``), blocks are
    carved from that fixed buffer and cannot be released one by one.
    """

    def __init__(
        self, pool: Union[None, int, bytearray, memoryview, StaticAllocator] = None
    ) -> None:
        if pool is None or isinstance(pool, StaticAllocator):
            self._allocator: Optional[StaticAllocator] = pool
        else:
            try:
                self._allocator = StaticAllocator(pool)
            except ValueError as exc:
                raise JsonXError(str(exc)) from exc
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def allocator(self) -> Optional[StaticAllocator]:
        """The fixed-buffer allocator in use, or None in heap mode."""
        return self._allocator

    def alloc_memory(self, size: int) -> Union[bytearray, memoryview]:
        """Return a writable block of ``size`` bytes."""
        if self._closed:
            raise JsonXError("parser is closed")
        if self._allocator is not None:
            return self._allocator.malloc(size)
        if size < 0:
            raise ValueError("allocation size must not be negative")
        return bytearray(size)

    def free_memory(self, block: object) -> None:
        """Release a block obtained from ``alloc_memory``."""
        if self._closed or block is None:
            return
        if self._allocator is not None:
            self._allocator.free(block)

    def close(self) -> None:
        """Release the context; further allocations fail."""
        self._closed = True

    def __enter__(self) -> Parser:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Layout -> JSON
# ---------------------------------------------------------------------------


def _scalar_node(element: Element) -> Any:
    kind = element.type
    if kind is ElementType.STRING:
        return _MISSING if element.value is None else str(element.value)
    if element.value is None:
        label = element.name or "<no name>"
        raise JsonXError(f"element {label} has no value")
    if kind is ElementType.BOOLEAN:
        return bool(element.value)
    return float(element.value)


def _node(element: Element) -> Any:
    kind = element.type
    if kind in (ElementType.STRING, ElementType.BOOLEAN, ElementType.NUMBER):
        return _scalar_node(element)
    if kind is ElementType.OBJECT:
        return _container(element, is_array=False)
    if kind is ElementType.ARRAY:
        return _container(element, is_array=True)
    return _MISSING


def _container(element: Element, is_array: bool) -> Any:
    if not element.value_len:
        label = element.name or "<no name>"
        raise JsonXError(f"container {label} has no elements")
    if element.elements is None:
        return [] if is_array else _JsonObject([])
    return _build(element.elements[: element.value_len], is_array)


def _build(elements: Sequence[Element], is_array: bool) -> Any:
    if not elements:
        raise JsonXError("no elements to serialize")
    members: list[Any] = []
    for element in elements:
        node = _node(element)
        if node is _MISSING:
            continue
        members.append(node if is_array else (element.name, node))
    return members if is_array else _JsonObject(members)


def _quote(text: str) -> str:
    parts = ['"']
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 32:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _format_number(number: float) -> str:
    if math.isnan(number) or math.isinf(number):
        return "null"
    if number.is_integer() and _INT_MIN <= number <= _INT_MAX:
        return str(int(number))
    text = "%1.15g" % number
    if float(text) != number:
        text = "%1.17g" % number
    return text


def _render(node: Any, formatted: bool, depth: int) -> str:
    if isinstance(node, _JsonObject):
        inner = depth + 1
        parts = ["{"]
        if formatted:
            parts.append("\n")
        last = len(node.pairs) - 1
        for index, (key, value) in enumerate(node.pairs):
            if formatted:
                parts.append("\t" * inner)
            parts.append(_quote(key))
            parts.append(":\t" if formatted else ":")
            parts.append(_render(value, formatted, inner))
            if index != last:
                parts.append(",")
            if formatted:
                parts.append("\n")
        if formatted:
            parts.append("\t" * (inner - 1))
        parts.append("}")
        return "".join(parts)
    if isinstance(node, list):
        separator = ", " if formatted else ","
        return "[" + separator.join(_render(item, formatted, depth + 1) for item in node) + "]"
    if isinstance(node, bool):
        return "true" if node else "false"
    if node is None:
        return "null"
    if isinstance(node, str):
        return _quote(node)
    return _format_number(float(node))


def struct_to_json(
    elements: Sequence[Element],
    buffer_size: Optional[int] = None,
    format: Format = Format.MINIFIED,
) -> str:
    """Serialize a layout as a JSON object.

    ``buffer_size`` mirrors a fixed output buffer: the encoded text plus a
    terminator must fit in it, otherwise ``JsonXError`` is raised.
    """
    document = _build(list(elements), is_array=False)
    text = _render(document, Format(format) is not Format.MINIFIED, 0)
    if buffer_size is not None and len(text.encode("utf-8")) + 1 > buffer_size:
        raise JsonXError(
            f"output of {len(text.encode('utf-8'))} bytes does not fit a {buffer_size}-byte buffer"
        )
    return text


# ---------------------------------------------------------------------------
# JSON -> layout
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise JsonXError(f"invalid JSON literal {name}")


_DECODER = json.JSONDecoder(
    object_pairs_hook=_JsonObject, parse_constant=_reject_constant, strict=False
)


def _parse(text: Union[str, bytes]) -> Any:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonXError(f"input is not valid UTF-8: {exc}") from exc
    position = 1 if text.startswith("\ufeff") else 0
    while position < len(text) and ord(text[position]) <= 32:
        position += 1
    try:
        value, _ = _DECODER.raw_decode(text, position)
    except json.JSONDecodeError as exc:
        raise JsonXError(f"invalid JSON: {exc}") from exc
    return value


def _is_number(node: Any) -> bool:
    return isinstance(node, (int, float)) and not isinstance(node, bool)


def _fill(node: Any, elements: Sequence[Element], mode: ParseMode) -> None:
    for element in elements:
        if element.name:
            found = node.lookup(element.name) if isinstance(node, _JsonObject) else _MISSING
        else:
            found = node
        if found is _MISSING:
            if mode is ParseMode.STRICT:
                raise JsonXError(f"property {element.name!r} not found")
            continue

        kind = element.type
        if kind is ElementType.NULL:
            if found is None:
                element.set_null()
            else:
                element.clear_status()
        elif kind is ElementType.BOOLEAN:
            if isinstance(found, bool):
                element.set_bool(found)
            else:
                element.clear_status()
        elif kind is ElementType.NUMBER:
            if _is_number(found):
                element.set_number(found)
            else:
                element.clear_status()
        elif kind is ElementType.STRING:
            if isinstance(found, str):
                element.set_string(found)
            else:
                element.clear_status()
        elif kind is ElementType.OBJECT:
            if isinstance(found, _JsonObject):
                children = (element.elements or [])[: element.value_len]
                _fill(found, children, mode)
                element.mark_updated()
            else:
                element.clear_status()
        elif kind is ElementType.ARRAY:
            if isinstance(found, list):
                items = found
            elif isinstance(found, _JsonObject):
                items = found.values()
            else:
                items = []
            element.value_len = len(items)
            if element.elements:
                for item, child in zip(items, element.elements):
                    _fill(item, [child], mode)
                    child.mark_updated()
            element.mark_updated()


def json_to_struct(
    text: Union[str, bytes],
    elements: Sequence[Element],
    mode: ParseMode = ParseMode.RELAXED,
) -> None:
    """Parse JSON text and store its values into the layout in place.

    In strict mode a property missing from the input raises ``JsonXError``;
    in relaxed mode it is left untouched.
    """
    document = _parse(text)
    _fill(document, list(elements), ParseMode(mode))