"""Demonstration: serialize a small layout and parse JSON back into it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from jsonx.debug import dump_structure
from jsonx.parser import JsonXError, Parser, json_to_struct, struct_to_json
from jsonx.types import Format, ParseMode, number_value, property_array, property_string
from jsonx.version import get_version_string

USER_BUFFER_SIZE = 256
SAMPLE_INPUT = '{"name":"Eve","position":[56,78]}'


def run_example(stream: Optional[TextIO] = None) -> bool:
    """Run the demonstration, writing its report to ``stream``; return success."""
    out = sys.stdout if stream is None else stream
    out.write(f"{get_version_string()}\n")

    layout = [
        property_string("name", "Adam"),
        property_array("position", [number_value(12), number_value(34)]),
    ]

    with Parser() as parser:
        try:
            buffer = parser.alloc_memory(USER_BUFFER_SIZE)
        except (JsonXError, MemoryError):
            return False
        try:
            formatted = struct_to_json(layout, len(buffer), Format.FORMATTED)
            out.write(f"Formatted JSON: {formatted}\n")
            minified = struct_to_json(layout, len(buffer), Format.MINIFIED)
            out.write(f"Minified JSON: {minified}\n")
        except JsonXError:
            return False
        finally:
            parser.free_memory(buffer)

        try:
            json_to_struct(SAMPLE_INPUT, layout, ParseMode.STRICT)
        except JsonXError:
            return False

    dump_structure(layout, out)
    name, position = layout
    coords = position.elements or []
    out.write(f"test_struct.name = {name.value}\n")
    for index, coord in enumerate(coords):
        out.write(f"test_struct.coords[{index}] = {int(coord.value)}\n")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    return 0 if run_example() else 1


if __name__ == "__main__":
    sys.exit(main())