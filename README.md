# jsonx

`jsonx` maps a JSON document onto a declared layout of elements, and renders that
layout back as JSON. You describe the shape of your data once, as a list of
`Element` objects. Each one has a property name, a type (`ElementType`), a value
and an update status (`ElementStatus`). The same layout then serves two jobs:

* **Serialize**: `jsonx.parser.struct_to_json(elements, buffer_size=None, format=Format.MINIFIED)`
  returns the layout as JSON text, minified or formatted (`Format.MINIFIED` /
  `Format.FORMATTED`). If you give `buffer_size`, the encoded text plus one
  terminator byte must fit in it, or `JsonXError` is raised.
* **Parse**: `jsonx.parser.json_to_struct(text, elements, mode=ParseMode.RELAXED)`
  reads a JSON document (`str` or UTF-8 `bytes`) and stores its values into the
  layout in place. Each element that receives a value is marked as updated.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Describing a layout

The helpers in `jsonx.types` build elements:

* `property_string`, `property_number` and `property_boolean` create named scalar
  properties.
* `property_array` and `property_object` create named containers holding nested
  elements; `property_object_empty` creates a named object with no children.
* `string_value`, `number_value`, `boolean_value`, `array_value`, `object_value`
  and `object_empty` create unnamed elements, as used for array items.

`jsonx.user` has shortcuts that return lists of unnamed items:

* `number_array(values)` gives one number element per value.
* `string_array(values)` gives one string element per value.
* `object_array(*groups)` gives one object element per list of child elements.

```python
from jsonx.types import Format, ParseMode, property_array, property_string
from jsonx.user import number_array
from jsonx.parser import json_to_struct, struct_to_json

layout = [
    property_string("name", "Adam"),
    property_array("position", number_array([12.0, 34.0])),
]

print(struct_to_json(layout, 256, Format.FORMATTED))
print(struct_to_json(layout, 256, Format.MINIFIED))   # {"name":"Adam","position":[12,34]}

json_to_struct('{"name":"Eve","position":[56,78]}', layout, ParseMode.STRICT)
assert layout[0].value == "Eve" and layout[0].is_updated()
```

`Element` also offers `has_property`, `is_updated`, `mark_updated`,
`clear_status`, `set_bool`, `set_number`, `set_string` and `set_null`.

## Parse modes and typing rules

* `ParseMode.STRICT` raises `JsonXError` when a declared property is missing from
  the document.
* `ParseMode.RELAXED` skips missing properties and leaves those elements as they
  were.

When a scalar or object property is present but holds a JSON value of the wrong
type, its status is cleared and its value is left alone. An array element takes
its item count (`value_len`) from the document and fills its declared children
in order.

Text that is not valid JSON always raises `JsonXError`.

## Limits

* Property names must be shorter than 50 characters; longer names raise
  `ValueError` when the element is created.
* Strings read from a document are truncated to 50 characters.
* Numbers are stored as `float`. Integral values in the 32-bit range are written
  without a fractional part; NaN and infinity are written as `null`.
* Serializing a container with no elements raises `JsonXError`.

## Other pieces

* `jsonx.parser.Parser` is a context manager that hands out writable buffers
  through `alloc_memory` and takes them back through `free_memory`. With no
  argument the buffers come from the general heap; given a byte count, a writable
  buffer or a `StaticAllocator`, they are carved from that fixed pool. After
  `close` (or leaving the `with` block) further allocations raise `JsonXError`.
* `jsonx.allocator.StaticAllocator` is a fixed-size bump allocator. It reserves a
  small header at the start of its buffer, rounds each request up to a multiple
  of 4 with `align4`, never frees blocks individually (`free` only records the
  release), reclaims the whole pool with `reset`, and raises `AllocationError`
  when the pool is exhausted or a zero-byte block is requested.
* `jsonx.debug.format_structure` renders a layout one line per element, for
  example `[00] name (updated): "Eve"`; `dump_structure` writes that text to a
  stream (stdout by default).
* `jsonx.version.get_version_string` returns the version banner, `JsonX v1.0.0`.

## Example program

The package includes a short demonstration. It serializes a small layout in both
formats, parses a document back into it in strict mode, and prints the result:

```
jsonx-example
```

It exits with status 0 on success and 1 on failure. The same run is available
from Python as `jsonx.example.run_example(stream)`.