"""Declarative mapping between JSON documents and element layouts.

Modules: types (elements and enums), user (array helpers), parser
(serialization, parsing and the memory context), allocator (fixed-buffer
allocator), debug (layout dumps), version and example.
"""

__version__ = "1.0.0"