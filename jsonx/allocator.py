"""Fixed-buffer bump allocator for environments without a general heap."""

from __future__ import annotations

from typing import Union

HEADER_SIZE = 24
"""Bytes reserved at the start of the buffer for the allocator's bookkeeping."""


class AllocationError(MemoryError):
    """Raised when a block cannot be carved from the pool."""


def align4(size: int) -> int:
    """Round ``size`` up to the next multiple of four."""
    return (size + 3) & ~3


class StaticAllocator:
    """Hands out consecutive blocks of a single buffer.

    The first ``align4(HEADER_SIZE)`` bytes of the buffer are reserved; the
    rest forms the pool. Blocks are never freed individually: ``reset``
    reclaims the whole pool at once.
    """

    def __init__(self, buffer: Union[int, bytearray, memoryview]) -> None:
        if isinstance(buffer, int):
            if buffer < 0:
                raise ValueError("buffer size must not be negative")
            view = memoryview(bytearray(buffer))
        else:
            view = memoryview(buffer)
            if view.readonly:
                raise TypeError("allocator buffer must be writable")
            view = view.cast("B")
        header = align4(HEADER_SIZE)
        if len(view) < header:
            raise ValueError(
                f"buffer of {len(view)} bytes is smaller than the {header}-byte header"
            )
        self._pool = view[header:]
        self.pool_size = len(self._pool)
        self.pool_offset = 0
        self.released_blocks = 0

    @property
    def available(self) -> int:
        """Bytes still free in the pool."""
        return self.pool_size - self.pool_offset

    def malloc(self, size: int) -> memoryview:
        """Return a writable block of ``size`` bytes from the pool."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if size == 0:
            raise AllocationError("cannot allocate zero bytes")
        aligned = align4(size)
        if self.pool_offset + aligned > self.pool_size:
            raise AllocationError(
                f"pool exhausted: {aligned} bytes requested, {self.available} available"
            )
        start = self.pool_offset
        self.pool_offset += aligned
        return self._pool[start:start + size]

    def free(self, block: object) -> None:
        """Record a released block; its space returns only on ``reset``.

        ``None`` is accepted and ignored.
        """
        if block is None:
            return
        self.released_blocks += 1

    def reset(self) -> None:
        """Make the whole pool available again."""
        self.pool_offset = 0
        self.released_blocks = 0