"""A first-fit allocator over a growable byte arena.

Pointers are integer offsets into the arena. Each block carries a header
before its payload; block sizes are rounded up to the alignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

ALIGNMENT = 16
HEADER_SIZE = 24


def _align(size: int) -> int:
    return (size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


@dataclass
class _Block:
    offset: int
    size: int
    free: bool = False

    @property
    def payload(self) -> int:
        return self.offset + HEADER_SIZE


class Heap:
    """A heap whose arena grows on demand, up to ``limit`` bytes if one is given."""

    def __init__(self, limit: Optional[int] = None) -> None:
        self._memory = bytearray()
        self._blocks: list[_Block] = []
        self._limit = limit

    def malloc(self, size: int) -> Optional[int]:
        """Allocate ``size`` bytes; None for a non-positive size or when the arena is full."""
        if size <= 0:
            return None
        size = _align(size)
        for index, block in enumerate(self._blocks):
            if block.free and block.size >= size:
                if block.size > size + HEADER_SIZE:
                    self._split(index, size)
                block.free = False
                return block.payload
        return self._request(size)

    def free(self, ptr: Optional[int]) -> None:
        """Release the block at ``ptr`` and merge neighbouring free blocks."""
        if ptr is None:
            return
        _, block = self._locate(ptr)
        block.free = True
        self._coalesce()

    def realloc(self, ptr: Optional[int], size: int) -> Optional[int]:
        """Resize the block at ``ptr``, moving it and its contents when it must grow."""
        if ptr is None:
            return self.malloc(size)
        if size < 0:
            raise ValueError(f"invalid size {size}")
        if not size:
            self.free(ptr)
            return None
        index, block = self._locate(ptr)
        if block.size >= size:
            aligned = _align(size)
            if block.size > aligned + HEADER_SIZE:
                self._split(index, aligned)
                self._coalesce()
            return ptr
        new_ptr = self.malloc(size)
        if new_ptr is not None:
            self._memory[new_ptr:new_ptr + block.size] = self._memory[ptr:ptr + block.size]
            self.free(ptr)
        return new_ptr

    def read(self, ptr: int, n: int) -> bytes:
        """Return ``n`` bytes from the start of the block at ``ptr``."""
        _, block = self._locate(ptr)
        self._check_range(block, n)
        return bytes(self._memory[ptr:ptr + n])

    def write(self, ptr: int, data: Union[bytes, bytearray]) -> None:
        """Store ``data`` at the start of the block at ``ptr``."""
        _, block = self._locate(ptr)
        self._check_range(block, len(data))
        self._memory[ptr:ptr + len(data)] = data

    def _locate(self, ptr: int) -> tuple[int, _Block]:
        for index, block in enumerate(self._blocks):
            if block.payload == ptr and not block.free:
                return index, block
        raise ValueError(f"{ptr} is not an allocated block")

    @staticmethod
    def _check_range(block: _Block, n: int) -> None:
        if n < 0 or n > block.size:
            raise ValueError(f"{n} bytes do not fit a block of {block.size}")

    def _request(self, size: int) -> Optional[int]:
        offset = len(self._memory)
        needed = offset + HEADER_SIZE + size
        if self._limit is not None and needed > self._limit:
            return None
        self._memory.extend(bytes(HEADER_SIZE + size))
        block = _Block(offset, size)
        self._blocks.append(block)
        return block.payload

    def _split(self, index: int, size: int) -> None:
        block = self._blocks[index]
        rest = _Block(block.payload + size, block.size - size - HEADER_SIZE, free=True)
        block.size = size
        self._blocks.insert(index + 1, rest)

    def _coalesce(self) -> None:
        merged: list[_Block] = []
        for block in self._blocks:
            if merged and merged[-1].free and block.free:
                merged[-1].size += HEADER_SIZE + block.size
            else:
                merged.append(block)
        self._blocks = merged