"""String and byte-buffer helpers with NUL-terminated semantics.

Positions are returned as indices into the string, or None where no match is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.partition(_NUL)[0]


def strcmp_all(first: Optional[str], *args: str) -> bool:
    """Return True if every further string equals ``first``; False if ``first`` is None."""
    if first is None:
        return False
    head = _terminated(first)
    return all(_terminated(other) == head for other in args)


def strcmp(a: str, b: str) -> bool:
    """Return True if both strings are equal."""
    return _terminated(a) == _terminated(b)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch or 0."""
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            return 0
    return 0


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None; the terminator is never matched."""
    text = _terminated(s)
    index = text.find(c) if c else -1
    return index if index >= 0 and c != _NUL else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for NUL gives the terminator's index. When ``c`` is absent the
    start of a non-empty string (index 0) is returned, and None for an empty one.
    """
    text = _terminated(s)
    if c == _NUL:
        return len(text)
    index = text.rfind(c) if c else -1
    if index >= 0:
        return index
    return 0 if text else None


def strstr(s: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty haystack always gives 0."""
    text = _terminated(s)
    if not text:
        return 0
    index = text.find(_terminated(needle))
    return index if index >= 0 else None


def memcpy(
    dest: Optional[bytearray], src: Optional[Union[bytes, bytearray, memoryview]], n: int
) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None or src is None or n == 0:
        return dest
    if n < 0 or n > len(dest) or n > len(src):
        raise ValueError(f"cannot copy {n} bytes between buffers of {len(src)} and {len(dest)}")
    dest[:n] = bytes(src[:n])
    return dest


def memset(buffer: Optional[bytearray], value: Union[int, str], n: int) -> Optional[bytearray]:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` truncated to a byte."""
    if buffer is None or n == 0:
        return buffer
    if n < 0 or n > len(buffer):
        raise ValueError(f"cannot set {n} bytes in a buffer of {len(buffer)}")
    byte = (ord(value) if isinstance(value, str) else value) & 0xFF
    buffer[:n] = bytes([byte]) * n
    return buffer