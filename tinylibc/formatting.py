"""A small ``printf``/``scanf`` pair supporting the ``%s``, ``%d``, ``%f`` and ``%c`` conversions."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Optional, TextIO, Union

from .convert import atof, atoi, ftoa, itoa

_NUL = "\0"
_CONVERSION = re.compile(r"%([sdfc])")
_NULL_TEXT = "(null)"


def _format_string(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    return str(value).partition(_NUL)[0]


def _format_char(value: Union[int, str]) -> str:
    ch = chr(value & 0xFF) if isinstance(value, int) else str(value)[:1]
    return "" if ch == _NUL else ch


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "s": _format_string,
    "d": lambda value: itoa(int(value)),
    "f": lambda value: ftoa(float(value)),
    "c": _format_char,
}

_READERS: dict[str, Callable[[str], Any]] = {
    "s": lambda content: content,
    "d": atoi,
    "f": atof,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Text after a NUL character is ignored. A ``%`` not followed by one of
    ``s``, ``d``, ``f`` or ``c`` is kept as it is; surplus arguments are ignored.
    """
    values = iter(args)

    def convert(match: re.Match[str]) -> str:
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        return _CONVERTERS[match.group(1)](value)

    return _CONVERSION.sub(convert, fmt.partition(_NUL)[0])


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> None:
    """Write the formatted text to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_printf(fmt, *args))
    out.flush()


def scanf(spec: str, stream: Optional[TextIO] = None) -> Any:
    """Read one line from ``stream`` and convert it as ``spec`` says.

    ``%s`` gives the line itself, ``%d`` an integer and ``%f`` a float. A spec
    that does not start with ``%`` reads nothing and gives None.
    """
    if not spec.startswith("%"):
        return None
    reader = _READERS.get(spec[1:2])
    if reader is None:
        raise ValueError("Invalid or not support type")
    source = sys.stdin if stream is None else stream
    content = source.readline().rstrip("\r\n")
    return reader(content)