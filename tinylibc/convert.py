"""Conversions between numbers and their decimal text form."""

from __future__ import annotations

_ATOI_SPACE = " \t\n\r\f\v"
_ATOF_SPACE = " \t"
_MAX_FRACTION_STEPS = 8


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def itoa(num: int) -> str:
    """Return the decimal text of an integer; floats are truncated toward zero."""
    value = int(num)
    negative = value < 0
    digits = []
    value = abs(value)
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
        if value == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def ftoa(num: float) -> str:
    """Return the text of a float as integer part, a dot and up to nine fraction digits.

    The fraction is scaled by ten until it has no fractional part left (at most
    eight times) and is then printed as an integer, so negative values print
    their fraction with its own sign.
    """
    int_part = int(num)
    frac_part = num - int_part
    for _ in range(_MAX_FRACTION_STEPS):
        scaled = frac_part * 10
        if int(scaled) == scaled:
            break
        frac_part = scaled
    frac_part *= 10
    return f"{itoa(int_part)}.{itoa(int(frac_part))}"


def atoi(text: str) -> int:
    """Parse a leading, optionally signed, decimal integer; return 0 if there is none."""
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not _is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def atof(text: str) -> float:
    """Parse a leading decimal number.

    Only spaces and tabs are skipped first. Every dot switches to fraction
    digits, so the digits after the first dot all count as decimals.
    """
    rest = text.lstrip(_ATOF_SPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]

    value = 0.0
    decimal = False
    fraction_digits = 0
    for ch in rest:
        if ch == ".":
            decimal = True
            continue
        if not _is_digit(ch):
            break
        value = value * 10.0 + (ord(ch) - ord("0"))
        if decimal:
            fraction_digits += 1

    for _ in range(fraction_digits):
        value /= 10.0
    return sign * value