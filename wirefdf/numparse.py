"""Lenient integer parsing with clamping on overflow."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_SPACES = frozenset("\t\n\v\f\r ")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _skip_space_and_sign(text: str) -> tuple[int, int]:
    """Return the index after leading blanks and a sign, and the sign."""
    i = 0
    while i < len(text) and text[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    return i, sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer, clamping to the 32-bit range."""
    i, sign = _skip_space_and_sign(text)
    limit = INT_MAX if sign == 1 else -INT_MIN
    result = 0
    while i < len(text) and _is_digit(text[i]):
        result = result * 10 + ord(text[i]) - ord("0")
        if result > limit:
            return INT_MAX if sign == 1 else INT_MIN
        i += 1
    return result * sign


def _digit_value(c: str, base: int) -> int | None:
    if _is_digit(c):
        value = ord(c) - ord("0")
    elif _is_alpha(c):
        value = ord(c.lower()) - ord("a") + 10
    else:
        return None
    return value if value < base else None


def strtol(text: str, base: int = 10) -> int:
    """Parse a leading integer in ``base``, clamping to the 64-bit range.

    With base 0 a leading ``0`` selects octal, or hexadecimal when an ``x``
    follows; the ``x`` itself is not consumed. With base 16 a ``0x`` prefix
    is skipped.
    """
    i, sign = _skip_space_and_sign(text)
    if base == 0:
        if text.startswith("0", i):
            i += 1
            base = 16 if text[i : i + 1].lower() == "x" else 8
        else:
            base = 10
    elif base == 16 and text.startswith("0", i) and text[i + 1 : i + 2].lower() == "x":
        i += 2
    result = 0
    while i < len(text):
        digit = _digit_value(text[i], base)
        if digit is None:
            break
        if result > (LONG_MAX - digit) // base:
            return LONG_MAX if sign == 1 else LONG_MIN
        result = result * base + digit
        i += 1
    return result * sign