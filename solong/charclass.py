"""Character classification and integer/text conversion helpers.

Classification follows the plain ASCII rules.  Functions taking a character
accept either an integer code or a one-character string.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_MIN_DIGITS = "2147483648"

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value + 2**31) % 2**32 - 2**31


def _mod10_toward_zero(value: int) -> int:
    remainder = abs(value) % 10
    return -remainder if value < 0 else remainder


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space and the control characters tab to carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a signed 32-bit value.

    Leading whitespace is skipped.  A sign counts only when a digit follows
    it.  Parsing stops at the first non-digit.  When the value runs past the
    32-bit range the result is -1 for a positive number and 0 for a negative
    one.
    """
    rest = text.lstrip("".join(chr(code) for code in (9, 10, 11, 12, 13, 32)))
    sign = 1
    if len(rest) > 1 and rest[0] in "+-" and is_digit(rest[1]):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if (
        sign == -1
        and rest.startswith(_INT_MIN_DIGITS)
        and (len(rest) == len(_INT_MIN_DIGITS) or not is_digit(rest[10]))
    ):
        return INT_MIN
    value = 0
    for ch in takewhile(is_digit, rest):
        digit = ord(ch) - 48
        value = _wrap32(value * 10 + digit)
        if _mod10_toward_zero(value) != digit:
            return 0 if sign == -1 else -1
    return _wrap32(value * sign)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return f"{n:d}"