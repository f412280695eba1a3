"""String helpers: bounded search, comparison, copying, trimming and splitting.

Functions taking a character accept a one-character string or an integer
code.  The code 0 stands for the end of the text, so searching for it finds
the position just past the last character.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]

_END = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c))


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strdlen(s: str, c: CharLike) -> int:
    """Number of characters of ``s`` before the first ``c`` or the end."""
    index = s.find(_char(c))
    return len(s) if index < 0 else index


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the end marker (code 0) gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _END:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the end marker (code 0) gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _END:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first unequal characters,
    a shorter text counting as ending in code 0; 0 when they agree.
    """
    _check_size(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_END), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in ``haystack[:n]``, or None.

    An empty needle is found at index 0.
    """
    _check_size(n, "n")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the resulting destination text and ``len(src)``.  A size of 0
    leaves ``dst`` untouched.
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within ``size`` slots, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had.  When ``dst`` already fills the space, nothing is appended and
    the length reported is ``size + len(src)``.
    """
    _check_size(size, "size")
    if size > len(dst):
        room = size - len(dst) - 1
        return dst + src[:room], len(dst) + len(src)
    return dst, size + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start`` on.

    A start past the end or a zero length gives the empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin takes two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim takes two strings")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    return [part for part in s.split(_char(sep)) if part]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results.

    ``func`` is called from the last character to the first.
    """
    if func is None:
        raise TypeError("strmapi needs a function")
    mapped = [_char(func(index, ch)) for index, ch in reversed(list(enumerate(s)))]
    return "".join(reversed(mapped))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on each character in order.

    A character returned by ``func`` replaces the one it was given; None
    keeps it.  Returns the resulting text.
    """
    if func is None:
        raise TypeError("striteri needs a function")
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else _char(replacement))
    return "".join(result)