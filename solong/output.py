"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from solong.charclass import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(int(c))
    _target(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; None writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    _target(stream).write(itoa(n))