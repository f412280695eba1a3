"""Byte-buffer helpers for searching, comparing, copying and filling."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(buf, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length for {what}: {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds {what} of size {len(buf)}")


def memchr(data, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` in ``data[:n]``, or None."""
    _check_span(data, n, "data")
    target = c & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first unequal bytes in the first ``n``; 0 if none."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    Overlapping ranges are handled correctly.
    """
    if min(dst, src) < 0:
        raise ValueError("offsets must not be negative")
    _check_span(buf, src + n, "buffer")
    _check_span(buf, dst + n, "buffer")
    if dst != src:
        buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c``; ``n <= 0`` fills nothing."""
    if n > 0:
        _check_span(buf, n, "buffer")
        buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(total)


def clear_rows(rows: list) -> int:
    """Release the rows before the first None and empty the list.

    Returns how many rows were released.
    """
    released = sum(1 for _ in takewhile(lambda row: row is not None, rows))
    rows.clear()
    return released