"""Byte-buffer helpers operating on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional


def _check(buf_len: int, offset: int, length: int, what: str) -> None:
    if length < 0 or offset < 0:
        raise ValueError(f"{what}: negative offset or length")
    if offset + length > buf_len:
        raise ValueError(f"{what}: range {offset}..{offset + length} exceeds buffer of {buf_len}")


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf`` in place and return it."""
    _check(len(buf), 0, length, "bzero")
    buf[:length] = bytes(length)
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    return bytearray(count * size)


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the byte ``c``."""
    _check(len(buf), 0, length, "memset")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def memcpy(dest: bytearray, src: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check(len(src), 0, length, "memcpy source")
    _check(len(dest), 0, length, "memcpy destination")
    dest[:length] = src[:length]
    return dest


def memccpy(dest: bytearray, src: bytes, c: int, length: int) -> Optional[int]:
    """Copy bytes until ``c`` has been copied or ``length`` bytes are done.

    Returns the index in ``dest`` just past the copied ``c``, or None when
    ``c`` was not among the first ``length`` bytes.
    """
    target = c & 0xFF
    window = src[:length]
    stop = bytes(window).find(target)
    count = length if stop < 0 else stop + 1
    _check(len(src), 0, count, "memccpy source")
    _check(len(dest), 0, count, "memccpy destination")
    dest[:count] = src[:count]
    return None if stop < 0 else count


def memmove(buf: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to ``dest``.

    The ranges may overlap.
    """
    _check(len(buf), src, length, "memmove source")
    _check(len(buf), dest, length, "memmove destination")
    buf[dest:dest + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes, c: int, length: int) -> Optional[int]:
    """Index of the first byte ``c`` among the first ``length`` bytes, or None."""
    _check(len(data), 0, length, "memchr")
    found = bytes(data[:length]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair."""
    _check(len(first), 0, length, "memcmp first")
    _check(len(second), 0, length, "memcmp second")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0