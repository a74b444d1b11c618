"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from sollong.chars import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a code or a 1-char string."""
    if isinstance(c, int):
        c = chr(c)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` as it is."""
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal."""
    _target(stream).write(itoa(n))