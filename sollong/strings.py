"""String helpers: searching, comparing, slicing, joining and splitting."""

from __future__ import annotations

from typing import Callable, Optional

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return a character given either as a code or as a 1-char string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def strlen(text: Optional[str]) -> int:
    """Length of ``text``; a missing string has length 0."""
    return 0 if text is None else len(text)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def strchr(text: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``text``.

    Searching for NUL finds the end of the string. Returns None when absent.
    """
    ch = _char(c)
    found = text.find(ch)
    if found >= 0:
        return found
    return len(text) if ch == _NUL else None


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``text``.

    Searching for NUL finds the end of the string. Returns None when absent.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    found = text.rfind(ch)
    return found if found >= 0 else None


def strcmp(first: str, second: str) -> int:
    """Difference of the codes at the first position where the strings differ.

    The end of a string counts as code 0, so 0 means the strings are equal.
    """
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(second) > len(first):
        return -ord(second[len(first)])
    return 0


def strncmp(first: str, second: str, length: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``length`` characters."""
    if length < 0:
        raise ValueError("strncmp: negative length")
    if length == 0:
        return 0
    return strcmp(first[:length], second[:length])


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("strlcpy: negative size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` is zero or smaller than ``dest``, ``dest`` is left as is and
    the reported length is ``len(src)`` plus ``size``.
    """
    if size < 0:
        raise ValueError("strlcat: negative size")
    if size == 0:
        return dest, len(src)
    if size < len(dest):
        return dest, len(src) + size
    room = max(0, size - len(dest) - 1)
    return dest + src[:room], len(src) + len(dest)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    After a partial match fails the scan restarts at the failing character,
    not one past where the partial match began. Returns the start index of
    the match or None. An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("strnstr: negative length")
    if not needle:
        return 0
    pos = matched = 0
    remaining = length
    while pos < len(haystack) and matched < len(needle) and remaining:
        if haystack[pos] == needle[matched]:
            matched += 1
        elif matched:
            matched = 0
            continue
        pos += 1
        remaining -= 1
    if matched == len(needle):
        return pos - matched
    return None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``.

    A start past the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: negative start or length")
    if start > len(text):
        return ""
    return text[start:start + length]