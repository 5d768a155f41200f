"""String helpers: search, compare, convert, slice, join, trim and split.

Positions are returned as indices into the string, and a search that
finds nothing returns None. A character argument may be a one-character
string or an integer code point; the NUL character stands for the end
of the string, as a terminator would.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

from .chars import is_digit

CharLike = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"
_LONG_MAX = 2**63 - 1
_INT_BITS = 32


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _wrap_int(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _difference(s1: str, s2: str) -> int:
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL yields ``len(s)``, the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL yields ``len(s)``, the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns the difference of the first pair of differing characters,
    where the end of a string counts as code point 0; 0 when equal.
    """
    return _difference(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _non_negative("n", n)
    return _difference(s1[:n], s2[:n])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0; None when there is no match.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. A value past the range of a 64-bit long
    gives -1 when positive and 0 when negative; otherwise the result is
    wrapped to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
        if value > _LONG_MAX:
            return -1 if sign == 1 else 0
    return _wrap_int(_wrap_int(value) * sign)


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the separator character, dropping empty words."""
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A non-None return value replaces the element.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and the
    full length of ``src``.
    """
    _non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the full concatenation
    would have. When ``size`` is smaller than ``dst``, ``dst`` is left
    as it is and ``size + len(src)`` is returned.
    """
    _non_negative("size", size)
    if size < len(dst):
        return dst, size + len(src)
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(dst) + len(src)