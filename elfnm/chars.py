"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_LOWER_FIRST, _LOWER_LAST = 97, 122
_UPPER_FIRST, _UPPER_LAST = 65, 90
_DIGIT_FIRST, _DIGIT_LAST = 48, 57
_PRINT_FIRST, _PRINT_LAST = 32, 126
_ASCII_LAST = 127
_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_lower(c: CharLike) -> bool:
    """True for the ASCII letters a to z."""
    return _LOWER_FIRST <= _code(c) <= _LOWER_LAST


def is_upper(c: CharLike) -> bool:
    """True for the ASCII letters A to Z."""
    return _UPPER_FIRST <= _code(c) <= _UPPER_LAST


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters of either case."""
    return is_lower(c) or is_upper(c)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= _ASCII_LAST


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return _PRINT_FIRST <= _code(c) <= _PRINT_LAST


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if is_upper(code):
        return _like(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if is_lower(code):
        return _like(c, code - _CASE_OFFSET)
    return c