"""Formatted output with a small printf-style conversion set.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. An unknown conversion prints nothing and takes
no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, List, Optional, TextIO, Union

_NULL_TEXT = "(null)"
_POINTER_PREFIX = "0x"
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_INT_HALF = 1 << 31

CharLike = Union[int, str]


def _signed_int(value: int) -> int:
    return ((value + _INT_HALF) & _UINT_MASK) - _INT_HALF


def _as_char(value: CharLike) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return _NULL_TEXT if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else int(value)
        return _POINTER_PREFIX + format(address & _ULONG_MASK, "x")
    if spec in "di":
        return str(_signed_int(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return format(int(value) & _UINT_MASK, "x")
    return format(int(value) & _UINT_MASK, "X")


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    Raises ValueError when the format ends in a lone ``%`` or when the
    arguments run out.
    """
    pieces: List[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output and return the number of characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))