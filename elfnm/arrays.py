"""Helpers for lists of strings: copy, join, prepend, measure and print."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from .output import format_string


def array_dup(array: Sequence[str], size: Optional[int] = None) -> List[str]:
    """Return a new list with the first ``size`` strings of ``array``, or all of them."""
    if size is None:
        return list(array)
    if size < 0:
        raise ValueError("size must not be negative")
    return list(array[:size])


def array_join(first: Sequence[str], second: Sequence[str]) -> List[str]:
    """Return a new list with the strings of ``first`` followed by those of ``second``."""
    return [*first, *second]


def prepend(item: str, array: Sequence[str]) -> List[str]:
    """Return a new list with ``item`` first, then the strings of ``array``."""
    return [item, *array]


def array_len(array: Optional[Sequence[str]]) -> int:
    """Number of strings in ``array``; 0 for None."""
    return 0 if array is None else len(array)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def array_print(array: Optional[Sequence[str]], stream: Optional[TextIO] = None) -> None:
    """Write each string framed as ``|<tab>{s}<tab>|`` on its own line."""
    if array is None:
        return
    out = _target(stream)
    for item in array:
        out.write(format_string("|\t{%s}\t|\n", item))


def print_array(array: Optional[Sequence[str]], stream: Optional[TextIO] = None) -> None:
    """Write each string preceded by ``-><tab>``, with no added newline."""
    if array is None:
        return
    out = _target(stream)
    for item in array:
        out.write(format_string("->\t%s", item))