"""Symbol-name ordering in the style of the classic symbol lister."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional

from .strings import strcmp

_IGNORED = frozenset("_.@")
_CLEAN_LIMIT = 255


def _clean(name: str) -> str:
    kept: List[str] = []
    for ch in name:
        if len(kept) >= _CLEAN_LIMIT:
            break
        if ch not in _IGNORED:
            kept.append(ch)
    return "".join(kept)


def _fold(ch: str) -> int:
    code = ord(ch)
    return code + 32 if 65 <= code <= 90 else code


def compare_nm_style(s1: str, s2: str) -> int:
    """Compare two names, ignoring ``_``, ``.`` and ``@`` and ASCII case.

    Only the first 255 kept characters take part. Names equal on that
    basis are ordered by a plain comparison of the originals. The sign of
    the result gives the order.
    """
    clean1, clean2 = _clean(s1), _clean(s2)
    for a, b in zip(clean1, clean2):
        c1, c2 = _fold(a), _fold(b)
        if c1 != c2:
            return c1 - c2
    if len(clean1) != len(clean2):
        shorter = min(len(clean1), len(clean2))
        c1 = _fold(clean1[shorter]) if len(clean1) > shorter else 0
        c2 = _fold(clean2[shorter]) if len(clean2) > shorter else 0
        return c1 - c2
    return strcmp(s1, s2)


def sort_names(
    items: Iterable[Any],
    key: Optional[Callable[[Any], str]] = None,
    reverse: bool = False,
) -> List[Any]:
    """Return ``items`` sorted by name with :func:`compare_nm_style`.

    ``key`` extracts the name from an item; by default the item is the name.
    """
    name_of = key if key is not None else (lambda item: item)
    order = cmp_to_key(compare_nm_style)
    return sorted(items, key=lambda item: order(name_of(item)), reverse=reverse)