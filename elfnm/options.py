"""Command-line option parsing for the symbol lister."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

DEFAULT_FILE = "a.out"
FLAG_CHARS = frozenset("agrup")


class InvalidOptionError(ValueError):
    """An option argument holds a character that is not a known flag."""

    def __init__(self, option: str) -> None:
        super().__init__(f"invalid option -- '{option}'")
        self.option = option


@dataclass(frozen=True)
class Options:
    """Parsed flags and file names.

    ``debug_syms`` is -a, ``extern_only`` -g, ``reverse_sort`` -r,
    ``undefined_only`` -u and ``no_sort`` -p.
    """

    filenames: Tuple[str, ...] = ()
    debug_syms: bool = False
    extern_only: bool = False
    reverse_sort: bool = False
    undefined_only: bool = False
    no_sort: bool = False

    @property
    def files(self) -> Tuple[str, ...]:
        """The files to list, or the default file when none was given."""
        return self.filenames or (DEFAULT_FILE,)


def _is_flag_argument(arg: str) -> bool:
    return len(arg) > 1 and arg.startswith("-")


def parse_args(argv: Iterable[str]) -> Options:
    """Parse the arguments that follow the program name.

    An argument of two or more characters starting with ``-`` is a group
    of flags; anything else is a file name. Raises InvalidOptionError on
    the first unknown flag character.
    """
    args = list(argv)
    for arg in args:
        if _is_flag_argument(arg):
            for ch in arg[1:]:
                if ch not in FLAG_CHARS:
                    raise InvalidOptionError(ch)

    flags = set()
    filenames = []
    for arg in args:
        if _is_flag_argument(arg):
            flags.update(arg[1:])
        else:
            filenames.append(arg)

    return Options(
        filenames=tuple(filenames),
        debug_syms="a" in flags,
        extern_only="g" in flags,
        reverse_sort="r" in flags,
        undefined_only="u" in flags,
        no_sort="p" in flags,
    )