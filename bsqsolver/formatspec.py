"""Recognition of conversion specifications and their flags in a format string.

A conversion starts at a '%' and ends at the first specifier character after
it. Everything in between is scanned for flags. Positions past the end of the
format string read as a NUL character, which is neither a flag, a digit nor a
specifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .numbers import parse_int

_FLAG_CHARS = frozenset("-+# 0.")
_NUL = "\0"


class Specifier(IntEnum):
    """Conversion kinds, numbered as in the dispatch table."""

    D = 2
    I = 3  # noqa: E741
    S = 4
    C = 5
    PERCENT = 6
    P = 7
    O = 8  # noqa: E741
    U = 9
    X_MIN = 10
    X_MAJ = 11
    N = 12
    F_MIN = 13
    F_MAJ = 14
    E_MIN = 15
    E_MAJ = 16
    B = 17
    UPPER_STRING = 18
    A = 19


_SPECIFIERS = {
    "d": Specifier.D,
    "i": Specifier.I,
    "s": Specifier.S,
    "c": Specifier.C,
    "%": Specifier.PERCENT,
    "p": Specifier.P,
    "o": Specifier.O,
    "u": Specifier.U,
    "x": Specifier.X_MIN,
    "X": Specifier.X_MAJ,
    "n": Specifier.N,
    "f": Specifier.F_MIN,
    "F": Specifier.F_MAJ,
    "e": Specifier.E_MIN,
    "E": Specifier.E_MAJ,
    "b": Specifier.B,
    "S": Specifier.UPPER_STRING,
    "a": Specifier.A,
}


@dataclass(frozen=True)
class Flags:
    """Flags found in one conversion.

    ``minus`` and ``zero`` hold the field width that follows the flag, 1 when
    the flag is present without a width, and 0 when it is absent.
    """

    plus: bool = False
    space: bool = False
    hash: Specifier | None = None
    minus: int = 0
    zero: int = 0


def _char_at(fmt: str, i: int) -> str:
    return fmt[i] if 0 <= i < len(fmt) else _NUL


def _body(fmt: str, index: int):
    """Yield (position, char) of the characters between '%' and the specifier."""
    i = index + 1
    while i < len(fmt) and not is_specifier(fmt[i]):
        yield i, fmt[i]
        i += 1


def is_flag(char: str) -> bool:
    """True for one of the flag characters '-', '+', '#', ' ', '0' and '.'."""
    return char in _FLAG_CHARS


def is_specifier(char: str) -> bool:
    """True for a character that ends a conversion."""
    return char in _SPECIFIERS


def is_digit(char: str) -> bool:
    """True for an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def specifier_id(char: str) -> Specifier:
    """The conversion kind of a specifier character."""
    try:
        return _SPECIFIERS[char]
    except KeyError:
        raise ValueError(f"not a conversion specifier: {char!r}") from None


def check_format(fmt: str, index: int) -> Specifier | None:
    """Validate the conversion whose '%' sits at ``index``.

    Returns its kind, or None when it holds a character that is neither a flag
    nor a digit, a flag other than '0' after a width digit, a '#' not directly
    before the specifier, or no specifier at all.
    """
    number_found = False
    i = index + 1
    while not is_specifier(_char_at(fmt, i)):
        char = _char_at(fmt, i)
        if not is_flag(char) and not is_digit(char):
            return None
        if not is_flag(char):
            number_found = True
            i += 1
            continue
        if number_found and char != "0":
            return None
        if char == "#" and not is_specifier(_char_at(fmt, i + 1)):
            return None
        i += 1
    return specifier_id(fmt[i])


def conversion_span(fmt: str, index: int) -> int:
    """Distance from the '%' at ``index`` to the specifier that ends it."""
    return sum(1 for _ in _body(fmt, index)) + 1


def find_plus(fmt: str, index: int) -> bool:
    """True if a '+' flag appears in the conversion."""
    return any(char == "+" for _, char in _body(fmt, index))


def find_space(fmt: str, index: int) -> bool:
    """True if a ' ' flag appears before any digit of the conversion."""
    for _, char in _body(fmt, index):
        if is_digit(char):
            return False
        if char == " ":
            return True
    return False


def find_hash(fmt: str, index: int) -> Specifier | None:
    """The specifier right after a '#' flag, or None when there is none."""
    for position, char in _body(fmt, index):
        following = _char_at(fmt, position + 1)
        if char == "#" and is_specifier(following):
            return specifier_id(following)
    return None


def _width_after(fmt: str, index: int, flag: str) -> int:
    found = False
    for position, char in _body(fmt, index):
        if char == flag:
            found = True
        if is_digit(char) and found:
            return abs(parse_int(fmt[position:]))
    return 1 if found else 0


def find_minus(fmt: str, index: int) -> int:
    """Width given after a '-' flag; 1 for a bare '-', 0 when absent."""
    return _width_after(fmt, index, "-")


def find_zero(fmt: str, index: int) -> int:
    """Width given from a '0' flag on; 1 for a bare '0', 0 when absent."""
    return _width_after(fmt, index, "0")


def parse_flags(fmt: str, index: int) -> Flags:
    """Gather every flag of the conversion whose '%' sits at ``index``."""
    return Flags(
        plus=find_plus(fmt, index),
        space=find_space(fmt, index),
        hash=find_hash(fmt, index),
        minus=find_minus(fmt, index),
        zero=find_zero(fmt, index),
    )