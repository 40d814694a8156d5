"""Reading and checking of map text and of generator arguments.

A map file starts with a header line holding the number of rows, followed by
rows of '.' (empty) and 'o' (obstacle) cells, each ending with a newline.
"""

from __future__ import annotations

import re

from .numbers import parse_int

_CELLS = frozenset(".o")
_PATTERN_CHARS = frozenset('.o"')
_SEPARATOR_RUN = re.compile(r"[^.o]+")
_CELL_RUN = re.compile(r"[.o]*")
_SEPARATORS = re.compile(r"[^.o]*")


class MapError(ValueError):
    """Raised for a map or generator request that cannot be used."""


def _c_text(buffer: str) -> str:
    """The text up to its first NUL character."""
    return buffer.split("\0", 1)[0]


def count_width(buffer: str, start: int) -> int:
    """Number of characters from ``start`` up to the next newline."""
    text = _c_text(buffer)
    end = text.find("\n", start)
    if end == -1:
        end = len(text)
    return max(end - start, 0)


def count_rows(buffer: str) -> int:
    """Number of newlines in ``buffer`` less one: the rows after the header."""
    return _c_text(buffer).count("\n") - 1


def header_end(buffer: str) -> int:
    """Position just after the first newline, where the rows begin."""
    text = _c_text(buffer)
    end = text.find("\n")
    if end == -1:
        raise MapError("map has no header line")
    return end + 1


def has_bad_char(buffer: str, start: int) -> bool:
    """True if anything other than '.', 'o' or a newline follows ``start``."""
    return any(char not in "\n.o" for char in _c_text(buffer)[start:])


def is_valid_map(buffer: str) -> bool:
    """True when the header matches the row count and all rows are even and clean."""
    text = _c_text(buffer)
    try:
        start = header_end(text)
    except MapError:
        return False
    rows = count_rows(text)
    width = count_width(text, start)
    real_size = len(text) - rows - start
    if parse_int(text) != rows:
        return False
    if has_bad_char(text, start):
        return False
    return width * rows == real_size


def is_empty_file(buffer: str) -> bool:
    """True when the header is not positive or the text does not end in a row."""
    text = _c_text(buffer)
    if parse_int(text) <= 0:
        return True
    if not text.endswith("\n"):
        return True
    return len(text) < 2 or text[-2] not in _CELLS


def pattern_is_valid(pattern: str) -> bool:
    """True when the generator pattern holds only '.', 'o' and '"'."""
    return all(char in _PATTERN_CHARS for char in pattern)


def check_generator(length: int, pattern: str) -> None:
    """Raise MapError unless ``length`` and ``pattern`` can generate a map."""
    if length <= 0:
        raise MapError("map size must be positive")
    if not pattern_is_valid(pattern):
        raise MapError("pattern may only hold '.', 'o' and '\"'")
    if not pattern:
        raise MapError("pattern must not be empty")


def split_rows(buffer: str) -> list[str]:
    """Split ``buffer`` into runs of map cells.

    Any character other than '.' or 'o' separates runs. One entry is produced
    per separator run plus one, so trailing entries may be empty.
    """
    text = _c_text(buffer)
    total = len(_SEPARATOR_RUN.findall(text)) + 1
    rows: list[str] = []
    position = 0
    for _ in range(total):
        position = _SEPARATORS.match(text, position).end()
        word = _CELL_RUN.match(text, position).group()
        rows.append(word)
        position += len(word)
    return rows