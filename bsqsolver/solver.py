"""Search for the largest empty square of a map and marking of it with 'x'."""

from __future__ import annotations

from .maps import MapError, split_rows


def _is_square(rows: list[str], row: int, col: int, size: int) -> bool:
    """True if a ``size`` square with top-left corner (row, col) has no obstacle."""
    for line_index in range(row, row + size):
        if line_index >= len(rows):
            return False
        segment = rows[line_index][col:col + size]
        if len(segment) < size or "o" in segment:
            return False
    return True


def largest_square(rows: list[str], height: int,
                   generated: bool = False) -> tuple[int, int, int]:
    """Size and top-left (row, col) of the first largest empty square.

    Only rows before ``height`` are tried as top rows. For a generated map the
    search stops once the current best square can no longer fit below the row.
    """
    if height < 0:
        raise ValueError("height must not be negative")
    limit = len(rows) - 2
    size = 0
    best = (0, 0)
    row = col = 0
    while row != height:
        if row >= len(rows):
            raise MapError("map has fewer rows than its height")
        previous = size
        if generated and row + size > limit:
            return size, best[0], best[1]
        while _is_square(rows, row, col, size + 1):
            size += 1
        if size > previous:
            best = (row, col)
        col += 1
        if col >= len(rows[row]):
            col = 0
            row += 1
    return size, best[0], best[1]


def mark_square(rows: list[str], row: int, col: int, size: int) -> list[str]:
    """A copy of ``rows`` with the square at (row, col) filled with 'x'."""
    marked = list(rows)
    for line_index in range(row, row + size):
        line = marked[line_index]
        marked[line_index] = line[:col] + "x" * size + line[col + size:]
    return marked


def fill_single_row(rows: list[str]) -> list[str]:
    """A copy of ``rows`` with the first '.' of the first row turned into 'x'."""
    marked = list(rows)
    marked[0] = marked[0].replace(".", "x", 1)
    return marked


def solve(buffer: str, height: int, generated: bool = False) -> str:
    """The text of the map in ``buffer`` with its largest empty square marked.

    ``height`` is the index of the last row for a map read from a file, and the
    number of rows for a generated map.
    """
    rows = split_rows(buffer)
    if height == 0:
        return fill_single_row(rows)[0] + "\n"
    size, row, col = largest_square(rows, height, generated)
    rows = mark_square(rows, row, col, size)
    if not generated:
        return "".join(line + "\n" for line in rows[:height + 1])
    body = "".join(line + "\n" for line in rows[:height])
    tail = rows[height] if height < len(rows) else ""
    return body + tail