"""Command line: solve a map file, or generate a map and solve it."""

from __future__ import annotations

import sys
from itertools import cycle, islice
from pathlib import Path

from .maps import MapError, check_generator, is_empty_file, is_valid_map
from .numbers import parse_int
from .solver import solve

_FAILURE = 84


def generate_map(size: int, pattern: str) -> str:
    """A ``size`` by ``size`` map repeating ``pattern`` across the rows."""
    cells = cycle(pattern)
    return "".join("".join(islice(cells, size)) + "\n" for _ in range(size))


def run_file(path: str) -> int:
    """Solve the map stored at ``path`` and write it; return the exit status."""
    try:
        buffer = Path(path).read_bytes().decode("latin-1")
    except OSError:
        sys.stdout.write("Error file\n")
        return _FAILURE
    if is_empty_file(buffer) or not is_valid_map(buffer):
        sys.stdout.write("Error file\n")
        return _FAILURE
    sys.stdout.write(solve(buffer, parse_int(buffer) - 1, False))
    return 0


def run_generator(size_text: str, pattern: str) -> int:
    """Generate a map from a size and pattern, solve and write it."""
    size = parse_int(size_text)
    try:
        check_generator(size, pattern)
    except MapError:
        sys.stdout.write("Error generating\n")
        return _FAILURE
    sys.stdout.write(solve(generate_map(size, pattern), size, True))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run with one argument (a map file) or two (a size and a pattern)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1:
        return run_file(args[0])
    if len(args) == 2:
        return run_generator(args[0], args[1])
    return _FAILURE


if __name__ == "__main__":
    sys.exit(main())