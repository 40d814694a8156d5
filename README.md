# bsqsolver

Finds the biggest square of free cells in a map and marks it with `x`.

A map is a text file whose first line gives the number of rows, followed by
that many rows of equal width made of `.` (free) and `o` (obstacle), each
ending with a newline:

```
4
....
.o..
....
..o.
```

## Installation

```
pip install .
```

## Usage

Solve a map stored in a file:

```
setting-up map.txt
```

The map is printed without its header line, with the biggest square drawn in
`x`. When several squares share the largest size, the one found first,
top-most and then left-most, is chosen. A file that cannot be read, whose
header is not a positive number, that does not end with a row and a newline,
whose header does not match the number of rows, whose rows differ in width, or
that holds characters other than `.`, `o` and newlines, prints `Error file` and
exits with status 84. A map of a single row has its first `.` turned into `x`.

Generate a square map of a given size from a repeating pattern and solve it:

```
setting-up 6 "..o.."
```

The pattern is repeated cell after cell, row after row, to fill a map of `6`
by `6` cells. It may hold only `.`, `o` and `"` characters and must not be
empty. A size of zero or less, or a bad pattern, prints `Error generating` and
exits with status 84.

Any other number of arguments exits with status 84 and prints nothing. The
same command is available as `python -m bsqsolver.cli`.

## Library

The package can be used from Python too:

```python
from bsqsolver.cli import generate_map
from bsqsolver.solver import solve

print(solve("2\n..\n..\n", 1, False), end="")   # xx\nxx\n
print(generate_map(3, ".o"), end="")            # .o.\no.o\n.o.\n
```

- `bsqsolver.solver`: `solve(buffer, height, generated)` returns the marked
  map text; `largest_square`, `mark_square` and `fill_single_row` are the
  steps it uses.
- `bsqsolver.maps`: checks on map text (`is_valid_map`, `is_empty_file`),
  generator arguments (`check_generator`, which raises `MapError`) and
  `split_rows`, which cuts text into runs of map cells.
- `bsqsolver.cli`: `generate_map(size, pattern)`, `run_file(path)`,
  `run_generator(size_text, pattern)` and `main(argv)`.
- `bsqsolver.printf`: a small formatted-output engine. `format_text(fmt, *args)`
  returns the rendered text together with the character count it reports, and
  `printf(fmt, *args)` writes the text to standard output and returns that
  count. It knows the conversions `d i s c % p o u x X n f F e E b S a` and the
  flags `- + # space 0`; `%n` stores the running count in a `CharCount`. The
  counts and some outputs follow the engine's own rules rather than those of
  C's `printf`, so `%S`, for instance, writes only the lower-case letters of its
  argument, upper-cased.
- `bsqsolver.numbers`, `bsqsolver.formatspec`, `bsqsolver.padding`,
  `bsqsolver.specifiers_int` and `bsqsolver.specifiers_float` hold the number
  rendering, format parsing and per-conversion rendering behind it.

## Running the tests

```
pip install .[test]
pytest
```