"""A small printf: walks a format string and renders each conversion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterator

from .formatspec import Specifier, check_format
from .specifiers_float import render_exponent, render_float, render_hex_float
from .specifiers_int import (
    Rendered,
    render_binary,
    render_char,
    render_hex,
    render_integer,
    render_octal,
    render_percent,
    render_pointer,
    render_string,
    render_unsigned,
    render_upper_string,
)


@dataclass
class CharCount:
    """Receives the running character count at a '%n' conversion."""

    value: int = 0


_VALUE_RENDERERS: dict[Specifier, Callable[[Any, str, int], Rendered]] = {
    Specifier.D: render_integer,
    Specifier.I: render_integer,
    Specifier.S: render_string,
    Specifier.C: render_char,
    Specifier.P: render_pointer,
    Specifier.O: render_octal,
    Specifier.U: render_unsigned,
    Specifier.X_MIN: partial(render_hex, upper=False),
    Specifier.X_MAJ: partial(render_hex, upper=True),
    Specifier.F_MIN: partial(render_float, upper=False),
    Specifier.F_MAJ: partial(render_float, upper=True),
    Specifier.E_MIN: partial(render_exponent, upper=False),
    Specifier.E_MAJ: partial(render_exponent, upper=True),
    Specifier.B: render_binary,
    Specifier.UPPER_STRING: render_upper_string,
    Specifier.A: render_hex_float,
}


def _next_arg(pending: Iterator[Any]) -> Any:
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(kind: Specifier, fmt: str, index: int,
             pending: Iterator[Any], count: int) -> Rendered:
    if kind is Specifier.PERCENT:
        return render_percent(fmt, index)
    if kind is Specifier.N:
        target = _next_arg(pending)
        if not isinstance(target, CharCount):
            raise TypeError("a '%n' conversion takes a CharCount")
        target.value = count
        return Rendered(text="", count=0, advance=1)
    return _VALUE_RENDERERS[kind](_next_arg(pending), fmt, index)


def format_text(fmt: str, *args: Any) -> tuple[str, int]:
    """Render ``fmt`` with ``args``; return the text and the reported count.

    The format ends at its first NUL. An invalid conversion writes its '%' and
    the following character uncounted and consumes no argument.
    """
    fmt = fmt.split("\0", 1)[0]
    pending = iter(args)
    out: list[str] = []
    count = 0
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == "%" and i + 1 < len(fmt):
            kind = check_format(fmt, i)
            if kind is None:
                out.append(fmt[i:i + 2])
                i += 2
                continue
            rendered = _convert(kind, fmt, i, pending, count)
            out.append(rendered.text)
            count += rendered.count
            i += rendered.advance + 1
            continue
        out.append(char)
        count += 1
        i += 1
    return "".join(out), count


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output and return the reported count."""
    text, count = format_text(fmt, *args)
    sys.stdout.write(text)
    return count