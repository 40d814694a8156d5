"""Rendering of the integer, character, string and address conversions.

Each renderer returns the text a conversion writes, the amount it adds to the
running character count, and how far the format cursor moves past the '%'.
The count keeps the formatter's quirks: signs, padding and digits are only
counted where the formatter counts them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .formatspec import conversion_span, find_minus, parse_flags
from .numbers import (
    INT_MIN,
    format_int,
    format_pointer,
    format_unsigned,
    get_digit,
    reported_int_length,
    upper_letters,
)
from .padding import (
    int_zero_pad,
    sign_prefix,
    string_sign_prefix,
    string_zero_pad,
    trailing_pad,
)

_OCTAL = "012345678"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_BINARY = "01"


@dataclass(frozen=True)
class Rendered:
    """Output of one conversion."""

    text: str
    count: int
    advance: int


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits."""
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _digit_run(value: int, base: int, alphabet: str) -> tuple[str, int]:
    """Digits of ``value`` and the number of positions walked to write them.

    The leading power is found with a strict comparison, so 0 and 1 (and any
    negative value) give no digits, and an exact power of the base puts a
    digit equal to the base in front.
    """
    power = 1
    while power < value:
        power *= base
    power //= base
    digits: list[str] = []
    positions = 0
    while power > 0:
        digit = get_digit(value, power)
        if digit < len(alphabet):
            digits.append(alphabet[digit])
        else:
            digits.append(alphabet[1] + alphabet[0])
        value -= power * digit
        power //= base
        positions += 1
    return "".join(digits), positions


def _zero_lead(zero: int, minus: int, positions: int) -> str:
    if zero > 0 and minus == 0:
        return "0" * max(zero - positions, 0)
    return ""


def _space_tail(minus: int, positions: int) -> str:
    if minus > 0:
        return " " * max(minus - positions, 0)
    return ""


def _radix(value: int, fmt: str, index: int, base: int, alphabet: str,
           sign: str = "", marker: str = "") -> Rendered:
    digits, positions = _digit_run(value, base, alphabet)
    flags = parse_flags(fmt, index)
    lead = _zero_lead(flags.zero, flags.minus, positions)
    tail = _space_tail(flags.minus, positions)
    return Rendered(
        text=sign + lead + marker + digits + tail,
        count=len(lead) + len(tail),
        advance=conversion_span(fmt, index),
    )


def hex_digits(value: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``value`` taken as a signed 64-bit integer."""
    alphabet = _HEX_UPPER if upper else _HEX_LOWER
    return _digit_run(_wrap(value, 64), 16, alphabet)[0]


def render_integer(value: int, fmt: str, index: int) -> Rendered:
    """A '%d' or '%i' conversion of a 32-bit signed integer."""
    value = _wrap(value, 32)
    flags = parse_flags(fmt, index)
    printed = reported_int_length(value)
    text = (
        sign_prefix(flags.space, flags.plus, value)
        + int_zero_pad(flags, value)
        + format_int(value)
        + trailing_pad(flags.minus, flags.plus, flags.space, printed)
    )
    return Rendered(text=text, count=printed, advance=conversion_span(fmt, index))


def render_octal(value: int, fmt: str, index: int) -> Rendered:
    """A '%o' conversion; the '#' flag puts a '0' before the digits."""
    flags = parse_flags(fmt, index)
    marker = "0" if flags.hash is not None else ""
    return _radix(_wrap(value, 64), fmt, index, 8, _OCTAL, marker=marker)


def render_hex(value: int, fmt: str, index: int, upper: bool = False) -> Rendered:
    """A '%x' or '%X' conversion."""
    alphabet = _HEX_UPPER if upper else _HEX_LOWER
    return _radix(_wrap(value, 64), fmt, index, 16, alphabet)


def render_binary(value: int, fmt: str, index: int) -> Rendered:
    """A '%b' conversion; a negative value is written as '-' and its magnitude."""
    value = _wrap(value, 32)
    sign = ""
    if value < 0:
        sign = "-"
        if value != INT_MIN:
            value = -value
    return _radix(value, fmt, index, 2, _BINARY, sign=sign)


def render_char(value: int | str, fmt: str, index: int) -> Rendered:
    """A '%c' conversion; a '-' width pads with spaces after the character."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion takes exactly one character")
        char = value
    else:
        char = chr(_wrap(value, 8) % 256)
    minus = find_minus(fmt, index)
    tail = " " * max(minus - 1, 0) if minus > 0 else ""
    return Rendered(
        text=char + tail,
        count=1 + len(tail),
        advance=conversion_span(fmt, index),
    )


def _c_string(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def render_string(value: str, fmt: str, index: int) -> Rendered:
    """A '%s' conversion; a '0' width pads with spaces in front."""
    text = _c_string(value)
    minus = find_minus(fmt, index)
    flags = parse_flags(fmt, index)
    lead = ""
    if flags.zero > 0 and minus == 0:
        lead = " " * max(flags.zero - len(text), 0)
    tail = _space_tail(minus, len(text))
    return Rendered(
        text=lead + text + tail,
        count=len(lead) + len(text) + len(tail),
        advance=conversion_span(fmt, index),
    )


def render_upper_string(value: str, fmt: str, index: int) -> Rendered:
    """A '%S' conversion: only the lower-case letters are written, upper-cased."""
    text = _c_string(value)
    flags = parse_flags(fmt, index)
    printed = len(text)
    rendered = (
        string_sign_prefix(flags.space, flags.plus)
        + string_zero_pad(flags, text)
        + upper_letters(text)
        + trailing_pad(flags.minus, flags.plus, flags.space, printed)
    )
    return Rendered(text=rendered, count=printed, advance=conversion_span(fmt, index))


def render_percent(fmt: str, index: int) -> Rendered:
    """A '%%' conversion; it writes '%' without counting it."""
    return Rendered(text="%", count=0, advance=1)


def render_pointer(value: int, fmt: str, index: int) -> Rendered:
    """A '%p' conversion of an address."""
    text = format_pointer(value)
    return Rendered(text=text, count=len(text), advance=1)


def render_unsigned(value: int, fmt: str, index: int) -> Rendered:
    """A '%u' conversion of a 32-bit unsigned integer."""
    text = format_unsigned(value)
    return Rendered(text=text, count=len(text), advance=1)