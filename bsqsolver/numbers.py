"""Number and text rendering helpers with the exact quirks of the formatter.

Integer conversions follow 32-bit C semantics: truncation towards zero, and a
float that is NaN or out of range converts to the smallest 32-bit integer.
"""

from __future__ import annotations

import math

INT_MIN = -2147483648
INT_MAX = 2147483647

_HEX_LOWER = "0123456789abcdef"


def _c_int(value: float) -> int:
    """Convert a float to a 32-bit int the way the hardware truncation does."""
    if math.isnan(value) or math.isinf(value):
        return INT_MIN
    truncated = int(value)
    if truncated < INT_MIN or truncated > INT_MAX:
        return INT_MIN
    return truncated


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _c_div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def parse_int(text: str) -> int:
    """Read the first run of digits in ``text``, signed by the '-' seen before it.

    Every '-' met before the digits stop flips the sign. A result outside the
    32-bit range gives 0.
    """
    text = text.split("\0", 1)[0]
    negatives = 0
    value = 0
    for position, char in enumerate(text):
        if char == "-":
            negatives += 1
        if "0" <= char <= "9":
            value = value * 10 + ord(char) - ord("0")
            following = text[position + 1] if position + 1 < len(text) else "\0"
            if ord(following) > 58 or ord(following) < 48:
                break
    if negatives % 2:
        value = -value
    if value > INT_MAX or value < INT_MIN:
        return 0
    return value


def digit_count(nb: int) -> int:
    """Number of decimal digits of ``nb``, ignoring its sign."""
    if nb == INT_MIN:
        # Negating the smallest int leaves it negative, so it counts as one digit.
        return 1
    nb = abs(nb)
    if nb <= 9:
        return 1
    return len(str(nb))


def format_int(nb: int) -> str:
    """Decimal text of a signed integer."""
    return str(nb)


def reported_int_length(nb: int) -> int:
    """The character count the integer writer reports for ``nb``.

    It counts divisions by ten while the value stays above ten, so exact powers
    of ten and negative numbers are under-reported.
    """
    exp = 1
    while nb > 10:
        nb //= 10
        exp += 1
    return exp


def format_unsigned(nb: int) -> str:
    """Decimal text of ``nb`` taken as a 32-bit unsigned integer."""
    return str(nb % (1 << 32))


def get_digit(value: int, power: int) -> int:
    """How many whole ``power`` fit in ``value``; -1 when ``value`` is negative."""
    if power <= 0:
        raise ValueError("power must be positive")
    if value < 0:
        return -1
    return value // power


def _positional(value: int, base: int, alphabet: str) -> str:
    power = 1
    while power < value:
        power *= base
    power //= base
    digits = []
    while power > 0:
        digit = get_digit(value, power)
        if digit < base:
            digits.append(alphabet[digit])
        else:
            digits.append(alphabet[digit // base] + alphabet[digit % base])
        value -= power * digit
        power //= base
    return "".join(digits)


def format_pointer(value: int) -> str:
    """Address text: '0x' followed by lower-case hex digits.

    The leading power is found with a strict comparison, so 0 and 1 yield no
    digits at all.
    """
    return "0x" + _positional(value % (1 << 64), 16, _HEX_LOWER)


def count_power(nb: float) -> int:
    """Power of ten used to scale ``nb`` for exponent notation."""
    if nb == 0:
        return 0
    if math.isinf(nb):
        raise ValueError("cannot scale an infinite value")
    if nb < 0:
        nb = -nb
    power = 1
    while nb <= 1:
        nb *= 10
        power *= 10
    if nb > 1:
        while power <= nb:
            power *= 10
    return power // 10


def count_power_ten(power: int) -> int:
    """Exponent matching a power of ten, counted by repeated division."""
    exp = 1
    while power > 10:
        power //= 10
        exp += 1
    return exp


def compute_power(nb: int, p: int) -> int:
    """``nb`` raised to ``p``; 0 for a negative exponent or an out-of-range base."""
    if nb > INT_MAX or nb < INT_MIN:
        return 0
    if p < 0:
        return 0
    return nb**p


def _zeros_after_point(nb: float) -> str:
    power_of_ten = 1.0
    exp = 0
    fraction = nb - _c_int(nb)
    while power_of_ten / 10 > fraction:
        power_of_ten /= 10
        exp += 1
    return "0" * min(exp, 5)


def _rounded_fraction(fraction: float) -> int:
    for _ in range(7):
        fraction *= 10
    digits = _c_int(fraction)
    if _c_mod(digits, 10) >= 5:
        return _c_div(digits, 10) + 1
    return _c_div(digits, 10)


def format_float(nb: float, upper: bool = False) -> tuple[str, int]:
    """Fixed-point text of ``nb`` and the character count the writer reports.

    The reported count leaves out the sign and any zeros right after the point.
    """
    parts: list[str] = []
    count = 0
    if nb < 0:
        nb = -nb
        parts.append("-")
    if math.isinf(nb):
        parts.append("INF" if upper else "inf")
        return "".join(parts), count
    scaled = _c_int(nb * 1000000)
    if _c_mod(scaled, 10) == 0:
        whole = _c_int(nb)
        rest = _c_mod(scaled, 1000000)
        parts += [format_int(whole), ".", _zeros_after_point(nb), format_int(rest)]
        count += reported_int_length(whole) + 1 + reported_int_length(rest)
        return "".join(parts), count
    whole = _c_int(nb)
    fraction = nb - whole
    if fraction == 0:
        parts += [format_int(whole), ".000000"]
        count += reported_int_length(whole) + 7
        return "".join(parts), count
    decimals = _rounded_fraction(fraction)
    parts += [format_int(whole), ".", _zeros_after_point(nb), format_int(decimals)]
    count += reported_int_length(whole) + reported_int_length(decimals)
    return "".join(parts), count


def float_length(nb: float, upper: bool = False) -> int:
    """Width the fixed-point writer is expected to take for ``nb``.

    Positive infinity counts as 0; leading zeros after the point and the sign
    are not counted.
    """
    if nb == math.inf:
        return 0
    scaled = _c_int(nb * 1000000)
    if _c_mod(scaled, 10) == 0:
        return digit_count(_c_int(nb)) + 1 + digit_count(_c_mod(scaled, 1000000))
    if nb < 0:
        nb = -nb
    whole = _c_int(nb)
    fraction = nb - whole
    if fraction == 0:
        return digit_count(whole) + 7
    return digit_count(whole) + digit_count(_rounded_fraction(fraction))


def exponent_suffix(power: int, positive: bool, upper: bool) -> tuple[str, int]:
    """Exponent text such as 'e+05' for ``power`` and the count reported for it.

    A single-digit exponent is padded with one zero but counted as two extra
    characters.
    """
    exp = count_power_ten(power)
    letter = "E" if upper else "e"
    text = letter + ("+" if positive else "-")
    count = 2
    if exp < 10:
        text += "0"
        count += 2
    text += format_int(exp)
    count += digit_count(exp)
    return text, count


def upper_letters(text: str) -> str:
    """The lower-case ASCII letters of ``text``, upper-cased; all else is dropped."""
    return "".join(chr(ord(char) - 32) for char in text if "a" <= char <= "z")