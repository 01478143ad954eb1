"""Conversion between base-N digit strings and floats.

Digits are drawn from ``config.DIGIT_ALPHABET`` (``0-9a-zA-Z``); the index of
a character is its value. Bases up to 36 are case-insensitive, larger bases
treat upper- and lowercase letters as distinct digits.
"""

from __future__ import annotations

import math

from . import config
from .types import InvalidDigitError, MultipleDecimalPointsError, UnsupportedBaseError


def check_base(base: int) -> int:
    """Return ``base`` if it is supported, else raise UnsupportedBaseError."""
    if not isinstance(base, int) or base < config.MIN_BASE or base > config.MAX_BASE:
        raise UnsupportedBaseError(
            f"Unsupported base: {base}. Must be between {config.MIN_BASE} and {config.MAX_BASE}"
        )
    return base


def digit_value(char: str) -> int:
    """Return the value of a single digit character, or -1 if it is not a digit."""
    return config.DIGIT_ALPHABET.find(char) if len(char) == 1 else -1


def is_digit_string(text: str, base: int) -> bool:
    """Return True if ``text`` is a non-empty run of digits valid in ``base`` (no point)."""
    if base <= config.CASE_INSENSITIVE_MAX_BASE:
        text = text.lower()
    return bool(text) and all(0 <= digit_value(char) < base for char in text)


def _scan_digit(char: str, base: int) -> int:
    value = digit_value(char)
    if value < 0 or value >= base:
        raise InvalidDigitError(f"Invalid character for base {base}: {char}")
    return value


def to_base10(digits: str, base: int) -> float:
    """Convert a digit string in ``base`` to a float.

    Args:
        digits: Digit string with at most one decimal point (e.g. "ff", "1.01")
        base: Base of the digit string, 2-61

    Returns:
        The value as a float. "nan" and "inf" map to the float sentinels
        in every base.

    Raises:
        UnsupportedBaseError: base outside the supported range
        MultipleDecimalPointsError: more than one "." in the string
        InvalidDigitError: a character that is not a digit of ``base``
    """
    if digits == "nan":
        return math.nan
    if digits == "inf":
        return math.inf
    check_base(base)
    if base <= config.CASE_INSENSITIVE_MAX_BASE:
        digits = digits.lower()

    point = digits.find(config.DECIMAL_POINT)
    if point != digits.rfind(config.DECIMAL_POINT):
        raise MultipleDecimalPointsError("Number may only contain one decimal point")
    if point == -1:
        point = len(digits)

    n = 0.0
    weight = 1.0
    for char in reversed(digits[:point]):
        n += _scan_digit(char, base) * weight
        weight *= base

    weight = 1.0 / base
    for char in digits[point + 1 :]:
        n += _scan_digit(char, base) * weight
        weight /= base
    return n


def from_base10(value: float, base: int, max_fraction_digits: int | None = None) -> str:
    """Render a float as a digit string in ``base``.

    Args:
        value: Value to render
        base: Target base, 2-61
        max_fraction_digits: Cap on digits after the point
            (default: config.MAX_FRACTION_DIGITS)

    Returns:
        Digit string such as "ff", "-1010" or "0.8". NaN renders as "nan"
        and both infinities as "inf".
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    check_base(base)
    if max_fraction_digits is None:
        max_fraction_digits = config.MAX_FRACTION_DIGITS

    sign = ""
    if value < 0:
        sign = "-"
        value = -value

    whole = math.floor(value)
    int_digits = []
    quot = int(whole)
    while quot != 0:
        quot, rem = divmod(quot, base)
        int_digits.append(config.DIGIT_ALPHABET[rem])
    int_part = "".join(reversed(int_digits)) or "0"

    frac_digits = []
    frac = value - whole
    while frac != 0 and len(frac_digits) < max_fraction_digits:
        scaled = frac * base
        digit = math.floor(scaled)
        frac_digits.append(config.DIGIT_ALPHABET[digit])
        frac = scaled - digit

    if frac_digits:
        return f"{sign}{int_part}.{''.join(frac_digits)}"
    return f"{sign}{int_part}"
