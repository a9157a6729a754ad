"""Display formatting of computed dimensionless numbers."""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
import math

SCIENTIFIC_LOWER = 1e-4
SCIENTIFIC_UPPER = 1e6
FRACTION_DIGITS = 4
FIXED_LIMIT = 1e21


def format_scientific(value: float, digits: int = FRACTION_DIGITS) -> str:
    """Exponential notation with an unpadded, signed exponent (5.0000e-5, 2.5000e+6)."""
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_decimal(value: float, digits: int = FRACTION_DIGITS) -> str:
    """Grouped decimal with at most `digits` fractional digits (1,000 / 3.1416)."""
    text = f"{value:,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_value(value: float) -> str:
    """
    Format a result for display.

    Very small (|v| < 1e-4) and very large (|v| > 1e6) magnitudes use exponential
    notation, everything else a grouped decimal. Infinities and NaN are shown
    as words.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    if magnitude < SCIENTIFIC_LOWER or magnitude > SCIENTIFIC_UPPER:
        return format_scientific(value)
    return format_decimal(value)


def format_fixed(value: float, digits: int) -> str:
    """
    Fixed-point text with exactly `digits` fractional digits.

    Ties round half away from zero on the exact binary value (0.25 -> 0.3).
    Magnitudes of 1e21 and above fall back to the shortest exponential form,
    non-finite values are shown as words like format_value does.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= FIXED_LIMIT:
        return repr(float(value))
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))
