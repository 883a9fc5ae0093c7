"""
Numeric normalizer - every value passes through here before any arithmetic.

Form inputs arrive as text ("0.4", " 0.42 ", "0.4mm") or as numbers.
normalize_number() parses the leading number and rounds it to a fixed number of
decimal places so float artifacts (0.1 + 0.2 = 0.30000000000000004) never leak
into a formula chain or onto the screen.

Rounding: half away from zero on the shortest decimal repr of the float,
so 2.675 → 2.68 and 0.125 → 0.13 (what a user reading the number expects).
Parse failures and non-finite values return NaN, never raise. Callers check
with is_number().
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

from ..config import settings

# Leading number, optional exponent. Trailing text (units) is ignored.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value) -> float:
    """
    Parse a float from user input. Returns NaN when no leading number is found
    or the number isn't finite ("1e400", float("inf")).
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return math.nan
        number = float(match.group(1))
    return number if math.isfinite(number) else math.nan


def _quantize(number: float, decimal_places: int) -> Decimal:
    """Round half away from zero, with enough context precision for any float."""
    exact = Decimal(repr(number))
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted(), 0) + max(decimal_places, 0) + 2
        return exact.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP)


def normalize_number(value, decimal_places: int = None) -> float:
    """
    Parse value and round it to decimal_places fractional digits.

    Idempotent: normalize_number(normalize_number(x, p), p) == normalize_number(x, p).
    """
    if decimal_places is None:
        decimal_places = settings.DEFAULT_DECIMAL_PLACES
    number = parse_float(value)
    if math.isnan(number):
        return number
    result = float(_quantize(number, decimal_places))
    # Avoid displaying "-0"
    return 0.0 if result == 0 else result


def normalize_nozzle(value) -> float:
    """Nozzle diameters are normalized to 1 decimal place."""
    return normalize_number(value, settings.NOZZLE_DECIMAL_PLACES)


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero (Python's round() is banker's)."""
    return int(_quantize(value, 0))


def is_number(value) -> bool:
    """True when a normalized value is usable (finite)."""
    return isinstance(value, (int, float)) and math.isfinite(value)


def format_number(value: float) -> str:
    """Display form: 45.0 → '45', 95.240 → '95.24'."""
    if not is_number(value):
        return str(value)
    text = ("%.6f" % value).rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
