"""
Numeric normalizer tests.

Tests:
1-4.  Parsing (text, numbers, units, garbage)
5-7.  Rounding (precision, half away from zero, float artifacts)
8.    Idempotence
9-10. Display formatting
"""

import math

import pytest

from backend.calculators.normalize import (
    normalize_number, normalize_nozzle, parse_float, round_half_up, format_number, is_number,
)


# ============================================================
# Parsing
# ============================================================

def test_parses_text_and_numbers():
    assert normalize_number("0.4") == 0.4
    assert normalize_number(" 0.42 ") == 0.42
    assert normalize_number(60) == 60.0
    assert normalize_number(4.8) == 4.8


def test_trailing_units_are_ignored():
    """Leading number wins, like a browser number parse."""
    assert normalize_number("0.4mm") == 0.4
    assert normalize_number("95.5%") == 95.5
    assert normalize_number(".5") == 0.5


def test_unparseable_values_return_nan():
    """Parse failures are NaN, never an exception."""
    for value in (None, "", "   ", "abc", "mm0.4", True, False):
        assert math.isnan(normalize_number(value)), repr(value)


def test_parse_float_keeps_full_precision():
    assert parse_float("1.23456") == 1.23456
    assert parse_float("1e-3") == 0.001


# ============================================================
# Rounding
# ============================================================

def test_rounds_to_requested_places():
    assert normalize_number("0.456") == 0.46
    assert normalize_number("0.456", 1) == 0.5
    assert normalize_number(95.238095, 2) == 95.24
    assert normalize_nozzle("0.44") == 0.4


def test_halves_round_away_from_zero():
    """2.675 is stored as 2.67499999... but reads as 2.675 - rounds up."""
    assert normalize_number(2.675) == 2.68
    assert normalize_number(0.125) == 0.13
    assert normalize_number(-0.125) == -0.13
    assert round_half_up(10.5) == 11
    assert round_half_up(9.5) == 10


def test_float_artifacts_removed():
    assert normalize_number(0.1 + 0.2) == 0.3
    assert normalize_number(0.2 * 0.4 * 60) == 4.8
    assert normalize_number(-0.001) == 0.0


# ============================================================
# Idempotence
# ============================================================

@pytest.mark.parametrize("value", ["0.4", 2.675, 0.1 + 0.2, -3.14159, 1e-9, 123456.789, 1e300])
@pytest.mark.parametrize("places", [0, 1, 2, 3, 20, 30])
def test_normalize_is_idempotent(value, places):
    once = normalize_number(value, places)
    assert normalize_number(once, places) == once


# ============================================================
# Formatting
# ============================================================

def test_format_number_drops_trailing_zeros():
    assert format_number(45.0) == "45"
    assert format_number(95.24) == "95.24"
    assert format_number(0.2) == "0.2"
    assert format_number(0.0) == "0"


def test_format_number_passes_nan_through():
    assert format_number(math.nan) == "nan"


# ============================================================
# Non-finite values and high precision
# ============================================================

@pytest.mark.parametrize("value", [math.inf, -math.inf, "1e400", "-1e999mm", math.nan])
def test_non_finite_values_return_nan(value):
    """Infinity is never a usable number - it parses like garbage."""
    assert math.isnan(parse_float(value))
    assert math.isnan(normalize_number(value))
    assert not is_number(normalize_number(value))


def test_is_number_requires_finite():
    assert is_number(0.0)
    assert is_number(1e300)
    assert not is_number(math.inf)
    assert not is_number(math.nan)


def test_high_precision_does_not_raise():
    """More digits than the default decimal context holds (28)."""
    assert normalize_number(0.1, 30) == 0.1
    assert normalize_number("2.675", 20) == 2.675
    assert normalize_number(1e300, 30) == 1e300
    assert normalize_number(123456789.123456789, 25) == 123456789.123456789
