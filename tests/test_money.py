"""Tests for money helpers"""
from decimal import Decimal

import pytest

from boutique.services.money import format_amount, to_decimal, to_float


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0")),
        (500, Decimal("500")),
        (19.99, Decimal("19.99")),
        ("249.50", Decimal("249.50")),
        ("abc", Decimal("0")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("500"), "500"),
        (Decimal("500.00"), "500"),
        (Decimal("1000.0"), "1000"),
        (Decimal("19.50"), "19.5"),
        (Decimal("0"), "0"),
        (Decimal("1E+3"), "1000"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_to_float():
    assert to_float(Decimal("249.5")) == 249.5
