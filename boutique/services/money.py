"""
Money Utilities - Decimal handling for prices and totals.

Prices come from Airtable as JSON numbers; they are kept as Decimal inside the
core so that totals are exact, and rendered without a trailing ".0" in the
checkout message.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

Numeric = Union[str, int, float, Decimal, None]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Via str so that 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def to_float(value: Numeric) -> float:
    """
    Convert to float for JSON responses.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def format_amount(value: Numeric) -> str:
    """
    Format an amount for display in messages.

    Integral amounts have no decimal part ("500"), fractional amounts keep
    only significant digits ("19.5").
    """
    decimal_value = to_decimal(value)
    if decimal_value == decimal_value.to_integral_value():
        return str(int(decimal_value))
    return format(decimal_value.normalize(), "f")
