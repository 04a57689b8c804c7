"""Utility functions for money values."""

from decimal import ROUND_HALF_UP, Decimal

from src.common.config.settings import settings

CENT = Decimal("0.01")


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Converts a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid money amount")
    # str() first so that 12.99 becomes Decimal("12.99"), not 12.9900000000000002131...
    return Decimal(str(value))


def round_to_cents(amount: Decimal | float | int) -> Decimal:
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal | float | int, symbol: str | None = None) -> str:
    """Formats an amount like `$1,234.56` (negative amounts as `-$1.00`)."""
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    rounded = round_to_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"
