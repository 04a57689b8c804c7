"""Tests for date and currency utilities."""

from datetime import date, datetime
from decimal import Decimal

import pytest
import pytz

from src.common.config.settings import settings
from src.common.utils import date_utils
from src.common.utils.currency_utils import format_currency, round_to_cents, to_decimal


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("28.578"), "$28.58"),
        (Decimal("2.598"), "$2.60"),
        (Decimal("0.005"), "$0.01"),
        (0, "$0.00"),
        (1234567.891, "$1,234,567.89"),
        (Decimal("-5"), "-$5.00"),
    ],
)
def test_format_currency(amount, expected) -> None:
    assert format_currency(amount) == expected


def test_format_currency_custom_symbol() -> None:
    assert format_currency(Decimal("9.99"), symbol="€") == "€9.99"


def test_to_decimal_avoids_float_artifacts() -> None:
    assert to_decimal(12.99) == Decimal("12.99")
    assert to_decimal("5.49") == Decimal("5.49")
    assert to_decimal(3) == Decimal("3")


def test_to_decimal_rejects_booleans() -> None:
    with pytest.raises(TypeError):
        to_decimal(True)


def test_round_to_cents_half_up() -> None:
    assert round_to_cents(Decimal("34.615")) == Decimal("34.62")


def test_parse_iso_date() -> None:
    assert date_utils.parse_iso_date("2025-04-08") == date(2025, 4, 8)
    assert date_utils.parse_iso_date(date(2025, 4, 8)) == date(2025, 4, 8)
    assert date_utils.parse_iso_date(datetime(2025, 4, 8, 17, 30)) == date(2025, 4, 8)


@pytest.mark.parametrize("value", ["", "2025-13-01", "04/08/2025", None])
def test_parse_iso_date_invalid(value) -> None:
    with pytest.raises(ValueError):
        date_utils.parse_iso_date(value)


def test_date_formatting_and_arithmetic() -> None:
    issued = date(2025, 1, 31)

    assert date_utils.format_iso_date(issued) == "2025-01-31"
    assert date_utils.format_compact_date(issued) == "20250131"
    assert date_utils.add_days(issued, 30) == date(2025, 3, 2)
    assert date_utils.days_between(issued, date(2025, 2, 10)) == 10
    assert date_utils.days_between(date(2025, 2, 10), issued) == -10


def test_today_uses_pharmacy_timezone(mocker) -> None:
    mocker.patch.object(settings, "PHARMACY_TIMEZONE", "Pacific/Kiritimati")

    expected = datetime.now(pytz.timezone("Pacific/Kiritimati")).date()

    assert date_utils.today() == expected
