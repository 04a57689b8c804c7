"""Tests for the bill and cart entities."""

from datetime import date
from decimal import Decimal

import pytest

from src.billing_domain.domain.entities.bill import Bill, BillItem
from src.billing_domain.domain.entities.cart import Cart, CartLine


def _item(total: str = "25.98") -> BillItem:
    return BillItem("1", "1", "Amoxicillin 500mg", 2, Decimal("12.99"), Decimal("2.598"), Decimal("0"), Decimal(total))


def test_bill_normalizes_amounts_and_date() -> None:
    bill = Bill(
        id="B010",
        customer_id="1",
        customer_name="John Smith",
        items=[_item()],
        subtotal="25.98",
        tax="2.598",
        discount=0,
        total="28.578",
        date="2025-04-10",
        payment_method="Cash",
    )

    assert bill.date == date(2025, 4, 10)
    assert bill.subtotal == Decimal("25.98")
    assert isinstance(bill.items, tuple)
    assert bill.status == "paid"
    assert bill.sequence_number == 10


def test_bill_is_immutable(historical_bill) -> None:
    with pytest.raises(AttributeError):
        historical_bill.status = "cancelled"


def test_bill_rejects_inconsistent_total() -> None:
    with pytest.raises(ValueError, match="total"):
        Bill("B001", "1", "John Smith", (_item(),), Decimal("25.98"), Decimal("2.60"), Decimal("0"), Decimal("30.00"), date(2025, 4, 10), "Cash")


def test_bill_rejects_line_totals_not_matching_subtotal() -> None:
    with pytest.raises(ValueError, match="line totals"):
        Bill("B001", "1", "John Smith", (_item("20.00"),), Decimal("25.98"), Decimal("2.60"), Decimal("0"), Decimal("28.58"), date(2025, 4, 10), "Cash")


def test_bill_rejects_unknown_status() -> None:
    with pytest.raises(ValueError, match="status"):
        Bill("B001", "1", "John Smith", (_item(),), Decimal("25.98"), Decimal("2.598"), Decimal("0"), Decimal("28.578"), date(2025, 4, 10), "Cash", status="refunded")


def test_bill_with_discount() -> None:
    item = BillItem("1", "7", "Vitamin D3 1000IU", 3, Decimal("9.99"), Decimal("3.15"), Decimal("5.00"), Decimal("29.97"))

    bill = Bill("B002", "2", "Emma Johnson", (item,), Decimal("29.97"), Decimal("3.15"), Decimal("5.00"), Decimal("28.12"), date(2025, 4, 7), "Cash")

    assert bill.total == bill.subtotal + bill.tax - bill.discount


def test_bill_item_requires_positive_quantity() -> None:
    with pytest.raises(ValueError):
        BillItem("1", "1", "Amoxicillin 500mg", 0, Decimal("12.99"), Decimal("0"), Decimal("0"), Decimal("0"))


def test_cart_line_total_and_cart_helpers() -> None:
    cart = Cart()
    cart.lines.append(CartLine("1", "Amoxicillin 500mg", Decimal("12.99"), quantity=3))
    cart.lines.append(CartLine("2", "Paracetamol 500mg", Decimal("5.49")))

    assert cart.lines[0].line_total == Decimal("38.97")
    assert cart.get_line("2").quantity == 1
    assert cart.get_line("9") is None
    assert cart.item_count == 4

    cart.clear()

    assert cart.is_empty
