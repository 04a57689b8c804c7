"""Data Transfer Objects for billing, invoices and sales reports."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CartTotalsDTO:
    """Unrounded cart totals; rounding happens only when formatting."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class InvoiceCustomerDTO:
    name: str
    address: str
    email: str
    phone: str


@dataclass(frozen=True)
class InvoiceItemDTO:
    name: str
    quantity: int
    price: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal


@dataclass(frozen=True)
class InvoiceDTO:
    """Presentation-oriented projection of a bill plus customer details."""

    invoice_number: str
    invoice_date: str
    due_date: str
    customer_details: InvoiceCustomerDTO
    items: tuple[InvoiceItemDTO, ...]
    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal
    payment_method: str
    status: str


@dataclass
class SalesSummaryDTO:
    bill_count: int = 0
    revenue: Decimal = Decimal("0")
    outstanding: Decimal = Decimal("0")
    average_bill_value: Decimal = Decimal("0")
    bills_by_status: dict[str, int] = field(default_factory=dict)
