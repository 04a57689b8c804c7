"""Bill entity and its line items."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.common.utils.currency_utils import round_to_cents, to_decimal
from src.common.utils.date_utils import parse_iso_date

STATUS_PAID = "paid"
STATUS_PENDING = "pending"
STATUS_CANCELLED = "cancelled"
BILL_STATUSES = (STATUS_PAID, STATUS_PENDING, STATUS_CANCELLED)

# Known payment methods. Any other caller-supplied label is accepted as-is.
PAYMENT_CASH = "Cash"
PAYMENT_CREDIT_CARD = "Credit Card"
PAYMENT_INSURANCE = "Insurance"
PAYMENT_UPI = "UPI"
PAYMENT_METHODS = (PAYMENT_CASH, PAYMENT_CREDIT_CARD, PAYMENT_INSURANCE, PAYMENT_UPI)


@dataclass(frozen=True)
class BillItem:
    """An immutable bill line. `total` is the line subtotal (price x quantity)."""

    id: str
    product_id: str
    product_name: str
    quantity: int
    price: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        for name in ("price", "tax", "discount", "total"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        if self.quantity < 1:
            raise ValueError("Bill item quantity must be at least 1.")


@dataclass(frozen=True)
class Bill:
    """Represents a finalized sale. Bills are never edited after creation."""

    id: str
    customer_id: str
    customer_name: str
    items: tuple[BillItem, ...]
    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal
    date: date
    payment_method: str
    status: str = STATUS_PAID

    def __post_init__(self) -> None:
        """Post-initialization for normalization and invariant checks."""
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "date", parse_iso_date(self.date))
        for name in ("subtotal", "tax", "discount", "total"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

        if self.status not in BILL_STATUSES:
            raise ValueError(f"Invalid bill status '{self.status}'. Expected one of: {', '.join(BILL_STATUSES)}")
        if self.discount < 0:
            raise ValueError("Discount cannot be negative.")

        # Historical records carry cent-rounded amounts, so compare at cent precision
        if round_to_cents(self.subtotal + self.tax - self.discount) != round_to_cents(self.total):
            raise ValueError(f"Bill {self.id}: total must equal subtotal + tax - discount.")
        if round_to_cents(sum((item.total for item in self.items), Decimal("0"))) != round_to_cents(self.subtotal):
            raise ValueError(f"Bill {self.id}: line totals must sum to the subtotal.")

    @property
    def sequence_number(self) -> int:
        """Numeric part of the bill id (B004 -> 4)."""
        digits = "".join(ch for ch in self.id if ch.isdigit())
        return int(digits) if digits else 0
