"""Cart entities for a billing session."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class CartLine:
    """One product in the cart. The unit price is captured when the product is added."""

    product_id: str
    product_name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """Session-scoped collection of cart lines, at most one line per product."""

    lines: list[CartLine] = field(default_factory=list)

    def get_line(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        """Total units across all lines."""
        return sum(line.quantity for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
