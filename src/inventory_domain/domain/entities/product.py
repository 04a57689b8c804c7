"""Product entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.common.utils.currency_utils import to_decimal
from src.common.utils.date_utils import parse_iso_date


@dataclass
class Product:
    """Represents a stocked pharmacy product (one batch of one medicine)."""

    id: str
    name: str
    category: str
    batch_no: str
    expiry_date: date
    stock: int
    price: Decimal
    reorder_level: int
    manufacturer: str = ""
    location: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        """Post-initialization for normalization and validation."""
        self.id = str(self.id)
        self.expiry_date = parse_iso_date(self.expiry_date)
        self.price = to_decimal(self.price)

        if self.stock < 0:
            raise ValueError("Stock cannot be negative.")
        if self.reorder_level < 0:
            raise ValueError("Reorder level cannot be negative.")
        if self.price < 0:
            raise ValueError("Price cannot be negative.")

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    @property
    def needs_reorder(self) -> bool:
        return self.stock <= self.reorder_level
