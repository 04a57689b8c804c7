"""Data Transfer Objects for inventory alerts."""

from dataclasses import dataclass

from src.inventory_domain.domain.entities.product import Product

LOW_STOCK_CRITICAL = "critical"
LOW_STOCK_LOW = "low"

EXPIRY_CRITICAL = "critical"
EXPIRY_WARNING = "warning"
EXPIRY_ATTENTION = "attention"


@dataclass
class LowStockAlertDTO:
    """A product at or below its reorder level."""

    product: Product
    level: str  # "critical" or "low"

    @property
    def shortfall(self) -> int:
        """Units needed to get back to the reorder level."""
        return max(self.product.reorder_level - self.product.stock, 0)


@dataclass
class ExpiryAlertDTO:
    """A product expiring within the alert horizon."""

    product: Product
    days_to_expiry: int
    level: str  # "critical", "warning" or "attention"
