# src/inventory_domain/application/alert_service.py
"""Application service deriving inventory alerts from the catalog."""

import logging
from datetime import date
from typing import Callable

from src.common.config.settings import settings
from src.common.dtos.inventory_dtos import (
    EXPIRY_ATTENTION,
    EXPIRY_CRITICAL,
    EXPIRY_WARNING,
    LOW_STOCK_CRITICAL,
    LOW_STOCK_LOW,
    ExpiryAlertDTO,
    LowStockAlertDTO,
)
from src.common.utils import date_utils
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.repositories.product_repository import IProductRepository
from src.inventory_domain.domain.services.alternative_ranking import (
    CatalogOrderRankingStrategy,
    IAlternativeRankingStrategy,
)

logger = logging.getLogger(__name__)

EXPIRY_CRITICAL_DAYS = 30
EXPIRY_WARNING_DAYS = 60


class InventoryAlertService:
    """Read-only scans over the catalog: low stock, soon expiring and substitutes."""

    def __init__(
        self,
        product_repo: IProductRepository,
        ranking_strategy: IAlternativeRankingStrategy | None = None,
        clock: Callable[[], date] = date_utils.today,
    ) -> None:
        self.product_repo = product_repo
        self.ranking_strategy = ranking_strategy or CatalogOrderRankingStrategy()
        self.clock = clock

    def low_stock(self) -> list[LowStockAlertDTO]:
        """Returns every product at or below its reorder level, in catalog order."""
        alerts = [
            LowStockAlertDTO(product=product, level=self._low_stock_level(product))
            for product in self.product_repo.get_all_products()
            if product.stock <= product.reorder_level
        ]
        logger.debug(f"Low stock scan found {len(alerts)} products")
        return alerts

    def soon_expiring(self, days_threshold: int | None = None) -> list[ExpiryAlertDTO]:
        """
        Returns products expiring between today and today + days_threshold,
        both bounds inclusive, in catalog order. Already expired products are excluded.
        """
        if days_threshold is None:
            days_threshold = settings.EXPIRY_THRESHOLD_DAYS
        if days_threshold < 0:
            raise ValueError("days_threshold cannot be negative.")

        today = self.clock()
        horizon = date_utils.add_days(today, days_threshold)

        alerts = []
        for product in self.product_repo.get_all_products():
            if today <= product.expiry_date <= horizon:
                days_left = date_utils.days_between(today, product.expiry_date)
                alerts.append(
                    ExpiryAlertDTO(product=product, days_to_expiry=days_left, level=self._expiry_level(days_left))
                )

        logger.debug(f"Expiry scan ({days_threshold} days) found {len(alerts)} products")
        return alerts

    def alternatives_for(self, product_id: str, max_items: int | None = None) -> list[Product]:
        """Returns up to max_items in-stock products from the same category, excluding the product itself."""
        if max_items is None:
            max_items = settings.ALTERNATIVES_MAX_ITEMS

        product = self.product_repo.get_product_by_id(product_id)
        if product is None:
            logger.warning(f"Requested alternatives for unknown product '{product_id}'")
            return []

        candidates = [
            p
            for p in self.product_repo.get_all_products()
            if p.category == product.category and p.id != product.id and p.stock > 0
        ]
        alternatives = self.ranking_strategy.rank(candidates)[: max(max_items, 0)]

        logger.info(f"Found {len(alternatives)} alternatives for {product.name} ({product.category})")
        return alternatives

    @staticmethod
    def _low_stock_level(product: Product) -> str:
        # True division: stock 10 against reorder level 21 is critical (10 <= 10.5)
        if product.stock <= product.reorder_level / 2:
            return LOW_STOCK_CRITICAL
        return LOW_STOCK_LOW

    @staticmethod
    def _expiry_level(days_to_expiry: int) -> str:
        if days_to_expiry <= EXPIRY_CRITICAL_DAYS:
            return EXPIRY_CRITICAL
        if days_to_expiry <= EXPIRY_WARNING_DAYS:
            return EXPIRY_WARNING
        return EXPIRY_ATTENTION
