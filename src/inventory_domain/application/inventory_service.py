# src/inventory_domain/application/inventory_service.py
"""Application service for browsing and maintaining the product catalog."""

import logging

from src.common.exceptions.custom_exceptions import ProductNotFoundError
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("name", "category", "stock", "price", "expiry_date")
ALL_CATEGORIES = "all"


class InventoryApplicationService:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def get_product(self, product_id: str) -> Product:
        product = self.product_repo.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def add_product(self, product: Product) -> None:
        """Registers a new product at the end of the catalog."""
        self.product_repo.add_product(product)
        logger.info(f"Added product {product.id}: {product.name} (stock {product.stock})")

    def get_categories(self) -> list[str]:
        """Distinct categories in the order they first appear in the catalog."""
        return list(dict.fromkeys(p.category for p in self.product_repo.get_all_products()))

    def search_products(
        self,
        query: str = "",
        category: str | None = None,
        sort_by: str = "name",
        descending: bool = False,
    ) -> list[Product]:
        """
        Filters the catalog by a case-insensitive name substring and an optional
        category, then sorts by one of SORTABLE_FIELDS.

        Args:
            query: Substring to look for in product names; empty matches everything
            category: Category to keep; None or "all" keeps every category
            sort_by: Product field to sort on
            descending: Reverse the sort order

        Returns:
            The matching products
        """
        if sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{sort_by}'. Expected one of: {', '.join(SORTABLE_FIELDS)}")

        needle = query.strip().lower()
        matches = [
            p
            for p in self.product_repo.get_all_products()
            if needle in p.name.lower() and (category in (None, ALL_CATEGORIES) or p.category == category)
        ]

        def sort_key(product: Product):
            value = getattr(product, sort_by)
            return value.lower() if isinstance(value, str) else value

        return sorted(matches, key=sort_key, reverse=descending)

    def category_distribution(self) -> dict[str, int]:
        """Number of catalog products per category."""
        distribution: dict[str, int] = {}
        for product in self.product_repo.get_all_products():
            distribution[product.category] = distribution.get(product.category, 0) + 1
        return distribution
