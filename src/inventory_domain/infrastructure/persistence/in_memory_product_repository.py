# src/inventory_domain/infrastructure/persistence/in_memory_product_repository.py
"""In-memory implementation of the product catalog repository."""

import logging
from typing import Iterable, Optional

from src.common.exceptions.custom_exceptions import RepositoryError
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(IProductRepository):
    """Process-local catalog snapshot. Insertion order is catalog order."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            self.add_product(product)

    def get_all_products(self) -> list[Product]:
        return list(self._products.values())

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return self._products.get(str(product_id))

    def add_product(self, product: Product) -> None:
        if product.id in self._products:
            raise RepositoryError(f"Product with id '{product.id}' already exists")
        self._products[product.id] = product
        logger.debug(f"Product {product.id} stored in catalog")
