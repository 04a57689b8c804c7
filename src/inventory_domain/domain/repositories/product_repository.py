# src/inventory_domain/domain/repositories/product_repository.py
"""Product catalog repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.inventory_domain.domain.entities.product import Product


class IProductRepository(ABC):

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Retrieves every product in catalog order."""
        pass

    @abstractmethod
    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        """Retrieves a single product, or None if it does not exist."""
        pass

    @abstractmethod
    def add_product(self, product: Product) -> None:
        """Appends a new product to the end of the catalog."""
        pass
