"""Customer repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.customer_domain.domain.entities.customer import Customer


class ICustomerRepository(ABC):
    @abstractmethod
    def get_all_customers(self) -> list[Customer]:
        """Retrieves all customers in registration order."""
        pass

    @abstractmethod
    def get_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        """Retrieves a customer by id, or None if it does not exist."""
        pass

    @abstractmethod
    def add_customer(self, customer: Customer) -> None:
        """Stores a newly registered customer."""
        pass

    @abstractmethod
    def count_customers(self) -> int:
        pass
