"""In-memory implementation of the customer repository."""

from typing import Iterable, Optional

from src.common.exceptions.custom_exceptions import RepositoryError
from src.customer_domain.domain.entities.customer import Customer
from src.customer_domain.domain.repositories.customer_repository import ICustomerRepository


class InMemoryCustomerRepository(ICustomerRepository):

    def __init__(self, customers: Iterable[Customer] = ()) -> None:
        self._customers: dict[str, Customer] = {}
        for customer in customers:
            self.add_customer(customer)

    def get_all_customers(self) -> list[Customer]:
        return list(self._customers.values())

    def get_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(str(customer_id))

    def add_customer(self, customer: Customer) -> None:
        if customer.id in self._customers:
            raise RepositoryError(f"Customer with id '{customer.id}' already exists")
        self._customers[customer.id] = customer

    def count_customers(self) -> int:
        return len(self._customers)
