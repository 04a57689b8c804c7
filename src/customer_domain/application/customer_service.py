# src/customer_domain/application/customer_service.py
"""Application service for customer records."""

import logging

from src.common.exceptions.custom_exceptions import CustomerNotFoundError
from src.customer_domain.domain.entities.customer import Customer
from src.customer_domain.domain.repositories.customer_repository import ICustomerRepository

logger = logging.getLogger(__name__)


class CustomerApplicationService:

    def __init__(self, customer_repo: ICustomerRepository) -> None:
        self.customer_repo = customer_repo

    def register_customer(self, name: str, email: str, phone: str, address: str) -> Customer:
        """Creates a customer with the next `customer-<n>` id and stores it."""
        fields = {"name": name, "email": email, "phone": phone, "address": address}
        missing = [key for key, value in fields.items() if not value or not value.strip()]
        if missing:
            raise ValueError(f"Missing required customer fields: {', '.join(missing)}")

        customer = Customer(
            id=f"customer-{self.customer_repo.count_customers() + 1}",
            **{key: value.strip() for key, value in fields.items()},
        )
        self.customer_repo.add_customer(customer)
        logger.info(f"Customer added: {customer.name} ({customer.id})")
        return customer

    def get_customer(self, customer_id: str) -> Customer:
        customer = self.customer_repo.get_customer_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def search_customers(self, query: str = "") -> list[Customer]:
        """Matches name and email case-insensitively, phone by plain substring."""
        customers = self.customer_repo.get_all_customers()
        if not query:
            return customers

        needle = query.lower()
        return [
            c for c in customers if needle in c.name.lower() or needle in c.email.lower() or query in c.phone
        ]
