# src/billing_domain/domain/repositories/bill_repository.py
"""Bill history repository interface."""
from abc import ABC, abstractmethod
from typing import Callable, Optional

from src.billing_domain.domain.entities.bill import Bill


class IBillRepository(ABC):

    @abstractmethod
    def append_bill(self, build_bill: Callable[[int], Bill]) -> Bill:
        """
        Atomically allocates the next 1-based sequence number (history length + 1),
        builds the bill with it and appends it to the history.
        """
        pass

    @abstractmethod
    def get_all_bills(self) -> list[Bill]:
        """Retrieves the full bill history in append order."""
        pass

    @abstractmethod
    def get_bill_by_id(self, bill_id: str) -> Optional[Bill]:
        """Retrieves a bill by its id, or None if it does not exist."""
        pass

    @abstractmethod
    def count_bills(self) -> int:
        pass
