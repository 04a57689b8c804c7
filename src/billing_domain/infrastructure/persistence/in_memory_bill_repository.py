# src/billing_domain/infrastructure/persistence/in_memory_bill_repository.py
"""In-memory, append-only implementation of the bill history repository."""

import logging
from threading import Lock
from typing import Callable, Iterable, Optional

from src.billing_domain.domain.entities.bill import Bill
from src.billing_domain.domain.repositories.bill_repository import IBillRepository
from src.common.exceptions.custom_exceptions import RepositoryError

logger = logging.getLogger(__name__)


class InMemoryBillRepository(IBillRepository):

    def __init__(self, bills: Iterable[Bill] = ()) -> None:
        self._bills: list[Bill] = []
        self._lock = Lock()  # Sequence allocation and append happen together
        for bill in bills:
            self._store(bill)

    def append_bill(self, build_bill: Callable[[int], Bill]) -> Bill:
        with self._lock:
            bill = build_bill(len(self._bills) + 1)
            self._store(bill)
        logger.debug(f"Bill {bill.id} appended to history")
        return bill

    def get_all_bills(self) -> list[Bill]:
        return list(self._bills)

    def get_bill_by_id(self, bill_id: str) -> Optional[Bill]:
        return next((bill for bill in self._bills if bill.id == bill_id), None)

    def count_bills(self) -> int:
        return len(self._bills)

    def _store(self, bill: Bill) -> None:
        if self.get_bill_by_id(bill.id) is not None:
            raise RepositoryError(f"Bill with id '{bill.id}' already exists")
        self._bills.append(bill)
