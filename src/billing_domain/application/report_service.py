# src/billing_domain/application/report_service.py
"""Sales figures derived from the bill history."""

import logging
from decimal import Decimal

from src.billing_domain.domain.entities.bill import BILL_STATUSES, STATUS_PAID, STATUS_PENDING, Bill
from src.billing_domain.domain.repositories.bill_repository import IBillRepository
from src.common.dtos.billing_dtos import SalesSummaryDTO

logger = logging.getLogger(__name__)


class SalesReportService:

    def __init__(self, bill_repo: IBillRepository) -> None:
        self.bill_repo = bill_repo

    def _paid_bills(self) -> list[Bill]:
        return [bill for bill in self.bill_repo.get_all_bills() if bill.status == STATUS_PAID]

    def summary(self) -> SalesSummaryDTO:
        """Revenue counts only paid bills; pending bills are reported as outstanding."""
        bills = self.bill_repo.get_all_bills()
        paid = [bill for bill in bills if bill.status == STATUS_PAID]

        revenue = sum((bill.total for bill in paid), Decimal("0"))
        outstanding = sum((bill.total for bill in bills if bill.status == STATUS_PENDING), Decimal("0"))
        by_status = {status: 0 for status in BILL_STATUSES}
        for bill in bills:
            by_status[bill.status] += 1

        return SalesSummaryDTO(
            bill_count=len(bills),
            revenue=revenue,
            outstanding=outstanding,
            average_bill_value=revenue / len(paid) if paid else Decimal("0"),
            bills_by_status=by_status,
        )

    def sales_by_month(self) -> dict[str, Decimal]:
        """Paid revenue per `YYYY-MM`, in chronological order."""
        monthly: dict[str, Decimal] = {}
        for bill in sorted(self._paid_bills(), key=lambda b: b.date):
            month = bill.date.strftime("%Y-%m")
            monthly[month] = monthly.get(month, Decimal("0")) + bill.total
        return monthly

    def sales_by_payment_method(self) -> dict[str, Decimal]:
        by_method: dict[str, Decimal] = {}
        for bill in self._paid_bills():
            by_method[bill.payment_method] = by_method.get(bill.payment_method, Decimal("0")) + bill.total
        return by_method
