# src/billing_domain/application/invoice_service.py
"""Application service turning carts into bills and bills into invoices."""

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from src.billing_domain.application.cart_service import CartApplicationService
from src.billing_domain.domain.entities.bill import PAYMENT_METHODS, STATUS_PAID, Bill, BillItem
from src.billing_domain.domain.entities.cart import Cart
from src.billing_domain.domain.repositories.bill_repository import IBillRepository
from src.common.config.settings import settings
from src.common.dtos.billing_dtos import InvoiceCustomerDTO, InvoiceDTO, InvoiceItemDTO
from src.common.exceptions.custom_exceptions import (
    BillNotFoundError,
    CustomerNotFoundError,
    EmptyCartError,
    NoCustomerError,
)
from src.common.utils import date_utils
from src.customer_domain.domain.entities.customer import Customer
from src.customer_domain.domain.repositories.customer_repository import ICustomerRepository

logger = logging.getLogger(__name__)

INVOICE_PREFIX = "INV"
BILL_PREFIX = "B"
DATE_SOURCE_BILL = "bill_date"
DATE_SOURCE_GENERATION = "generation_date"


def format_bill_id(sequence: int) -> str:
    """`B` + 1-based sequence padded to 3 digits; widens past 999 instead of truncating."""
    return f"{BILL_PREFIX}{sequence:03d}"


def generate_invoice_number(bill_id: str, invoice_date: date) -> str:
    """`INV-<YYYYMMDD>-<digits of the bill id, left-padded to 4>`."""
    bill_number = "".join(ch for ch in bill_id if ch.isdigit())
    return f"{INVOICE_PREFIX}-{date_utils.format_compact_date(invoice_date)}-{bill_number.zfill(4)}"


class InvoiceApplicationService:
    """Finalizes carts into the append-only bill history and projects bills as invoices."""

    def __init__(
        self,
        bill_repo: IBillRepository,
        cart_service: CartApplicationService,
        customer_repo: Optional[ICustomerRepository] = None,
        clock: Callable[[], date] = date_utils.today,
        invoice_number_date_source: str | None = None,
    ) -> None:
        self.bill_repo = bill_repo
        self.cart_service = cart_service
        self.customer_repo = customer_repo
        self.clock = clock
        self.invoice_number_date_source = invoice_number_date_source or settings.INVOICE_NUMBER_DATE_SOURCE
        if self.invoice_number_date_source not in (DATE_SOURCE_BILL, DATE_SOURCE_GENERATION):
            raise ValueError(f"Unknown invoice number date source: {self.invoice_number_date_source}")

    def finalize(self, cart: Cart, customer: Optional[Customer], payment_method: str | None = None) -> Bill:
        """
        Converts the cart into a paid bill, appends it to the bill history and clears the cart.

        Args:
            cart: The cart to bill
            customer: The selected customer
            payment_method: Payment label; defaults to settings.DEFAULT_PAYMENT_METHOD

        Returns:
            The newly created Bill
        """
        if cart.is_empty:
            logger.warning("Finalize rejected: cart is empty")
            raise EmptyCartError()
        if customer is None:
            logger.warning("Finalize rejected: no customer selected")
            raise NoCustomerError()

        totals = self.cart_service.totals(cart)
        tax_rate = self.cart_service.tax_rate
        items = tuple(
            BillItem(
                id=str(index),
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                price=line.unit_price,
                tax=line.unit_price * line.quantity * tax_rate,
                discount=Decimal("0"),
                total=line.line_total,
            )
            for index, line in enumerate(cart.lines, 1)
        )
        issue_date = self.clock()
        payment_method = payment_method or settings.DEFAULT_PAYMENT_METHOD
        if payment_method not in PAYMENT_METHODS:
            logger.info(f"Using non-standard payment method '{payment_method}'")

        def build_bill(sequence: int) -> Bill:
            return Bill(
                id=format_bill_id(sequence),
                customer_id=customer.id,
                customer_name=customer.name,
                items=items,
                subtotal=totals.subtotal,
                tax=totals.tax,
                discount=Decimal("0"),
                total=totals.total,
                date=issue_date,
                payment_method=payment_method,
                status=STATUS_PAID,
            )

        bill = self.bill_repo.append_bill(build_bill)
        cart.clear()

        logger.info(f"Bill {bill.id} created for {customer.name}: {len(items)} lines, total {bill.total}")
        return bill

    def to_invoice_view(self, bill: Bill, customer: Customer) -> InvoiceDTO:
        """Read-only projection of a bill for display and printing."""
        if self.invoice_number_date_source == DATE_SOURCE_GENERATION:
            number_date = self.clock()
        else:
            number_date = bill.date

        return InvoiceDTO(
            invoice_number=generate_invoice_number(bill.id, number_date),
            invoice_date=date_utils.format_iso_date(bill.date),
            due_date=date_utils.format_iso_date(date_utils.add_days(bill.date, settings.INVOICE_DUE_DAYS)),
            customer_details=InvoiceCustomerDTO(
                name=customer.name,
                address=customer.address,
                email=customer.email,
                phone=customer.phone,
            ),
            items=tuple(
                InvoiceItemDTO(
                    name=item.product_name,
                    quantity=item.quantity,
                    price=item.price,
                    tax=item.tax,
                    discount=item.discount,
                    total=item.total,
                )
                for item in bill.items
            ),
            subtotal=bill.subtotal,
            tax=bill.tax,
            discount=bill.discount,
            total=bill.total,
            payment_method=bill.payment_method,
            status=bill.status,
        )

    def view_invoice(self, bill_id: str) -> InvoiceDTO:
        """Looks up a bill from history together with its customer and projects it."""
        bill = self.bill_repo.get_bill_by_id(bill_id)
        if bill is None:
            raise BillNotFoundError(bill_id)

        customer = self.customer_repo.get_customer_by_id(bill.customer_id) if self.customer_repo else None
        if customer is None:
            raise CustomerNotFoundError(bill.customer_id)
        return self.to_invoice_view(bill, customer)

    def get_bill_history(self) -> list[Bill]:
        return self.bill_repo.get_all_bills()
