# main.py
"""Main application entry point for the pharmacy billing and inventory alerts engine."""

import logging
import sys
import time
from dataclasses import dataclass

import pytz
import schedule

from src.billing_domain.application.cart_service import CartApplicationService
from src.billing_domain.application.invoice_service import InvoiceApplicationService
from src.billing_domain.application.report_service import SalesReportService
from src.billing_domain.domain.entities.bill import PAYMENT_CREDIT_CARD
from src.billing_domain.domain.entities.cart import Cart
from src.billing_domain.infrastructure.persistence.in_memory_bill_repository import InMemoryBillRepository
from src.billing_domain.infrastructure.presenters.rich_invoice_printer import RichInvoicePrinter
from src.common.config.seed_loader import load_seed_data
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError, BillingError, OutOfStockError
from src.common.logger_config import setup_logging
from src.common.utils.currency_utils import format_currency
from src.customer_domain.application.customer_service import CustomerApplicationService
from src.customer_domain.infrastructure.persistence.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from src.inventory_domain.application.alert_service import InventoryAlertService
from src.inventory_domain.application.inventory_service import InventoryApplicationService
from src.inventory_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class PharmacyServices:
    inventory: InventoryApplicationService
    alerts: InventoryAlertService
    customers: CustomerApplicationService
    cart: CartApplicationService
    invoices: InvoiceApplicationService
    reports: SalesReportService


def setup_dependencies(seed_path: str = settings.SEED_DATA_PATH) -> PharmacyServices:
    """Loads seed data and wires up repositories and application services."""
    seed = load_seed_data(seed_path)

    product_repository = InMemoryProductRepository(seed.products)
    customer_repository = InMemoryCustomerRepository(seed.customers)
    bill_repository = InMemoryBillRepository(seed.bills)

    cart_service = CartApplicationService()
    return PharmacyServices(
        inventory=InventoryApplicationService(product_repository),
        alerts=InventoryAlertService(product_repository),
        customers=CustomerApplicationService(customer_repository),
        cart=cart_service,
        invoices=InvoiceApplicationService(bill_repository, cart_service, customer_repo=customer_repository),
        reports=SalesReportService(bill_repository),
    )


def run_inventory_alert_report(services: PharmacyServices) -> None:
    """Logs low-stock and soon-expiring products. Scheduled to run daily."""
    logger.info(f"{'='*60}")
    logger.info("📦 INVENTORY ALERT REPORT")
    logger.info(f"{'='*60}")

    low_stock = services.alerts.low_stock()
    logger.info(f"Low stock products: {len(low_stock)}")
    for alert in low_stock:
        logger.info(
            f"   [{alert.level.upper()}] {alert.product.name}: {alert.product.stock} in stock "
            f"(reorder at {alert.product.reorder_level})"
        )

    expiring = services.alerts.soon_expiring()
    logger.info(f"Expiring within {settings.EXPIRY_THRESHOLD_DAYS} days: {len(expiring)}")
    for alert in expiring:
        logger.info(
            f"   [{alert.level.upper()}] {alert.product.name} (batch {alert.product.batch_no}) "
            f"expires {alert.product.expiry_date} in {alert.days_to_expiry} days"
        )


def run_demo_checkout(services: PharmacyServices) -> None:
    """Bills a sample cart for the first customer and prints the invoice."""
    cart = Cart()
    customer = services.customers.search_customers()[0]

    for product in services.inventory.search_products(category="Cardiovascular"):
        try:
            services.cart.add_item(cart, product)
        except OutOfStockError as e:
            logger.warning(f"{e}. Alternatives: {[p.name for p in services.alerts.alternatives_for(e.product_id)]}")

    amoxicillin = services.inventory.search_products(query="amoxicillin")[0]
    services.cart.add_item(cart, amoxicillin)
    services.cart.add_item(cart, amoxicillin)

    totals = services.cart.totals(cart)
    logger.info(
        f"Cart: subtotal {format_currency(totals.subtotal)}, tax {format_currency(totals.tax)}, "
        f"total {format_currency(totals.total)}"
    )

    try:
        bill = services.invoices.finalize(cart, customer, payment_method=PAYMENT_CREDIT_CARD)
    except BillingError as e:
        logger.error(f"❌ Checkout failed: {e}")
        return

    RichInvoicePrinter().render(services.invoices.to_invoice_view(bill, customer))

    summary = services.reports.summary()
    logger.info(
        f"📊 {summary.bill_count} bills, revenue {format_currency(summary.revenue)}, "
        f"outstanding {format_currency(summary.outstanding)}"
    )


def main(argv: list[str]) -> int:
    setup_logging()
    logger.info(f"🎯 {settings.PHARMACY_NAME} billing & inventory alerts")

    try:
        services = setup_dependencies()
        run_inventory_alert_report(services)
        run_demo_checkout(services)
    except ApplicationError as e:
        logger.error(f"💥 {e}")
        return 1

    if "--schedule" not in argv:
        return 0

    pharmacy_tz = pytz.timezone(settings.PHARMACY_TIMEZONE)
    schedule.every().day.at(settings.ALERT_REPORT_TIME, pharmacy_tz).do(run_inventory_alert_report, services)
    logger.info(f"⏰ Alert report scheduled daily at {settings.ALERT_REPORT_TIME} ({settings.PHARMACY_TIMEZONE})")
    while True:
        schedule.run_pending()
        time.sleep(30)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
