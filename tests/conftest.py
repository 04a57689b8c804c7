# tests/conftest.py
from datetime import date
from decimal import Decimal

import pytest

from src.billing_domain.application.cart_service import CartApplicationService
from src.billing_domain.application.invoice_service import InvoiceApplicationService
from src.billing_domain.domain.entities.bill import Bill, BillItem
from src.billing_domain.domain.entities.cart import Cart
from src.billing_domain.infrastructure.persistence.in_memory_bill_repository import InMemoryBillRepository
from src.common.config.settings import settings
from src.customer_domain.domain.entities.customer import Customer
from src.customer_domain.infrastructure.persistence.in_memory_customer_repository import (
    InMemoryCustomerRepository,
)
from src.inventory_domain.application.alert_service import InventoryAlertService
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

FIXED_TODAY = date(2025, 4, 10)


@pytest.fixture(autouse=True)
def mock_billing_settings(mocker) -> None:
    """Pins billing settings so a local .env cannot change test expectations."""
    mocker.patch.object(settings, "TAX_RATE", Decimal("0.10"))
    mocker.patch.object(settings, "INVOICE_DUE_DAYS", 30)
    mocker.patch.object(settings, "INVOICE_NUMBER_DATE_SOURCE", "bill_date")
    mocker.patch.object(settings, "DEFAULT_PAYMENT_METHOD", "Cash")
    mocker.patch.object(settings, "EXPIRY_THRESHOLD_DAYS", 90)
    mocker.patch.object(settings, "ALTERNATIVES_MAX_ITEMS", 3)
    mocker.patch.object(settings, "CURRENCY_SYMBOL", "$")


@pytest.fixture
def fixed_clock():
    """Clock returning FIXED_TODAY (2025-04-10)."""
    return lambda: FIXED_TODAY


def make_product(product_id: str, name: str, category: str, stock: int, price: str, reorder_level: int, expiry: str):
    return Product(
        id=product_id,
        name=name,
        category=category,
        batch_no=f"BATCH-{product_id}",
        expiry_date=expiry,
        stock=stock,
        price=Decimal(price),
        reorder_level=reorder_level,
        manufacturer="Test Pharma",
        location="Shelf T-01",
    )


@pytest.fixture
def sample_products() -> list[Product]:
    """Catalog with expiry dates chosen relative to FIXED_TODAY."""
    return [
        make_product("1", "Amoxicillin 500mg", "Antibiotics", 120, "12.99", 30, "2026-03-15"),
        make_product("2", "Paracetamol 500mg", "Pain Relief", 210, "5.49", 50, "2025-05-22"),  # 42 days
        make_product("3", "Cetirizine 10mg", "Allergy", 0, "8.99", 20, "2025-11-30"),
        make_product("4", "Metformin 850mg", "Diabetes", 75, "15.79", 25, "2025-04-16"),  # 6 days
        make_product("5", "Atorvastatin 20mg", "Cardiovascular", 65, "22.50", 20, "2025-08-01"),  # 113 days
        make_product("6", "Omeprazole 20mg", "Gastrointestinal", 45, "18.25", 15, "2025-02-28"),  # expired
        make_product("7", "Vitamin D3 1000IU", "Vitamins", 180, "9.99", 40, "2026-12-10"),
        make_product("8", "Aspirin 75mg", "Cardiovascular", 15, "6.49", 30, "2026-01-15"),
        make_product("9", "Loratadine 10mg", "Allergy", 40, "7.49", 10, "2025-07-09"),  # exactly 90 days
        make_product("10", "Fexofenadine 120mg", "Allergy", 0, "13.50", 10, "2026-05-01"),
        make_product("11", "Desloratadine 5mg", "Allergy", 25, "11.20", 10, "2026-02-01"),
        make_product("12", "Levocetirizine 5mg", "Allergy", 7, "6.80", 10, "2025-06-09"),  # 60 days
    ]


@pytest.fixture
def product_repository(sample_products) -> InMemoryProductRepository:
    return InMemoryProductRepository(sample_products)


@pytest.fixture
def sample_customer() -> Customer:
    return Customer(
        id="1",
        name="John Smith",
        email="john.smith@email.com",
        phone="555-123-4567",
        address="123 Main St, Anytown, ST 12345",
    )


@pytest.fixture
def customer_repository(sample_customer) -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository(
        [
            sample_customer,
            Customer(
                id="2",
                name="Emma Johnson",
                email="emma.johnson@email.com",
                phone="555-987-6543",
                address="456 Oak Ave, Somewhere, ST 67890",
            ),
        ]
    )


@pytest.fixture
def historical_bill() -> Bill:
    return Bill(
        id="B001",
        customer_id="1",
        customer_name="John Smith",
        items=(
            BillItem("1", "1", "Amoxicillin 500mg", 2, Decimal("12.99"), Decimal("1.82"), Decimal("0"), Decimal("25.98")),
            BillItem("2", "2", "Paracetamol 500mg", 1, Decimal("5.49"), Decimal("0.77"), Decimal("0"), Decimal("5.49")),
        ),
        subtotal=Decimal("31.47"),
        tax=Decimal("2.59"),
        discount=Decimal("0"),
        total=Decimal("34.06"),
        date=date(2025, 4, 8),
        payment_method="Credit Card",
        status="paid",
    )


@pytest.fixture
def bill_repository(historical_bill) -> InMemoryBillRepository:
    return InMemoryBillRepository([historical_bill])


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def cart_service() -> CartApplicationService:
    return CartApplicationService()


@pytest.fixture
def invoice_service(bill_repository, cart_service, customer_repository, fixed_clock) -> InvoiceApplicationService:
    return InvoiceApplicationService(
        bill_repository, cart_service, customer_repo=customer_repository, clock=fixed_clock
    )


@pytest.fixture
def alert_service(product_repository, fixed_clock) -> InventoryAlertService:
    return InventoryAlertService(product_repository, clock=fixed_clock)
