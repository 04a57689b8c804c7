# src/common/config/seed_loader.py
"""Loads the seed catalog, customers and bill history from a JSON file."""

import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal

from src.billing_domain.domain.entities.bill import Bill, BillItem
from src.common.exceptions.custom_exceptions import RepositoryError
from src.customer_domain.domain.entities.customer import Customer
from src.inventory_domain.domain.entities.product import Product

logger = logging.getLogger(__name__)


@dataclass
class SeedData:
    products: list[Product] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    bills: list[Bill] = field(default_factory=list)


def _product_from_dict(data: dict) -> Product:
    return Product(
        id=data["id"],
        name=data["name"],
        category=data["category"],
        batch_no=data.get("batchNo", ""),
        expiry_date=data["expiryDate"],
        stock=int(data["stock"]),
        price=data["price"],
        reorder_level=int(data.get("reorderLevel", 0)),
        manufacturer=data.get("manufacturer", ""),
        location=data.get("location", ""),
        description=data.get("description", ""),
    )


def _customer_from_dict(data: dict) -> Customer:
    return Customer(
        id=data["id"],
        name=data["name"],
        email=data.get("email", ""),
        phone=data.get("phone", ""),
        address=data.get("address", ""),
    )


def _bill_from_dict(data: dict) -> Bill:
    items = [
        BillItem(
            id=str(item["id"]),
            product_id=str(item["productId"]),
            product_name=item["productName"],
            quantity=int(item["quantity"]),
            price=item["price"],
            tax=item.get("tax", "0"),
            discount=item.get("discount", "0"),
            total=item["total"],
        )
        for item in data.get("items", [])
    ]
    return Bill(
        id=data["id"],
        customer_id=str(data["customerId"]),
        customer_name=data.get("customerName", ""),
        items=tuple(items),
        subtotal=data["subtotal"],
        tax=data["tax"],
        discount=data.get("discount", "0"),
        total=data["total"],
        date=data["date"],
        payment_method=data.get("paymentMethod", ""),
        status=data.get("status", "paid"),
    )


def load_seed_data(seed_path: str) -> SeedData:
    """
    Reads the seed file. Amounts may be JSON strings or numbers; numbers are parsed
    as Decimal so prices keep their exact cents.
    """
    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            raw = json.load(f, parse_float=Decimal)
    except FileNotFoundError as e:
        raise RepositoryError(f"Seed data file not found at {seed_path}", original_exception=e)
    except json.JSONDecodeError as e:
        raise RepositoryError(f"Error decoding seed data from {seed_path}", original_exception=e)

    if not isinstance(raw, dict):
        raise RepositoryError("Invalid seed data format: expected an object with products/customers/bills")

    try:
        seed = SeedData(
            products=[_product_from_dict(p) for p in raw.get("products", [])],
            customers=[_customer_from_dict(c) for c in raw.get("customers", [])],
            bills=[_bill_from_dict(b) for b in raw.get("bills", [])],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise RepositoryError(f"Invalid record in seed data {seed_path}: {e}", original_exception=e)

    logger.info(
        f"Loaded seed data: {len(seed.products)} products, {len(seed.customers)} customers, {len(seed.bills)} bills"
    )
    return seed
