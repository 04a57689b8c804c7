from datetime import date
from decimal import Decimal

import pytest

from src.common.exceptions.custom_exceptions import RepositoryError
from src.inventory_domain.domain.entities.product import Product
from src.inventory_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def test_repository_preserves_catalog_order(product_repository, sample_products) -> None:
    assert [p.id for p in product_repository.get_all_products()] == [p.id for p in sample_products]


def test_get_product_by_id_accepts_int_ids(product_repository) -> None:
    assert product_repository.get_product_by_id(1).name == "Amoxicillin 500mg"
    assert product_repository.get_product_by_id("999") is None


def test_get_all_products_returns_a_copy(product_repository) -> None:
    product_repository.get_all_products().clear()

    assert len(product_repository.get_all_products()) == 12


def test_duplicate_ids_rejected(sample_products) -> None:
    with pytest.raises(RepositoryError):
        InMemoryProductRepository([sample_products[0], sample_products[0]])


def test_product_normalizes_fields() -> None:
    product = Product(
        id=42,
        name="Zinc 50mg",
        category="Vitamins",
        batch_no="ZN501",
        expiry_date="2026-06-30",
        stock=0,
        price=4.1,
        reorder_level=10,
    )

    assert product.id == "42"
    assert product.expiry_date == date(2026, 6, 30)
    assert product.price == Decimal("4.1")
    assert product.is_out_of_stock
    assert product.needs_reorder


@pytest.mark.parametrize(
    "field, value",
    [("stock", -1), ("reorder_level", -5), ("price", Decimal("-0.01"))],
)
def test_product_rejects_negative_values(field, value) -> None:
    kwargs = dict(
        id="1",
        name="Amoxicillin 500mg",
        category="Antibiotics",
        batch_no="AM5001",
        expiry_date="2026-03-15",
        stock=10,
        price=Decimal("12.99"),
        reorder_level=5,
    )
    kwargs[field] = value

    with pytest.raises(ValueError):
        Product(**kwargs)


def test_product_rejects_invalid_expiry_date() -> None:
    with pytest.raises(ValueError):
        Product("1", "Amoxicillin 500mg", "Antibiotics", "AM5001", "15/03/2026", 10, Decimal("12.99"), 5)
