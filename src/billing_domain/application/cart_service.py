# src/billing_domain/application/cart_service.py
"""Application service accumulating a billing cart and its totals."""

import logging
from decimal import Decimal

from src.billing_domain.domain.entities.cart import Cart, CartLine
from src.common.config.settings import settings
from src.common.dtos.billing_dtos import CartTotalsDTO
from src.common.exceptions.custom_exceptions import InvalidQuantityError, OutOfStockError
from src.inventory_domain.domain.entities.product import Product

logger = logging.getLogger(__name__)


class CartApplicationService:
    """
    Cart mutations and totals. Catalog stock is only read here, never reserved or
    decremented. Every mutation either applies fully or raises before touching the cart.
    """

    def __init__(self, tax_rate: Decimal | None = None) -> None:
        self.tax_rate = settings.TAX_RATE if tax_rate is None else tax_rate

    def add_item(self, cart: Cart, product: Product) -> CartLine:
        """Adds one unit of the product, merging into an existing line for the same product."""
        if product.stock <= 0:
            logger.warning(f"Cannot add {product.name} to cart: out of stock")
            raise OutOfStockError(product.id, product.name)

        line = cart.get_line(product.id)
        if line is not None:
            line.quantity += 1
        else:
            line = CartLine(product_id=product.id, product_name=product.name, unit_price=product.price)
            cart.lines.append(line)

        logger.debug(f"Cart: {product.name} x{line.quantity}")
        return line

    def remove_item(self, cart: Cart, product_id: str) -> None:
        cart.lines[:] = [line for line in cart.lines if line.product_id != product_id]

    def set_quantity(self, cart: Cart, product_id: str, quantity: int) -> None:
        """Sets a line's quantity. Use remove_item to drop a line instead of setting 0."""
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        line = cart.get_line(product_id)
        if line is not None:
            line.quantity = quantity

    def totals(self, cart: Cart) -> CartTotalsDTO:
        subtotal = sum((line.line_total for line in cart.lines), Decimal("0"))
        tax = subtotal * self.tax_rate
        return CartTotalsDTO(subtotal=subtotal, tax=tax, total=subtotal + tax)
