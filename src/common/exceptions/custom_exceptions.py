"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class RepositoryError(ApplicationError):
    """Exception raised for errors while loading or storing records."""

    def __init__(self, message: str = "Repository operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Repository Error: {message}"


# --- Lookup errors ---


class NotFoundError(ApplicationError):
    """Base class for lookups of records that do not exist."""


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class CustomerNotFoundError(NotFoundError):
    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer '{customer_id}' not found")
        self.customer_id = customer_id


class BillNotFoundError(NotFoundError):
    def __init__(self, bill_id: str) -> None:
        super().__init__(f"Bill '{bill_id}' not found")
        self.bill_id = bill_id


# --- Billing validation errors ---


class BillingError(ApplicationError):
    """Base class for recoverable cart and checkout validation failures."""


class OutOfStockError(BillingError):
    """Raised when a product with no stock is added to a cart."""

    def __init__(self, product_id: str, product_name: str | None = None) -> None:
        label = product_name or product_id
        super().__init__(f"{label} is currently out of stock")
        self.product_id = product_id


class InvalidQuantityError(BillingError):
    """Raised when a cart line quantity is set below 1."""

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Quantity must be at least 1, got {quantity}")
        self.quantity = quantity


class EmptyCartError(BillingError):
    def __init__(self) -> None:
        super().__init__("Cannot finalize a bill from an empty cart")


class NoCustomerError(BillingError):
    def __init__(self) -> None:
        super().__init__("A customer must be selected before finalizing a bill")
