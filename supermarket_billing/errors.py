"""Billing errors."""

from typing import Any, Optional


class BillingError(Exception):
    """Base class for recoverable billing errors."""


class InputFormatError(BillingError):
    """Raised when a number was expected but something else was typed."""

    def __init__(self, text: str, expected: str = "a number") -> None:
        self.text = text
        super().__init__(f"Please enter {expected} (got {text!r}).")


class ProductNotFoundError(BillingError):
    """Raised when a product ID is not in the catalog."""

    def __init__(self, product_id: Any) -> None:
        self.product_id = product_id
        super().__init__(f"Invalid Product ID: {product_id}")


class InvalidQuantityError(BillingError):
    """Raised when a quantity is zero, negative, fractional or too large."""

    def __init__(self, quantity: Any, limit: Optional[int] = None) -> None:
        self.quantity = quantity
        self.limit = limit
        rule = "a positive whole number" if limit is None else f"a whole number from 1 to {limit}"
        super().__init__(f"Invalid quantity: {quantity}. Quantity must be {rule}.")


class InvoiceFinalizedError(BillingError):
    """Raised when adding to a bill that has already been printed."""

    def __init__(self, invoice_id: str) -> None:
        self.invoice_id = invoice_id
        super().__init__(f"Bill {invoice_id} is already finalized")


class CatalogLoadError(BillingError):
    """Raised when a catalog file cannot be read or validated."""
