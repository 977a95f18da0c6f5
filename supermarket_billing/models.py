"""Data models."""

import itertools
import time
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidQuantityError, InvoiceFinalizedError
from .formatting import render_invoice
from .taxes import CGST_RATE, SGST_RATE

# Largest quantity accepted on one line
MAX_QUANTITY = 10_000

_bill_sequence = itertools.count(1)


def generate_bill_id() -> str:
    """Generate a bill ID that is unique within this process."""
    return f"BILL-{time.time_ns() // 1_000_000}-{next(_bill_sequence):04d}"


class CatalogItem(BaseModel):
    """Product that can be put on a bill."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Product ID, e.g. P001")
    name: str = Field(description="Product name")
    unit_price: Decimal = Field(ge=0, description="Price per unit")
    category: str = Field(description="Product category")
    tax_code: str = Field(description="HSN code used for GST")


class LineItem(BaseModel):
    """A product and quantity on a bill."""

    model_config = ConfigDict(frozen=True)

    item: CatalogItem
    quantity: int = Field(gt=0, le=MAX_QUANTITY, strict=True)

    @property
    def extended_price(self) -> Decimal:
        return self.item.unit_price * self.quantity

    def tax_amount(self, rate: Decimal) -> Decimal:
        """Tax on the extended price at the given rate, unrounded."""
        return self.extended_price * rate

    @property
    def cgst(self) -> Decimal:
        return self.tax_amount(CGST_RATE)

    @property
    def sgst(self) -> Decimal:
        return self.tax_amount(SGST_RATE)


class Invoice(BaseModel):
    """
    A bill being assembled at the terminal.

    Lines are only ever appended. Once the bill has been printed it is
    finalized and further additions are rejected.
    """

    id: str = Field(default_factory=generate_bill_id, description="Bill ID")
    created_at: datetime = Field(default_factory=datetime.now, description="Bill date")
    lines: list[LineItem] = Field(default_factory=list, description="Line items in order added")
    finalized: bool = False

    def add_line(self, item: CatalogItem, quantity: int) -> LineItem:
        """
        Append a line for ``quantity`` units of ``item``.

        Raises:
            InvalidQuantityError: quantity is not a whole number from 1 to MAX_QUANTITY
            InvoiceFinalizedError: the bill has already been printed
        """
        if self.finalized:
            raise InvoiceFinalizedError(self.id)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or not 0 < quantity <= MAX_QUANTITY:
            raise InvalidQuantityError(quantity, MAX_QUANTITY)

        line = LineItem(item=item, quantity=quantity)
        self.lines.append(line)
        return line

    def finalize(self) -> None:
        self.finalized = True

    def subtotal(self) -> Decimal:
        return sum((line.extended_price for line in self.lines), Decimal("0"))

    def total_cgst(self) -> Decimal:
        return sum((line.cgst for line in self.lines), Decimal("0"))

    def total_sgst(self) -> Decimal:
        return sum((line.sgst for line in self.lines), Decimal("0"))

    def total_tax(self) -> Decimal:
        return self.total_cgst() + self.total_sgst()

    def grand_total(self) -> Decimal:
        return self.subtotal() + self.total_cgst() + self.total_sgst()

    def item_count(self) -> int:
        """Total number of units on the bill."""
        return sum(line.quantity for line in self.lines)

    def render(self, store_name: str = "SUPERMARKET BILLING SYSTEM", currency: str = "$") -> str:
        """Render the bill as printable text."""
        return render_invoice(self, store_name=store_name, currency=currency)
