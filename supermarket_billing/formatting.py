"""Text rendering for the catalog and for printed bills."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import TYPE_CHECKING, Iterable

from .taxes import CGST_RATE, SGST_RATE

if TYPE_CHECKING:
    from .models import CatalogItem, Invoice

CENTS = Decimal("0.01")
RULE_WIDTH = 44
LABEL_WIDTH = 17


def format_money(amount: Decimal, currency: str = "$") -> str:
    """Format an amount with two decimals, rounding half up."""
    amount = Decimal(amount)
    with localcontext() as ctx:
        # Enough digits for the integer part plus cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return f"{currency}{amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


def format_rate(rate: Decimal) -> str:
    """Format a tax rate as a percentage label, e.g. ``9%``."""
    percent = (rate * 100).normalize()
    return f"{percent:f}%"


def render_catalog(items: Iterable["CatalogItem"], currency: str = "$") -> str:
    """Render the product listing shown before each product prompt."""
    lines = ["Available Products:"]
    for item in items:
        lines.append(
            f"{item.id} - {item.name} (HSN: {item.tax_code}): {format_money(item.unit_price, currency)}"
        )
    return "\n".join(lines)


def _total_row(label: str, amount: Decimal, currency: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{format_money(amount, currency)}"


def render_invoice(
    invoice: "Invoice",
    store_name: str = "SUPERMARKET BILLING SYSTEM",
    currency: str = "$",
) -> str:
    """
    Render a bill in the printed receipt layout.

    Amounts are rounded for display only; the invoice totals are exact.
    """
    lines = [
        "=" * RULE_WIDTH,
        store_name,
        f"Bill ID: {invoice.id}",
        f"Date: {invoice.created_at:%Y-%m-%d %H:%M:%S}",
        "-" * RULE_WIDTH,
        "ITEM DETAILS:",
    ]

    if not invoice.lines:
        lines.append("(no items)")
    for line in invoice.lines:
        unit = format_money(line.item.unit_price, currency)
        extended = format_money(line.extended_price, currency)
        lines.append(f"{line.item.name:<20} {line.quantity:>3} x {unit:<9} {extended:>9}")

    lines.extend([
        "-" * RULE_WIDTH,
        "TAX BREAKDOWN:",
        _total_row("Subtotal:", invoice.subtotal(), currency),
        _total_row(f"CGST ({format_rate(CGST_RATE)}):", invoice.total_cgst(), currency),
        _total_row(f"SGST ({format_rate(SGST_RATE)}):", invoice.total_sgst(), currency),
        _total_row("Total GST:", invoice.total_tax(), currency),
        _total_row("Total Bill:", invoice.grand_total(), currency),
        f"Items: {invoice.item_count()}",
        "=" * RULE_WIDTH,
    ])
    return "\n".join(lines)
