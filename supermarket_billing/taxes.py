"""GST rates applied to every bill."""

from decimal import Decimal

# Central and state GST, shown as separate lines on the bill
CGST_RATE = Decimal("0.09")
SGST_RATE = Decimal("0.09")
