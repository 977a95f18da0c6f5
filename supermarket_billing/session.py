"""Interactive billing session."""

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Optional

from .catalog import Catalog
from .config import Settings
from .errors import InputFormatError, InvalidQuantityError, ProductNotFoundError
from .formatting import render_catalog
from .models import MAX_QUANTITY, CatalogItem, Invoice

logger = logging.getLogger(__name__)

MENU_VIEW_PRODUCTS = 1
MENU_CREATE_BILL = 2
MENU_EXIT = 3

DONE_SENTINEL = "done"


class SessionState(Enum):
    MAIN_MENU = "main_menu"
    BUILDING_INVOICE = "building_invoice"
    TERMINATED = "terminated"


def parse_menu_choice(text: str) -> int:
    """Parse a menu selection. Raises InputFormatError if it is not a number."""
    try:
        return int(text.strip())
    except ValueError:
        raise InputFormatError(text, f"a menu number ({MENU_VIEW_PRODUCTS}-{MENU_EXIT})") from None


def parse_quantity(text: str) -> int:
    """
    Parse a quantity typed by the operator.

    Raises:
        InputFormatError: the text is not a number
        InvalidQuantityError: the number is zero, negative, fractional or above MAX_QUANTITY
    """
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        raise InputFormatError(text, "a quantity") from None

    if not value.is_finite():
        raise InputFormatError(text, "a quantity")
    if value <= 0 or value > MAX_QUANTITY or value != value.to_integral_value():
        raise InvalidQuantityError(text.strip(), MAX_QUANTITY)
    return int(value)


class BillingSession:
    """Menu-driven billing session for one terminal."""

    def __init__(
        self,
        catalog: Catalog,
        settings: Optional[Settings] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.catalog = catalog
        self.settings = settings or Settings()
        self._input = input_func
        self._output = output
        self.state = SessionState.MAIN_MENU
        self.current_invoice: Optional[Invoice] = None
        self.last_invoice: Optional[Invoice] = None

    def run(self) -> int:
        """Run until the operator exits or input ends. Returns the exit code."""
        while self.state is not SessionState.TERMINATED:
            try:
                if self.state is SessionState.MAIN_MENU:
                    self.main_menu()
                else:
                    self.build_invoice()
            except EOFError:
                logger.info("End of input")
                self._end_of_input()
        return 0

    def main_menu(self) -> None:
        """Show the main menu and handle one selection."""
        self._output("\n--- Supermarket Billing System ---")
        self._output(f"{MENU_VIEW_PRODUCTS}. View Products")
        self._output(f"{MENU_CREATE_BILL}. Create New Bill")
        self._output(f"{MENU_EXIT}. Exit")
        self.handle_menu_choice(self._input("Enter your choice: "))

    def handle_menu_choice(self, text: str) -> None:
        """Apply one main menu selection to the session state."""
        try:
            choice = parse_menu_choice(text)
        except InputFormatError as e:
            logger.warning(f"Rejected menu input {text!r}")
            self._output(str(e))
            return

        if choice == MENU_VIEW_PRODUCTS:
            self.show_catalog()
        elif choice == MENU_CREATE_BILL:
            self.state = SessionState.BUILDING_INVOICE
        elif choice == MENU_EXIT:
            self._output("Thank you for using Supermarket Billing System!")
            self.state = SessionState.TERMINATED
        else:
            logger.warning(f"Menu choice out of range: {choice}")
            self._output("Invalid choice. Please try again.")

    def show_catalog(self) -> None:
        """Print the product listing."""
        self._output(render_catalog(self.catalog.list_all(), self.settings.currency))

    def build_invoice(self) -> Invoice:
        """Collect line items until the operator enters 'done', then print the bill."""
        invoice = self.current_invoice = Invoice()
        logger.info(f"Started bill {invoice.id}")

        while True:
            self.show_catalog()
            text = self._input(f"Enter Product ID (or '{DONE_SENTINEL}' to finish): ")
            if text.strip().lower() == DONE_SENTINEL:
                break

            try:
                item = self.catalog.get(text)
            except ProductNotFoundError:
                logger.warning(f"Unknown product ID {text!r}")
                self._output("Invalid Product ID!")
                continue

            self._add_item(invoice, item)

        self._complete_invoice(invoice)
        return invoice

    def _add_item(self, invoice: Invoice, item: CatalogItem) -> None:
        while True:
            text = self._input("Enter Quantity: ")
            try:
                quantity = parse_quantity(text)
                invoice.add_line(item, quantity)
            except (InputFormatError, InvalidQuantityError) as e:
                logger.warning(f"Rejected quantity {text!r} for {item.id}")
                self._output(str(e))
                continue

            logger.info(f"Bill {invoice.id}: added {quantity} x {item.id}")
            self._output(f"Added {quantity} x {item.name}.")
            return

    def _complete_invoice(self, invoice: Invoice) -> None:
        self._output(invoice.render(store_name=self.settings.store_name, currency=self.settings.currency))
        invoice.finalize()
        logger.info(
            f"Completed bill {invoice.id}: {len(invoice.lines)} line(s), total {invoice.grand_total()}"
        )
        self.last_invoice = invoice
        self.current_invoice = None
        self.state = SessionState.MAIN_MENU

    def _end_of_input(self) -> None:
        if self.current_invoice is not None and not self.current_invoice.finalized:
            self._complete_invoice(self.current_invoice)
        self.state = SessionState.TERMINATED
