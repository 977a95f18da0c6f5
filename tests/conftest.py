"""Shared fixtures."""

from decimal import Decimal

import pytest

from supermarket_billing.catalog import Catalog
from supermarket_billing.models import CatalogItem


class ScriptedTerminal:
    """Feeds prepared answers to prompts and records everything printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.printed = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, text: str) -> None:
        self.printed.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.printed)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def milk(catalog) -> CatalogItem:
    return catalog.lookup("P001")


@pytest.fixture
def eggs(catalog) -> CatalogItem:
    return catalog.lookup("P003")


@pytest.fixture
def make_terminal():
    return ScriptedTerminal


@pytest.fixture
def widget() -> CatalogItem:
    return CatalogItem(id="W100", name="Widget", unit_price=Decimal("1.99"), category="Misc", tax_code="9999")
