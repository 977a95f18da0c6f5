"""Product catalog."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import TypeAdapter, ValidationError

from .errors import CatalogLoadError, ProductNotFoundError
from .models import CatalogItem

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS: tuple[CatalogItem, ...] = (
    CatalogItem(id="P001", name="Milk", unit_price=Decimal("3.50"), category="Dairy", tax_code="0404"),
    CatalogItem(id="P002", name="Bread", unit_price=Decimal("2.25"), category="Bakery", tax_code="1905"),
    CatalogItem(id="P003", name="Eggs", unit_price=Decimal("4.00"), category="Dairy", tax_code="0407"),
    CatalogItem(id="P004", name="Cheese", unit_price=Decimal("5.50"), category="Dairy", tax_code="0406"),
    CatalogItem(id="P005", name="Apple", unit_price=Decimal("0.50"), category="Fruits", tax_code="0808"),
)

_items_adapter = TypeAdapter(list[CatalogItem])


class Catalog:
    """In-memory product catalog keyed by product ID."""

    def __init__(self, items: Optional[Iterable[CatalogItem]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            items: Products to load (default: the built-in seed products)
        """
        self._items: dict[str, CatalogItem] = {}
        for item in DEFAULT_PRODUCTS if items is None else items:
            self.add(item)

    def add(self, item: CatalogItem) -> None:
        """Insert a product, replacing any product with the same ID."""
        if item.id in self._items:
            logger.debug(f"Replacing product {item.id}")
        self._items[item.id] = item

    def lookup(self, product_id: object) -> Optional[CatalogItem]:
        """Return the product with this ID, or None if there is none."""
        if not isinstance(product_id, str):
            return None
        return self._items.get(product_id.strip())

    def get(self, product_id: object) -> CatalogItem:
        """Return the product with this ID. Raises ProductNotFoundError if there is none."""
        item = self.lookup(product_id)
        if item is None:
            raise ProductNotFoundError(product_id)
        return item

    def list_all(self) -> list[CatalogItem]:
        """Return all products in the order they were added."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        return self.lookup(product_id) is not None


def load_catalog(path: Union[str, Path]) -> Catalog:
    """
    Load a catalog from a JSON file.

    The file must contain a list of objects with ``id``, ``name``,
    ``unit_price``, ``category`` and ``tax_code``.

    Raises:
        CatalogLoadError: the file is missing, not JSON, or fails validation
    """
    path = Path(path).expanduser()
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Could not read catalog file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file {path} is not valid JSON: {e}") from e

    try:
        items = _items_adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(f"Catalog file {path} has invalid products: {e}") from e

    logger.info(f"Loaded {len(items)} products from {path}")
    return Catalog(items)
