"""Supermarket billing terminal: product catalog, GST bills and an interactive session."""

from .catalog import Catalog, load_catalog
from .models import CatalogItem, Invoice, LineItem

__version__ = "0.1.0"
