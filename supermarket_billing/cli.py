"""CLI entry point for the supermarket billing terminal."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .catalog import Catalog, load_catalog
from .config import Settings
from .errors import CatalogLoadError
from .session import BillingSession

logger = logging.getLogger("supermarket-billing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Supermarket Billing System")
    parser.add_argument(
        "--catalog",
        metavar="PATH",
        help="JSON file with products to load instead of the built-in catalog "
             "(default: SUPERMARKET_CATALOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. INFO or DEBUG (default: SUPERMARKET_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--currency",
        help="Currency symbol printed before amounts (default: SUPERMARKET_CURRENCY or $)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    settings = Settings.from_env()
    overrides = {
        "catalog_file": args.catalog,
        "log_level": args.log_level,
        "currency": args.currency,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as e:
        parser.error(str(e))

    # Logs go to stderr so they stay out of the printed bill
    logging.basicConfig(level=settings.log_level_number)

    try:
        if settings.catalog_file:
            catalog = load_catalog(settings.catalog_file)
        else:
            catalog = Catalog()
        logger.info(f"Catalog ready with {len(catalog)} products")
        return BillingSession(catalog, settings).run()
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting.", file=sys.stderr)
        return 0
    except CatalogLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
