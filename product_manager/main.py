"""
==============================================================================
Product Management System - Application Entry Point
==============================================================================

Interactive inventory manager with:
- JSON file backed product catalog
- Validation of every new product
- Text menu for adding, repricing and filtering products

Usage:
------
    # Default products file (products.json or $PRODUCT_MANAGER_PRODUCTS_FILE)
    python -m product_manager

    # Explicit products file
    product-manager --file data/products.json

Exit Status:
-----------
    0  user chose Exit (or input ended)
    1  unexpected failure during startup or the session

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from product_manager.catalog import ProductCatalog
from product_manager.config import Settings, get_settings
from product_manager.session import InteractiveSession


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Application bootstrap and lifecycle.

    Handles:
    - Logging setup
    - Catalog loading
    - Running the interactive session
    """

    def __init__(self, settings: Settings, session_factory=InteractiveSession):
        """
        Initialize the application.

        Args:
            settings: Resolved settings
            session_factory: Callable building the session from a catalog
        """
        self._settings = settings
        self._session_factory = session_factory
        self._catalog: Optional[ProductCatalog] = None

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.debug(f"Settings: {self._settings!r}")

        self._catalog = ProductCatalog.from_settings(self._settings)
        logger.info(
            f"✅ {len(self._catalog)} products loaded from {self._settings.products_path}"
        )

    def run(self) -> int:
        """
        Start up and run the session.

        Returns:
            Exit status from the session
        """
        self._startup()
        session = self._session_factory(self._catalog, title=self._settings.app_name)
        status = session.run()
        logger.info("✅ Session finished")
        return status

    @property
    def catalog(self) -> Optional[ProductCatalog]:
        """Get the loaded catalog (None before startup)."""
        return self._catalog


# ============================================================================
# SETUP HELPERS
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-manager",
        description="Interactive JSON-backed product inventory manager",
    )
    parser.add_argument(
        "-f", "--file",
        dest="products_file",
        help="Path to the products JSON file (overrides PRODUCT_MANAGER_PRODUCTS_FILE)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable verbose logging",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    overrides = {
        key: value
        for key, value in (("products_file", args.products_file), ("debug", args.debug))
        if value is not None
    }
    if not overrides:
        return get_settings()
    return get_settings().model_copy(update=overrides)


# ============================================================================
# ENTRY POINT
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the product manager.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error(f"❌ Invalid configuration: {e}")
        return 1

    configure_logging(settings)

    try:
        return Application(settings).run()
    except Exception:
        logger.exception("❌ Application error")
        return 1
