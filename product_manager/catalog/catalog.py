"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog kept in sync with a JSON backing store.

Features:
---------
- Tolerant loading (missing or corrupt store gives an empty catalog)
- Ordered, fail-fast validation of new products
- Whole-file save after every successful mutation
- Availability and case-insensitive category filters

Guarantees:
----------
- Product ids are pairwise distinct
- No invalid product is ever stored
- A failed mutation leaves the catalog exactly as it was

==============================================================================
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from product_manager.config import Settings
from product_manager.core import exceptions
from product_manager.core.exceptions import ProductUpdateError, ProductValidationError
from product_manager.schemas.common import OperationResult

from .models import REQUIRED_FIELDS, Product
from .storage import JsonFileStore


# Module logger
logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    """Anything the catalog can read its records from and write them to."""

    def read(self) -> Any: ...

    def write(self, data: Any) -> None: ...


def _is_number(value: Any) -> bool:
    """JSON number check; bool is an int subclass and does not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_valid_price(value: Any) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value >= 0


class ProductCatalog:
    """
    Product catalog manager backed by a persistent store.

    Owns the ordered product sequence for one session. Every public
    operation either succeeds completely or leaves the catalog unchanged,
    and reports its outcome instead of raising.

    Attributes:
        products: Copy of all products in insertion order

    Example:
        >>> catalog = ProductCatalog(JsonFileStore("products.json"))
        >>> catalog.add_product({"id": 1, "name": "Widget", "category": "Hardware",
        ...                      "price": 9.99, "available": True}).success
        True
        >>> [p.name for p in catalog.get_products_by_category("hardware")]
        ['Widget']
    """

    def __init__(self, store: ProductStore) -> None:
        """
        Initialize catalog from a backing store.

        Args:
            store: Object with ``read()`` and ``write(data)`` methods
        """
        self._store = store
        self._products: List[Product] = self.load()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProductCatalog":
        """Build a catalog over the JSON file named in settings."""
        store = JsonFileStore(settings.products_path, indent=settings.json_indent)
        return cls(store)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return [product.model_copy() for product in self._products]

    @property
    def store(self) -> ProductStore:
        """Get the backing store."""
        return self._store

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # LOADING & PERSISTENCE
    # =========================================================================

    def load(self) -> List[Product]:
        """
        Read products from the backing store.

        A missing, unreadable or malformed store yields an empty list; the
        condition is logged but never raised. Individual records that fail
        validation are skipped.

        Returns:
            Products in file order
        """
        try:
            data = self._store.read()
        except FileNotFoundError:
            logger.warning(f"Products file not found: {self._store_location}, starting empty")
            return []
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors;
            # pathologically nested arrays exhaust the decoder stack
            logger.warning(f"Error reading JSON data: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(
                f"Error reading JSON data: expected a list of products, "
                f"got {type(data).__name__}"
            )
            return []

        products: List[Product] = []
        for index, record in enumerate(data):
            try:
                self._check(record, products)
            except ProductValidationError as e:
                logger.warning(f"Skipping product at index {index}: {e.message}")
                continue
            products.append(self._build(record))

        logger.info(f"✅ Loaded {len(products)} products from {self._store_location}")
        return products

    def reload(self) -> None:
        """Reload catalog from the backing store, discarding memory state."""
        logger.info("Reloading product catalog...")
        self._products = self.load()

    def save(self) -> OperationResult:
        """
        Overwrite the backing store with the full catalog.

        Returns:
            Failed result with code PERSISTENCE_ERROR if the write failed;
            memory state is never touched
        """
        records = [product.to_record() for product in self._products]
        try:
            self._store.write(records)
        except (OSError, TypeError, ValueError) as e:
            error = exceptions.persistence_error(self._store_location, str(e))
            logger.warning(error.message)
            return OperationResult.from_exception(error, persisted=False)

        logger.debug(f"Saved {len(records)} products")
        return OperationResult.ok(f"Saved {len(records)} products")

    @property
    def _store_location(self) -> Any:
        return getattr(self._store, "path", self._store)

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self, product: Union[Mapping, Product]) -> None:
        """
        Check a candidate product against the catalog.

        Checks run in order and the first failure is raised:
        presence of all fields, id, price, availability, name and category
        text, then id uniqueness.

        Args:
            product: Mapping with the five product keys, or a Product

        Raises:
            ProductValidationError: Describing the first violated rule
        """
        self._check(product, self._products)

    @staticmethod
    def _check(product: Any, existing: Sequence[Product]) -> None:
        if isinstance(product, Product):
            product = product.to_record()

        if not isinstance(product, Mapping):
            raise exceptions.invalid_product(product)

        for field in REQUIRED_FIELDS:
            if field not in product:
                raise exceptions.missing_field(field)

        product_id = product["id"]
        if not _is_positive_int(product_id):
            raise exceptions.invalid_id(product_id)

        if not _is_valid_price(product["price"]):
            raise exceptions.invalid_price(product["price"])

        if not isinstance(product["available"], bool):
            raise exceptions.invalid_available_type(product["available"])

        name = product["name"]
        if not isinstance(name, str) or not name.strip():
            raise exceptions.invalid_name(name)

        if not isinstance(product["category"], str):
            raise exceptions.invalid_category(product["category"])

        if any(p.id == product_id for p in existing):
            raise exceptions.duplicate_id(product_id)

    @staticmethod
    def _build(record: Mapping) -> Product:
        return Product(**{field: record[field] for field in REQUIRED_FIELDS})

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_product(self, product: Union[Mapping, Product]) -> OperationResult:
        """
        Validate and append a new product, then persist the catalog.

        Args:
            product: Mapping with the five product keys, or a Product

        Returns:
            OperationResult; on validation failure the code names the rule
            and nothing was appended or saved
        """
        if isinstance(product, Product):
            product = product.to_record()

        try:
            self.validate(product)
        except ProductValidationError as e:
            logger.warning(f"Error adding product: {e.message}")
            return OperationResult.from_exception(e, persisted=False)

        new_product = self._build(product)
        self._products.append(new_product)
        logger.info(f"Added product {new_product.id} ({new_product.name})")

        saved = self.save()
        if not saved:
            return OperationResult.ok(
                f"Product added but not saved: {saved.message}",
                persisted=False,
            )
        return OperationResult.ok("New product added successfully!")

    def update_product_price(self, product_id: int, new_price: Union[int, float]) -> OperationResult:
        """
        Set the price of one product and persist the catalog.

        Only the ``price`` of the product with ``product_id`` changes.

        Args:
            product_id: Id of the product to update
            new_price: Non-negative finite number

        Returns:
            OperationResult with code INVALID_PRICE or PRODUCT_NOT_FOUND on
            failure, in which case nothing changed
        """
        try:
            if not _is_valid_price(new_price):
                raise exceptions.invalid_price_value(new_price)

            product = self._find(product_id)
            if product is None:
                raise exceptions.product_not_found(product_id)
        except ProductUpdateError as e:
            logger.warning(f"Error updating price: {e.message}")
            return OperationResult.from_exception(e, persisted=False)

        old_price = product.price
        product.price = new_price
        logger.info(f"Updated price of product {product_id}: {old_price} -> {new_price}")

        saved = self.save()
        if not saved:
            return OperationResult.ok(
                f"Price updated but not saved: {saved.message}",
                persisted=False,
            )
        return OperationResult.ok("Product price updated successfully!")

    # =========================================================================
    # QUERIES
    # =========================================================================

    def _find(self, product_id: Any) -> Optional[Product]:
        if not _is_positive_int(product_id):
            return None
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by id.

        Returns:
            Copy of the product, or None
        """
        product = self._find(product_id)
        return product.model_copy() if product is not None else None

    def get_available_products(self) -> List[Product]:
        """Get products that are in stock, in insertion order."""
        return [p.model_copy() for p in self._products if p.available]

    def get_products_by_category(self, category: str) -> List[Product]:
        """
        Get products whose category matches, ignoring case.

        Args:
            category: Category name (e.g. "Electronics" or "electronics")

        Returns:
            Matching products in insertion order
        """
        wanted = category.casefold()
        return [p.model_copy() for p in self._products if p.category.casefold() == wanted]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_categories(self) -> List[str]:
        """Get distinct categories in first-seen order."""
        seen: Dict[str, str] = {}
        for product in self._products:
            seen.setdefault(product.category.casefold(), product.category)
        return list(seen.values())

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        stats: Dict[str, Any] = {
            "total_products": len(self._products),
            "available_products": sum(1 for p in self._products if p.available),
            "categories": {}
        }

        for category in self.get_categories():
            stats["categories"][category] = len(self.get_products_by_category(category))

        return stats
