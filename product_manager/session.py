"""
==============================================================================
Interactive Session Module
==============================================================================

Text menu that drives the product catalog.

Menu:
-----
1. Add a new product
2. Update product price
3. View available products
4. View products by category
5. Exit

Raw answers are parsed here (see ``utils.validators``); the catalog only
receives typed values and reports outcomes, which are printed before the
menu is shown again.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from product_manager.catalog import ProductCatalog
from product_manager.schemas.common import OperationResult
from product_manager.utils import (
    PriceParser,
    ProductIdParser,
    ProductTableFormatter,
    clean_text,
    parse_available,
)


# Module logger
logger = logging.getLogger(__name__)


InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class SessionExit(Exception):
    """Raised by a menu handler to end the session loop."""


class InteractiveSession:
    """
    Menu loop over a ProductCatalog.

    Input and output are injectable so a session can be scripted.

    Example:
        >>> answers = iter(["3", "5"])
        >>> session = InteractiveSession(catalog, input_func=lambda _: next(answers))
        >>> session.run()
        0
    """

    MENU_OPTIONS = (
        ("1", "Add a new product"),
        ("2", "Update product price"),
        ("3", "View available products"),
        ("4", "View products by category"),
        ("5", "Exit"),
    )

    def __init__(
        self,
        catalog: ProductCatalog,
        input_func: Optional[InputFunc] = None,
        output: Optional[OutputFunc] = None,
        title: str = "Product Management System",
    ) -> None:
        """
        Initialize the session.

        Args:
            catalog: Catalog to operate on
            input_func: Prompt function returning one answer line (default: input)
            output: Function printing one block of text (default: print)
            title: Menu heading
        """
        self._catalog = catalog
        self._input = input_func or input
        self._output = output or print
        self._title = title
        self._id_parser = ProductIdParser()
        self._price_parser = PriceParser()
        self._formatter = ProductTableFormatter()
        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.prompt_new_product,
            "2": self.prompt_update_price,
            "3": self.show_available_products,
            "4": self.show_products_by_category,
            "5": self.exit,
        }

    # =========================================================================
    # MAIN LOOP
    # =========================================================================

    def run(self) -> int:
        """
        Show the menu until the user exits or input ends.

        Returns:
            Process exit status (0)
        """
        while True:
            self.display_menu()
            try:
                choice = self._ask("\nEnter your choice: ")
            except (EOFError, KeyboardInterrupt):
                self._output("")
                logger.info("Input closed, leaving session")
                self.exit_message()
                return 0

            try:
                self.handle_choice(choice)
            except SessionExit:
                return 0
            except (EOFError, KeyboardInterrupt):
                self._output("")
                self.exit_message()
                return 0

    def display_menu(self) -> None:
        """Print the menu."""
        lines = [f"\n{self._title}", "-" * 24]
        lines.extend(f"{key}. {label}" for key, label in self.MENU_OPTIONS)
        self._output("\n".join(lines))

    def handle_choice(self, choice: str) -> None:
        """
        Dispatch one menu choice.

        Raises:
            SessionExit: When the exit option is chosen
        """
        handler = self._handlers.get(choice.strip())
        if handler is None:
            self._output("Invalid choice. Please try again.")
            return
        handler()

    # =========================================================================
    # MENU ACTIONS
    # =========================================================================

    def prompt_new_product(self) -> None:
        """Ask for the five product fields and add the product."""
        is_valid, product_id, error = self._id_parser.parse(self._ask("Enter product ID: "))
        if not is_valid:
            self._output(f"Error adding product: {error}")
            return

        name = clean_text(self._ask("Enter product name: "))
        category = clean_text(self._ask("Enter product category: "))

        is_valid, price, error = self._price_parser.parse(self._ask("Enter product price: "))
        if not is_valid:
            self._output(f"Error adding product: {error}")
            return

        available = parse_available(self._ask("Is the product available? (true/false): "))

        result = self._catalog.add_product({
            "id": product_id,
            "name": name,
            "category": category,
            "price": price,
            "available": available,
        })
        self._report(result, "Error adding product")

    def prompt_update_price(self) -> None:
        """Ask for an id and a new price and update the product."""
        is_valid, product_id, error = self._id_parser.parse(
            self._ask("Enter the product ID to update the price: ")
        )
        if not is_valid:
            self._output(f"Error updating price: {error}")
            return

        is_valid, price, error = self._price_parser.parse(self._ask("Enter the new price: "))
        if not is_valid:
            self._output(f"Error updating price: {error}")
            return

        result = self._catalog.update_product_price(product_id, price)
        self._report(result, "Error updating price")

    def show_available_products(self) -> None:
        """Print the in-stock products."""
        self._output("\nAvailable Products:")
        self._output(self._formatter.format(self._catalog.get_available_products()))

    def show_products_by_category(self) -> None:
        """Ask for a category and print its products."""
        category = clean_text(self._ask("Enter category to filter by: "))
        self._output(f"\nProducts in category: {category}")
        self._output(self._formatter.format(self._catalog.get_products_by_category(category)))

    def exit(self) -> None:
        """Leave the session."""
        self.exit_message()
        raise SessionExit()

    def exit_message(self) -> None:
        self._output("Exiting program. Goodbye!")

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _report(self, result: OperationResult, failure_prefix: str) -> None:
        if not result.success:
            self._output(f"{failure_prefix}: {result.message}")
            return

        self._output(result.message)
        if not result.persisted:
            self._output("Warning: changes were not saved to disk.")

    @property
    def catalog(self) -> ProductCatalog:
        """Get the catalog this session operates on."""
        return self._catalog
