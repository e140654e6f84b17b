"""
==============================================================================
Product Table Module
==============================================================================

Plain-text table rendering for product listings shown in the menu.

Output Format:
-------------
ID  | Name    | Category | Price | Available
----+---------+----------+-------+----------
1   | Widget  | Hardware | 9.99  | yes

==============================================================================
"""

from __future__ import annotations

from typing import List, Sequence

from product_manager.catalog.models import Product


class ProductTableFormatter:
    """
    Formatter for product listings.

    Column widths adapt to the widest cell in each column.
    """

    HEADERS = ("ID", "Name", "Category", "Price", "Available")
    EMPTY_MESSAGE = "No products found."

    def format(self, products: Sequence[Product]) -> str:
        """
        Render products as an aligned text table.

        Args:
            products: Products to show, in display order

        Returns:
            Table text, or EMPTY_MESSAGE when there is nothing to show
        """
        if not products:
            return self.EMPTY_MESSAGE

        rows = [self._row(product) for product in products]
        widths = [
            max(len(cell) for cell in column)
            for column in zip(self.HEADERS, *rows)
        ]

        lines = [
            self._format_line(self.HEADERS, widths),
            "-+-".join("-" * width for width in widths),
        ]
        lines.extend(self._format_line(row, widths) for row in rows)
        lines.append(f"({len(rows)} product{'s' if len(rows) != 1 else ''})")

        return "\n".join(lines)

    def _row(self, product: Product) -> List[str]:
        return [
            str(product.id),
            product.name,
            product.category,
            self._format_price(product.price),
            "yes" if product.available else "no",
        ]

    @staticmethod
    def _format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    @staticmethod
    def _format_price(price: float) -> str:
        """Show whole prices without decimals and others with two."""
        if float(price).is_integer():
            return str(int(price))
        return f"{price:.2f}"
