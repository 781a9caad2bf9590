"""A thread-safe in-memory product store."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from storefront.inventory.domain import Product, ProductQuantity


class InMemoryDB:
    """Keeps products in a dictionary keyed by product code."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._lock = threading.Lock()

    def get_products_by_code(self, product_codes: Iterable[str]) -> list[Product]:
        """Return the stored products for the given codes, skipping unknown ones."""
        with self._lock:
            return [
                self._products[code]
                for code in product_codes
                if code in self._products
            ]

    def update_product_stock_quantities(
        self, quantities: Iterable[ProductQuantity]
    ) -> None:
        """Set the stock quantity of each known product; the last entry for a code wins."""
        updated = {item.product_code: item.quantity for item in quantities}
        with self._lock:
            for code, quantity in updated.items():
                product = self._products.get(code)
                if product is not None:
                    product.quantity_in_stock = quantity

    def save_products(self, products: Iterable[Product]) -> None:
        """Insert or replace products by their code."""
        with self._lock:
            for product in products:
                self._products[product.product_code] = product