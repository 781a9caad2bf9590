"""Inventory business logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from storefront.inventory.domain import (
    Product,
    ProductQuantity,
    ProductStock,
    new_product,
)

logger = logging.getLogger(__name__)

_TEST_PRODUCTS = (
    ("0190e8c4-258e-767f-94a7-b5183aea900f", "Laptop", "Business Laptop.", 150000, 10),
    ("0190e8c4-258e-7688-a8d3-6bec3ec39771", "Cable", "HDMI cable.", 1200, 12),
    ("0190e8c4-258e-768e-bf5d-d8db757fb86f", "Keyboard", "Mechanical keyboard.", 8000, 8),
    ("0190e8c4-258e-7693-ab70-c5f2da6739db", "Monitor", "OLED monitor.", 11000, 3),
    ("0190e8c4-258e-7697-8bde-98508cde1a97", "Chair", "Office chair.", 15000, 0),
)


class DBPort(Protocol):
    """Storage that the inventory application works against."""

    def get_products_by_code(self, product_codes: Sequence[str]) -> list[Product]: ...

    def update_product_stock_quantities(
        self, quantities: Sequence[ProductQuantity]
    ) -> None: ...

    def save_products(self, products: Sequence[Product]) -> None: ...


class InsufficientStockError(ValueError):
    """Raised when a reduction would leave a negative stock quantity."""

    def __init__(self) -> None:
        super().__init__("operation results in negative product stock quantity")


def _index_by_code(products: Sequence[Product]) -> dict[str, Product]:
    index: dict[str, Product] = {}
    for product in products:
        index.setdefault(product.product_code, product)
    return index


class InventoryApplication:
    """Looks up products and checks and reduces their stock."""

    def __init__(self, db: DBPort) -> None:
        self._db = db

    def get_product_details(self, product_codes: Sequence[str]) -> list[Product]:
        """Return the products that exist for the given codes."""
        return self._db.get_products_by_code(list(product_codes))

    def _lookup(self, product_quantities: Sequence[ProductQuantity]) -> dict[str, Product]:
        codes = [item.product_code for item in product_quantities]
        return _index_by_code(self._db.get_products_by_code(codes))

    def check_product_stock_quantity(
        self, product_quantities: Sequence[ProductQuantity]
    ) -> list[ProductStock]:
        """Report, per known product, whether the requested quantity is in stock."""
        products = self._lookup(product_quantities)
        return [
            ProductStock(
                product_code=product.product_code,
                available_quantity=product.quantity_in_stock,
                is_available=item.quantity <= product.quantity_in_stock,
            )
            for item in product_quantities
            if (product := products.get(item.product_code)) is not None
        ]

    def reduce_product_stock_quantity(
        self, product_quantities: Sequence[ProductQuantity]
    ) -> list[ProductStock]:
        """Subtract the requested quantities from stock and report what is left.

        Raises InsufficientStockError, without changing anything, if any
        product would go below zero.
        """
        products = self._lookup(product_quantities)
        stocks: list[ProductStock] = []
        updates: list[ProductQuantity] = []
        for item in product_quantities:
            product = products.get(item.product_code)
            if product is None:
                continue
            remaining = product.quantity_in_stock - item.quantity
            if remaining < 0:
                raise InsufficientStockError()
            updates.append(ProductQuantity(product.product_code, remaining))
            stocks.append(
                ProductStock(
                    product_code=product.product_code,
                    available_quantity=remaining,
                    is_available=remaining != 0,
                )
            )
        self._db.update_product_stock_quantities(updates)
        return stocks

    def populate_test_data(self) -> list[Product]:
        """Save a fixed set of sample products with well-known codes."""
        logger.info("creating test data ...")
        products = []
        for code, name, description, price, stock in _TEST_PRODUCTS:
            product = new_product(name, description, price, stock)
            product.product_code = code
            products.append(product)

        logger.info("saving test data to database ...")
        for product in products:
            logger.info("product = %s", product)

        self._db.save_products(products)
        return products