"""Inventory domain objects."""

from __future__ import annotations

import os
import time
import uuid
from dataclasses import dataclass


def _uuid7() -> uuid.UUID:
    """Generate a time-ordered version 7 UUID."""
    millis = time.time_ns() // 1_000_000
    rand = int.from_bytes(os.urandom(10), "big")
    rand_a = (rand >> 68) & 0xFFF
    rand_b = rand & ((1 << 62) - 1)
    value = (
        (millis & ((1 << 48) - 1)) << 80
        | 0x7 << 76
        | rand_a << 64
        | 0b10 << 62
        | rand_b
    )
    return uuid.UUID(int=value)


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class Product:
    """A product held in stock."""

    product_code: str
    name: str
    description: str
    unit_price_cents: int
    quantity_in_stock: int
    created_at_millis: int = 0
    updated_at_millis: int = 0


@dataclass
class ProductQuantity:
    """A quantity of a product, identified by its code."""

    product_code: str
    quantity: int


@dataclass
class ProductStock:
    """The stock status of a product."""

    product_code: str
    available_quantity: int
    is_available: bool


def new_product(
    name: str, description: str, unit_price_cents: int, quantity_in_stock: int
) -> Product:
    """Create a product with a fresh time-ordered code and current timestamps."""
    now = _now_millis()
    return Product(
        product_code=str(_uuid7()),
        name=name,
        description=description,
        unit_price_cents=unit_price_cents,
        quantity_in_stock=quantity_in_stock,
        created_at_millis=now,
        updated_at_millis=now,
    )