"""Order domain objects."""

from __future__ import annotations

import os
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def _uuid7() -> uuid.UUID:
    """Generate a time-ordered version 7 UUID."""
    millis = _now_millis()
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


class OrderStatus(str, Enum):
    """Lifecycle state of an order."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass
class OrderItem:
    """A product and the quantity of it that is ordered."""

    product_code: str
    quantity: int


@dataclass
class Order:
    """A customer's order of one or more products."""

    id: str
    customer_id: str
    status: OrderStatus
    order_items: list[OrderItem] = field(default_factory=list)
    created_at_millis: int = 0
    updated_at_millis: int = 0


@dataclass
class ProductPrice:
    """The unit price of a product."""

    product_code: str
    unit_price_cents: int


@dataclass
class ProductStock:
    """The stock status of a product."""

    product_code: str
    available_quantity: int
    is_available: bool


def new_order(customer_id: str, order_items: list[OrderItem]) -> Order:
    """Create a pending order with a fresh time-ordered identifier."""
    now = _now_millis()
    return Order(
        id=str(_uuid7()),
        customer_id=customer_id,
        status=OrderStatus.PENDING,
        order_items=order_items,
        created_at_millis=now,
        updated_at_millis=now,
    )