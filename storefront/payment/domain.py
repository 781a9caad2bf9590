"""Payment domain objects."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from enum import Enum


class PaymentStatus(str, Enum):
    """Lifecycle state of a payment."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass
class Payment:
    """A charge made to a customer for an order."""

    id: str
    customer_id: str
    status: PaymentStatus
    order_id: str
    total_price_cents: int
    created_at_millis: int = 0
    updated_at_millis: int = 0


def new_payment(customer_id: str, order_id: str, total_price_cents: int) -> Payment:
    """Create a pending payment with a random identifier and current timestamps."""
    now = time.time_ns() // 1_000_000
    return Payment(
        id=str(uuid.uuid4()),
        customer_id=customer_id,
        status=PaymentStatus.PENDING,
        order_id=order_id,
        total_price_cents=total_price_cents,
        created_at_millis=now,
        updated_at_millis=now,
    )