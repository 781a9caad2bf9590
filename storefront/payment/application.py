"""Payment business logic."""

from __future__ import annotations

from typing import Protocol

from storefront.payment.domain import Payment


class PaymentAPI(Protocol):
    """Inbound operations that the payment core offers."""

    def charge(self, payment: Payment) -> Payment: ...


class PaymentApplication:
    """Charges payments and keeps a record of them by payment id."""

    def __init__(self) -> None:
        self._charged: dict[str, Payment] = {}

    def charge(self, payment: Payment) -> Payment:
        """Charge a payment, record it and return it."""
        self._charged[payment.id] = payment
        return payment