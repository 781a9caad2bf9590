"""RPC-facing payment service: messages and handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.payment.application import PaymentAPI
from storefront.payment.domain import new_payment
from storefront.status import RpcError, StatusCode

logger = logging.getLogger(__name__)

_CREATE_PAYMENT = "CreatePayment"


@dataclass
class CreatePaymentRequest:
    customer_id: str = ""
    order_id: str = ""
    total_price_cents: int = 0


@dataclass
class CreatePaymentResponse:
    payment_id: str = ""


class PaymentService:
    """Handles payment RPCs by delegating to the application core."""

    def __init__(self, api: PaymentAPI) -> None:
        self._api = api

    def create_payment(self, request: CreatePaymentRequest) -> CreatePaymentResponse:
        """Charge a new payment for the request and return its identifier."""
        logger.info("call RPC %s: request = %s", _CREATE_PAYMENT, request)
        payment = new_payment(
            request.customer_id, request.order_id, request.total_price_cents
        )
        try:
            result = self._api.charge(payment)
        except Exception as err:
            error = RpcError(StatusCode.INTERNAL, f"failed to charge: {err}")
            logger.info(
                "RPC %s failed: request = %s; error = %s",
                _CREATE_PAYMENT,
                request,
                error,
            )
            raise error from err
        response = CreatePaymentResponse(payment_id=result.id)
        logger.info(
            "RPC %s success: request = %s; response = %s",
            _CREATE_PAYMENT,
            request,
            response,
        )
        return response