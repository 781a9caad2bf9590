"""Adapters that let the order core call the inventory and payment services."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Protocol

from storefront.inventory import rpc as inventory_rpc
from storefront.order.config import Config
from storefront.order.domain import Order, OrderItem, ProductPrice, ProductStock
from storefront.payment import rpc as payment_rpc

logger = logging.getLogger(__name__)


class InventoryClient(Protocol):
    """A client of the inventory service; it may also offer close()."""

    def get_product_details(
        self, request: inventory_rpc.GetProductDetailsRequest
    ) -> inventory_rpc.GetProductDetailsResponse: ...

    def check_product_stock_quantity(
        self, request: inventory_rpc.CheckProductStockQuantityRequest
    ) -> inventory_rpc.CheckProductStockQuantityResponse: ...

    def reduce_product_stock_quantity(
        self, request: inventory_rpc.ReduceProductStockQuantityRequest
    ) -> inventory_rpc.ReduceProductStockQuantityResponse: ...


class PaymentClient(Protocol):
    """A client of the payment service; it may also offer close()."""

    def create_payment(
        self, request: payment_rpc.CreatePaymentRequest
    ) -> payment_rpc.CreatePaymentResponse: ...


def inventory_address(config: Config) -> str:
    """The host:port endpoint of the inventory service."""
    return f"{config.inventory_service_host}:{config.inventory_service_grpc_port}"


def payment_address(config: Config) -> str:
    """The host:port endpoint of the payment service."""
    return f"{config.payment_service_host}:{config.payment_service_grpc_port}"


def _close_client(client: object, service: str) -> None:
    close = getattr(client, "close", None)
    if close is None:
        return
    try:
        close()
    except Exception as err:
        logger.warning(
            "failed to close client connection to %s service: %s", service, err
        )


def _quantities(order_items: Sequence[OrderItem]) -> list[inventory_rpc.ProductQuantity]:
    return [
        inventory_rpc.ProductQuantity(item.product_code, item.quantity)
        for item in order_items
    ]


class InventoryAdapter:
    """Implements the inventory port over an inventory service client."""

    def __init__(self, client: InventoryClient) -> None:
        self._client = client

    def get_product_prices(self, product_codes: Sequence[str]) -> list[ProductPrice]:
        response = self._client.get_product_details(
            inventory_rpc.GetProductDetailsRequest(list(product_codes))
        )
        return [
            ProductPrice(details.product_code, details.unit_price_cents)
            for details in response.product_details
        ]

    def check_product_stock_quantities(
        self, order_items: Sequence[OrderItem]
    ) -> list[ProductStock]:
        response = self._client.check_product_stock_quantity(
            inventory_rpc.CheckProductStockQuantityRequest(_quantities(order_items))
        )
        return [
            ProductStock(s.product_code, s.available_quantity, s.is_available)
            for s in response.products
        ]

    def reduce_product_stock_quantities(self, order_items: Sequence[OrderItem]) -> None:
        self._client.reduce_product_stock_quantity(
            inventory_rpc.ReduceProductStockQuantityRequest(_quantities(order_items))
        )

    def close(self) -> None:
        """Close the client, logging rather than raising on failure."""
        _close_client(self._client, "inventory")

    def __enter__(self) -> InventoryAdapter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class PaymentAdapter:
    """Implements the payment port over a payment service client."""

    def __init__(self, client: PaymentClient) -> None:
        self._client = client

    def create_payment(self, order: Order, total_price_cents: int) -> None:
        self._client.create_payment(
            payment_rpc.CreatePaymentRequest(
                customer_id=order.customer_id,
                order_id=order.id,
                total_price_cents=total_price_cents,
            )
        )

    def close(self) -> None:
        """Close the client, logging rather than raising on failure."""
        _close_client(self._client, "payment")

    def __enter__(self) -> PaymentAdapter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()