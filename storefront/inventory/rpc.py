"""RPC-facing inventory service: messages and handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from storefront.inventory import domain
from storefront.inventory.application import InventoryApplication
from storefront.status import RpcError, StatusCode

logger = logging.getLogger(__name__)

_R = TypeVar("_R")


@dataclass
class ProductDetails:
    product_code: str
    name: str
    description: str
    unit_price_cents: int


@dataclass
class ProductQuantity:
    product_code: str
    quantity: int


@dataclass
class ProductStock:
    product_code: str
    available_quantity: int
    is_available: bool


@dataclass
class GetProductDetailsRequest:
    product_codes: list[str] = field(default_factory=list)


@dataclass
class GetProductDetailsResponse:
    product_details: list[ProductDetails] = field(default_factory=list)


@dataclass
class CheckProductStockQuantityRequest:
    products: list[ProductQuantity] = field(default_factory=list)


@dataclass
class CheckProductStockQuantityResponse:
    products: list[ProductStock] = field(default_factory=list)


@dataclass
class ReduceProductStockQuantityRequest:
    products: list[ProductQuantity] = field(default_factory=list)


@dataclass
class ReduceProductStockQuantityResponse:
    products: list[ProductStock] = field(default_factory=list)


def _to_domain(items: list[ProductQuantity]) -> list[domain.ProductQuantity]:
    return [domain.ProductQuantity(i.product_code, i.quantity) for i in items]


def _to_message(stocks: list[domain.ProductStock]) -> list[ProductStock]:
    return [
        ProductStock(s.product_code, s.available_quantity, s.is_available)
        for s in stocks
    ]


class InventoryService:
    """Handles inventory RPCs by delegating to the application core."""

    def __init__(self, api: InventoryApplication) -> None:
        self._api = api

    def _call(self, name: str, request: object, handler: Callable[[], _R]) -> _R:
        logger.info("call RPC %s: request = %s", name, request)
        try:
            response = handler()
        except RpcError as err:
            logger.info("RPC %s failed: request = %s; error = %s", name, request, err)
            raise
        logger.info("RPC %s success: request = %s; response = %s", name, request, response)
        return response

    def get_product_details(
        self, request: GetProductDetailsRequest
    ) -> GetProductDetailsResponse:
        def handle() -> GetProductDetailsResponse:
            try:
                products = self._api.get_product_details(request.product_codes)
            except Exception as err:
                raise RpcError(
                    StatusCode.INTERNAL, f"failed to get product details: {err}"
                ) from err
            return GetProductDetailsResponse(
                [
                    ProductDetails(
                        p.product_code, p.name, p.description, p.unit_price_cents
                    )
                    for p in products
                ]
            )

        return self._call("GetProductDetails", request, handle)

    def check_product_stock_quantity(
        self, request: CheckProductStockQuantityRequest
    ) -> CheckProductStockQuantityResponse:
        def handle() -> CheckProductStockQuantityResponse:
            try:
                stocks = self._api.check_product_stock_quantity(
                    _to_domain(request.products)
                )
            except Exception as err:
                raise RpcError(
                    StatusCode.INVALID_ARGUMENT,
                    "failed to check stock quantities of the requested products: "
                    f"{err}",
                ) from err
            return CheckProductStockQuantityResponse(_to_message(stocks))

        return self._call("CheckProductStockQuantity", request, handle)

    def reduce_product_stock_quantity(
        self, request: ReduceProductStockQuantityRequest
    ) -> ReduceProductStockQuantityResponse:
        def handle() -> ReduceProductStockQuantityResponse:
            try:
                stocks = self._api.reduce_product_stock_quantity(
                    _to_domain(request.products)
                )
            except Exception as err:
                raise RpcError(
                    StatusCode.INTERNAL,
                    "failed to reduce stock quantities of the requested products: "
                    f"{err}",
                ) from err
            return ReduceProductStockQuantityResponse(_to_message(stocks))

        return self._call("ReduceProductStockQuantity", request, handle)