import pytest

from storefront.inventory.application import InventoryApplication
from storefront.inventory.memory_db import InMemoryDB
from storefront.inventory.rpc import (
    CheckProductStockQuantityRequest,
    GetProductDetailsRequest,
    InventoryService,
    ProductDetails,
    ProductQuantity,
    ProductStock,
    ReduceProductStockQuantityRequest,
)
from storefront.status import RpcError, StatusCode

LAPTOP = "0190e8c4-258e-767f-94a7-b5183aea900f"
MONITOR = "0190e8c4-258e-7693-ab70-c5f2da6739db"
CHAIR = "0190e8c4-258e-7697-8bde-98508cde1a97"


class _BrokenAPI:
    def get_product_details(self, product_codes):
        raise RuntimeError("kaboom")

    def check_product_stock_quantity(self, product_quantities):
        raise RuntimeError("kaboom")

    def reduce_product_stock_quantity(self, product_quantities):
        raise RuntimeError("kaboom")


@pytest.fixture
def service():
    app = InventoryApplication(InMemoryDB())
    app.populate_test_data()
    return InventoryService(app)


def test_get_product_details(service):
    response = service.get_product_details(GetProductDetailsRequest([MONITOR]))
    assert response.product_details == [
        ProductDetails(MONITOR, "Monitor", "OLED monitor.", 11000)
    ]


def test_get_product_details_empty(service):
    response = service.get_product_details(GetProductDetailsRequest([]))
    assert response.product_details == []


def test_check_stock(service):
    response = service.check_product_stock_quantity(
        CheckProductStockQuantityRequest(
            [ProductQuantity(MONITOR, 3), ProductQuantity(CHAIR, 1)]
        )
    )
    assert response.products == [
        ProductStock(MONITOR, 3, True),
        ProductStock(CHAIR, 0, False),
    ]


def test_reduce_stock_then_check(service):
    reduced = service.reduce_product_stock_quantity(
        ReduceProductStockQuantityRequest([ProductQuantity(MONITOR, 3)])
    )
    assert reduced.products == [ProductStock(MONITOR, 0, False)]
    checked = service.check_product_stock_quantity(
        CheckProductStockQuantityRequest([ProductQuantity(MONITOR, 1)])
    )
    assert checked.products[0].is_available is False


def test_reduce_too_much_is_internal_error(service):
    with pytest.raises(RpcError) as info:
        service.reduce_product_stock_quantity(
            ReduceProductStockQuantityRequest([ProductQuantity(LAPTOP, 11)])
        )
    assert info.value.code is StatusCode.INTERNAL
    assert "negative product stock quantity" in info.value.message


def test_get_details_failure_is_internal():
    service = InventoryService(_BrokenAPI())
    with pytest.raises(RpcError) as info:
        service.get_product_details(GetProductDetailsRequest(["a"]))
    assert info.value.code is StatusCode.INTERNAL
    assert info.value.message == "failed to get product details: kaboom"


def test_check_failure_is_invalid_argument():
    service = InventoryService(_BrokenAPI())
    with pytest.raises(RpcError) as info:
        service.check_product_stock_quantity(
            CheckProductStockQuantityRequest([ProductQuantity("a", 1)])
        )
    assert info.value.code is StatusCode.INVALID_ARGUMENT
    assert info.value.message.endswith("kaboom")


def test_reduce_failure_is_internal():
    service = InventoryService(_BrokenAPI())
    with pytest.raises(RpcError) as info:
        service.reduce_product_stock_quantity(
            ReduceProductStockQuantityRequest([ProductQuantity("a", 1)])
        )
    assert info.value.code is StatusCode.INTERNAL
    assert isinstance(info.value.__cause__, RuntimeError)