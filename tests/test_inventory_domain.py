import time
import uuid

from storefront.inventory.domain import (
    Product,
    ProductQuantity,
    ProductStock,
    new_product,
)


def test_new_product_copies_fields():
    product = new_product("Laptop", "Business Laptop.", 150000, 10)
    assert product.name == "Laptop"
    assert product.description == "Business Laptop."
    assert product.unit_price_cents == 150000
    assert product.quantity_in_stock == 10


def test_new_product_code_is_uuid_version_7():
    product = new_product("Cable", "HDMI cable.", 1200, 12)
    parsed = uuid.UUID(product.product_code)
    assert parsed.version == 7
    assert parsed.variant == uuid.RFC_4122
    assert str(parsed) == product.product_code


def test_new_product_codes_are_unique():
    codes = {new_product("x", "y", 1, 1).product_code for _ in range(50)}
    assert len(codes) == 50


def test_new_product_timestamps_are_current():
    before = time.time_ns() // 1_000_000
    product = new_product("Chair", "Office chair.", 15000, 0)
    after = time.time_ns() // 1_000_000
    assert before <= product.created_at_millis <= after
    assert product.created_at_millis == product.updated_at_millis


def test_uuid_embeds_creation_time():
    product = new_product("Monitor", "OLED monitor.", 11000, 3)
    embedded_ms = uuid.UUID(product.product_code).int >> 80
    assert abs(embedded_ms - product.created_at_millis) < 1000


def test_value_objects_compare_by_value():
    assert ProductQuantity("a", 2) == ProductQuantity("a", 2)
    assert ProductStock("a", 2, True) == ProductStock("a", 2, True)
    assert Product("a", "n", "d", 1, 2) == Product("a", "n", "d", 1, 2, 0, 0)