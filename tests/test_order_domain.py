import time
import uuid

from storefront.order.domain import Order, OrderItem, OrderStatus, new_order


def _millis():
    return time.time_ns() // 1_000_000


def test_new_order_is_pending_with_given_fields():
    items = [OrderItem("abc", 2), OrderItem("def", 1)]
    order = new_order("customer-1", items)
    assert order.status is OrderStatus.PENDING
    assert order.customer_id == "customer-1"
    assert order.order_items == items


def test_new_order_id_is_uuid_version_7():
    order = new_order("customer-1", [])
    parsed = uuid.UUID(order.id)
    assert parsed.version == 7
    assert parsed.variant == uuid.RFC_4122
    assert str(parsed) == order.id


def test_new_order_ids_are_unique():
    ids = {new_order("c", []).id for _ in range(50)}
    assert len(ids) == 50


def test_new_order_timestamps_are_current():
    before = _millis()
    order = new_order("c", [])
    after = _millis()
    assert before <= order.created_at_millis <= after
    assert order.created_at_millis == order.updated_at_millis


def test_order_status_values():
    assert OrderStatus.PENDING.value == "Pending"
    assert OrderStatus.COMPLETED.value == "Completed"
    assert OrderStatus.FAILED.value == "Failed"
    assert str(OrderStatus.CANCELLED) == "Cancelled"
    assert OrderStatus("Failed") is OrderStatus.FAILED


def test_order_defaults_to_no_items():
    order = Order(id="x", customer_id="c", status=OrderStatus.PENDING)
    assert order.order_items == []