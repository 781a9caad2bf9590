from storefront.payment.application import PaymentApplication
from storefront.payment.domain import PaymentStatus, new_payment


def test_charge_returns_same_payment():
    payment = new_payment("customer", "order", 1500)
    result = PaymentApplication().charge(payment)
    assert result is payment


def test_charge_leaves_payment_unchanged():
    payment = new_payment("customer", "order", 1500)
    snapshot = (
        payment.id,
        payment.customer_id,
        payment.status,
        payment.order_id,
        payment.total_price_cents,
    )
    result = PaymentApplication().charge(payment)
    assert (
        result.id,
        result.customer_id,
        result.status,
        result.order_id,
        result.total_price_cents,
    ) == snapshot
    assert result.status is PaymentStatus.PENDING