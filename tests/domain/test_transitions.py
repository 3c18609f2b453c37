"""The lifecycle tables are total: every (status, action) pair is decided."""

import itertools

from commerce.domain.model.order import (
    ORDER_TRANSITIONS,
    OrderAction,
    OrderStatus,
    order_transition,
)
from commerce.domain.model.payment import (
    PAYMENT_TRANSITIONS,
    PaymentAction,
    PaymentStatus,
    payment_transition,
)
from commerce.domain.model.product import (
    PRODUCT_TRANSITIONS,
    ProductAction,
    ProductStatus,
    product_transition,
)
from commerce.domain.result import Error


def test_product_table_covers_every_pair():
    assert set(PRODUCT_TRANSITIONS) == set(itertools.product(ProductStatus, ProductAction))


def test_order_table_covers_every_pair():
    assert set(ORDER_TRANSITIONS) == set(itertools.product(OrderStatus, OrderAction))


def test_payment_table_covers_every_pair():
    assert set(PAYMENT_TRANSITIONS) == set(itertools.product(PaymentStatus, PaymentAction))


def test_discontinued_is_a_dead_end():
    for action in ProductAction:
        assert isinstance(product_transition(ProductStatus.DISCONTINUED, action), Error)


def test_terminal_orders_refuse_everything():
    for status in (OrderStatus.PAID, OrderStatus.CANCELLED):
        for action in OrderAction:
            assert isinstance(order_transition(status, action), Error)


def test_terminal_payments_only_repeat_themselves():
    assert payment_transition(PaymentStatus.SUCCEEDED, PaymentAction.SUCCEED) is None
    assert payment_transition(PaymentStatus.FAILED, PaymentAction.FAIL) is None
    assert isinstance(payment_transition(PaymentStatus.SUCCEEDED, PaymentAction.FAIL), Error)
    assert isinstance(payment_transition(PaymentStatus.FAILED, PaymentAction.SUCCEED), Error)
