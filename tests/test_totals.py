from decimal import Decimal

from order_rounds.schemas.order_items import CartItem
from order_rounds.services.totals import (
    calculate_cart_total,
    calculate_order_total,
    format_amount,
    unit_value,
)
from tests.fixtures_data import CHEESE_OPTION, HAPPY_PATH_CART, LARGE_OPTION, make_item


def test_calculate_order_total_single_pending_unit():
    assert calculate_order_total([make_item("a", price=5)]) == 5


def test_calculate_order_total_includes_option_surcharges():
    item = make_item("a", price=5, options=[LARGE_OPTION, CHEESE_OPTION])

    assert unit_value(item) == Decimal("7.25")
    assert calculate_order_total([item, make_item("b", price=2)]) == Decimal("9.25")


def test_calculate_order_total_excludes_rejected_units():
    items = [
        make_item("a", price=5, status="ready"),
        make_item("b", price=8, status="rejected", options=[LARGE_OPTION]),
    ]

    assert calculate_order_total(items) == 5
    assert calculate_order_total(items) == calculate_order_total(
        [item for item in items if item.status != "rejected"]
    )


def test_calculate_order_total_empty_and_all_rejected():
    assert calculate_order_total([]) == 0
    assert calculate_order_total([make_item("a", status="rejected")]) == 0


def test_calculate_order_total_accumulates_without_float_drift():
    items = [make_item(f"u{i}", price=0.1) for i in range(3)]

    assert calculate_order_total(items) == Decimal("0.3")


def test_calculate_cart_total_multiplies_by_quantity():
    cart = [CartItem(**line) for line in HAPPY_PATH_CART]

    # 2 x (5 + 1.5) + 1 x 2.5
    assert calculate_cart_total(cart) == Decimal("15.5")


def test_format_amount_rounds_half_up_to_cents():
    assert format_amount(Decimal("2.345")) == Decimal("2.35")
    assert format_amount(3) == Decimal("3.00")
    assert format_amount(Decimal("1.2345"), places=3) == Decimal("1.235")
