from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from order_rounds.schemas.order_items import CartItem, OrderItemOption, StoredOrderItem

ZERO = Decimal("0")


def _to_decimal(value: float | int | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _options_total(options: Iterable[OrderItemOption]) -> Decimal:
    return sum((_to_decimal(option.price) for option in options), ZERO)


def unit_value(item: StoredOrderItem) -> Decimal:
    return _to_decimal(item.price) + _options_total(item.options)


def calculate_order_total(items: Sequence[StoredOrderItem]) -> Decimal:
    """Sum of base price plus option surcharges over non-rejected units."""
    return sum((unit_value(item) for item in items if item.status != "rejected"), ZERO)


def calculate_cart_total(cart: Sequence[CartItem]) -> Decimal:
    total = ZERO
    for line in cart:
        line_unit = _to_decimal(line.price_usd) + _options_total(line.options)
        total += line_unit * line.quantity
    return total


def format_amount(value: float | int | Decimal, places: int = 2) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return _to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
