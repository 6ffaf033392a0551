"""Reusable order-item payloads for engine and API tests."""

from datetime import datetime, timedelta, timezone

from order_rounds.schemas.order_items import StoredOrderItem, format_timestamp

BASE_TIME = datetime(2026, 1, 10, 12, 0, 0, tzinfo=timezone.utc)

LARGE_OPTION = {"groupName": "Size", "label": "Large", "price": 1.5}
CHEESE_OPTION = {"groupName": "Add-ons", "label": "Cheese", "price": 0.75}


def at(offset_ms: int = 0) -> str:
    return format_timestamp(BASE_TIME + timedelta(milliseconds=offset_ms))


def order_item_payload(
    item_id: str,
    *,
    name: str = "Burger Classic",
    price: float = 5,
    status: str = "pending",
    offset_ms: int = 0,
    options: list | None = None,
    special_request: str | None = None,
    category_name: str | None = None,
) -> dict:
    payload = {
        "item_id": item_id,
        "menu_item_id": f"menu-{name.lower().replace(' ', '-')}",
        "name": name,
        "price": price,
        "options": options or [],
        "status": status,
        "created_at": at(offset_ms),
    }
    if special_request is not None:
        payload["special_request"] = special_request
    if category_name is not None:
        payload["category_name"] = category_name
    return payload


def make_item(item_id: str, **kwargs) -> StoredOrderItem:
    return StoredOrderItem(**order_item_payload(item_id, **kwargs))


HAPPY_PATH_SNAPSHOT = [
    order_item_payload("u1", status="ready", offset_ms=0, special_request="No onions"),
    order_item_payload("u2", status="ready", offset_ms=0, special_request="No onions"),
    order_item_payload("u3", name="Iced Tea", price=2.5, status="rejected", offset_ms=30_000),
    order_item_payload("u4", name="Fries", price=3, status="preparing", offset_ms=120_000, options=[CHEESE_OPTION]),
]

HAPPY_PATH_CART = [
    {
        "menu_item_id": "menu-burger-classic",
        "name": "Burger Classic",
        "quantity": 2,
        "price_usd": 5,
        "options": [LARGE_OPTION],
    },
    {
        "menu_item_id": "menu-iced-tea",
        "name": "Iced Tea",
        "quantity": 1,
        "price_usd": 2.5,
    },
]
