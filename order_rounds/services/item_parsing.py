from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from order_rounds.schemas.order_items import CartItem, StoredOrderItem

logger = logging.getLogger(__name__)


class InvalidOrderItemError(ValueError):
    def __init__(self, item_id: str, reason: str) -> None:
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"Invalid order item {item_id}: {reason}")


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid value"


def _identify(raw: Any, index: int) -> str:
    if isinstance(raw, Mapping):
        item_id = raw.get("item_id")
        if item_id not in (None, ""):
            return str(item_id)
    return f"#{index}"


def parse_order_item(raw: Any, index: int = 0) -> StoredOrderItem:
    if isinstance(raw, StoredOrderItem):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidOrderItemError(f"#{index}", "item must be an object")
    try:
        return StoredOrderItem.model_validate(dict(raw))
    except ValidationError as exc:
        item_id = _identify(raw, index)
        reason = _describe_validation_error(exc)
        logger.warning("Rejected order item", extra={"item_id": item_id})
        raise InvalidOrderItemError(item_id, reason) from exc


def parse_order_items(raw_items: Iterable[Any] | None) -> list[StoredOrderItem]:
    """Validate a raw snapshot. The first invalid record fails the whole call."""
    return [parse_order_item(raw, index) for index, raw in enumerate(raw_items or [])]


def parse_cart_items(raw_lines: Iterable[Any] | None) -> list[CartItem]:
    """Validate cart lines; failures are identified as ``cart#<index>``."""
    lines: list[CartItem] = []
    for index, raw in enumerate(raw_lines or []):
        if isinstance(raw, CartItem):
            lines.append(raw)
            continue
        if not isinstance(raw, Mapping):
            raise InvalidOrderItemError(f"cart#{index}", "cart line must be an object")
        try:
            lines.append(CartItem.model_validate(dict(raw)))
        except ValidationError as exc:
            raise InvalidOrderItemError(f"cart#{index}", _describe_validation_error(exc)) from exc
    return lines
