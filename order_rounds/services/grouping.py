from __future__ import annotations

import json
import logging
from typing import Dict, List, Sequence, Tuple

from order_rounds.schemas.order_items import GroupedOrderItem, OrderRound, StoredOrderItem

logger = logging.getLogger(__name__)

# Measured from the first unit of the round; the window does not slide.
ROUND_WINDOW_MS = 60 * 1000


def _options_key(item: StoredOrderItem) -> str:
    return json.dumps(
        [option.model_dump(by_alias=True) for option in item.options],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def _display_key(item: StoredOrderItem) -> Tuple[str, str, str]:
    return item.name, _options_key(item), item.status


def group_display_items(items: Sequence[StoredOrderItem]) -> List[GroupedOrderItem]:
    """Collapse units sharing name, options (order-sensitive) and status.

    Groups come back ordered by their earliest ``created_at``.
    """
    groups: Dict[Tuple[str, str, str], dict] = {}

    for item in items:
        key = _display_key(item)
        item_time = item.created_at_ms
        group = groups.get(key)
        if group is None:
            groups[key] = {
                "first": item,
                "count": 1,
                "item_ids": [item.item_id],
                "created_at": item.created_at,
                "created_at_ms": item_time,
            }
            continue
        group["count"] += 1
        group["item_ids"].append(item.item_id)
        if item_time < group["created_at_ms"]:
            group["created_at"] = item.created_at
            group["created_at_ms"] = item_time

    ordered = sorted(groups.values(), key=lambda group: group["created_at_ms"])
    return [
        GroupedOrderItem(
            name=group["first"].name,
            options=list(group["first"].options),
            price=group["first"].price,
            status=group["first"].status,
            count=group["count"],
            item_ids=group["item_ids"],
            created_at=group["created_at"],
            category_name=group["first"].category_name,
        )
        for group in ordered
    ]


def group_round_items(items: Sequence[StoredOrderItem]) -> List[GroupedOrderItem]:
    return group_display_items(items)


def group_items_by_status(items: Sequence[StoredOrderItem]) -> Dict[str, List[StoredOrderItem]]:
    buckets: Dict[str, List[StoredOrderItem]] = {}
    for item in items:
        status = item.status or "pending"
        buckets.setdefault(status, []).append(item)
    return buckets


def _round_special_request(members: Sequence[StoredOrderItem]) -> str | None:
    for member in members:
        if member.special_request:
            return member.special_request
    return None


def _close_round(round_number: int, timestamp: str, members: List[StoredOrderItem]) -> OrderRound:
    return OrderRound(
        round_number=round_number,
        timestamp=timestamp,
        items=members,
        special_request=_round_special_request(members),
    )


def group_into_rounds(items: Sequence[StoredOrderItem]) -> List[OrderRound]:
    """Split units into placement rounds using a fixed one-minute window.

    A unit joins the open round while it was created at most
    ``ROUND_WINDOW_MS`` after the round's first unit; otherwise the round is
    closed and the unit opens the next one.
    """
    timed = sorted(((item.created_at_ms, item) for item in items), key=lambda entry: entry[0])

    rounds: List[OrderRound] = []
    current_round: List[StoredOrderItem] = []
    window_origin_ms = 0
    window_origin = ""

    for item_time, item in timed:
        if current_round and item_time - window_origin_ms <= ROUND_WINDOW_MS:
            current_round.append(item)
            continue
        if current_round:
            rounds.append(_close_round(len(rounds) + 1, window_origin, current_round))
        current_round = [item]
        window_origin_ms = item_time
        window_origin = item.created_at

    if current_round:
        rounds.append(_close_round(len(rounds) + 1, window_origin, current_round))

    logger.debug("Grouped order items into rounds", extra={"rounds": len(rounds)})
    return rounds
