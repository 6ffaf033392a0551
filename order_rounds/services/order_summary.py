from __future__ import annotations

from typing import Sequence

from order_rounds.schemas.order_items import OrderSummary, RoundSummary, StoredOrderItem
from order_rounds.services.grouping import group_display_items, group_into_rounds, group_round_items
from order_rounds.services.round_status import compute_global_status, compute_round_status
from order_rounds.services.totals import calculate_order_total, format_amount


def build_round_summaries(items: Sequence[StoredOrderItem]) -> list[RoundSummary]:
    return [
        RoundSummary(
            round_number=order_round.round_number,
            timestamp=order_round.timestamp,
            items=order_round.items,
            special_request=order_round.special_request,
            status=compute_round_status(order_round.items),
            display_groups=group_round_items(order_round.items),
        )
        for order_round in group_into_rounds(items)
    ]


def build_order_summary(items: Sequence[StoredOrderItem]) -> OrderSummary:
    """Everything the order screens show for one snapshot.

    The total is rounded to cents here; accumulation itself is exact.
    """
    rounds = build_round_summaries(items)
    return OrderSummary(
        items_count=len(items),
        display_groups=group_display_items(items),
        rounds=rounds,
        global_status=compute_global_status(rounds),
        total=float(format_amount(calculate_order_total(items))),
    )
