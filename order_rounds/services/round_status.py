from __future__ import annotations

from typing import List, Sequence

from order_rounds.schemas.order_items import GlobalStatus, OrderRound, RoundStatus, StoredOrderItem

GLOBAL_NO_ROUNDS = "No rounds"
GLOBAL_CANCELLED = "Cancelled"
GLOBAL_ALL_READY = "All Ready"
GLOBAL_IN_PROGRESS = "In Progress"

SETTLED_ROUND_STATUSES = {"ready", "completed", "rejected"}


def compute_round_status(items: Sequence[StoredOrderItem]) -> RoundStatus:
    """Aggregate unit statuses into one round status.

    Checked in order: all rejected, all non-rejected ready, any preparing,
    any pending (reported as ``confirmed``). ``completed`` is never produced
    here.
    """
    if not items:
        return "pending"

    statuses = [item.status for item in items]

    if all(status == "rejected" for status in statuses):
        return "rejected"

    if all(status == "ready" for status in statuses if status != "rejected"):
        return "ready"

    if "preparing" in statuses:
        return "preparing"

    if "pending" in statuses:
        return "confirmed"

    return "pending"


def compute_round_statuses(rounds: Sequence[OrderRound]) -> List[RoundStatus]:
    return [compute_round_status(order_round.items) for order_round in rounds]


def compute_global_status(rounds: Sequence[OrderRound]) -> GlobalStatus:
    if not rounds:
        return GLOBAL_NO_ROUNDS

    round_statuses = compute_round_statuses(rounds)

    if all(status == "rejected" for status in round_statuses):
        return GLOBAL_CANCELLED
    if all(status in SETTLED_ROUND_STATUSES for status in round_statuses):
        return GLOBAL_ALL_READY
    return GLOBAL_IN_PROGRESS
