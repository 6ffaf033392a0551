from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, List, Sequence

from order_rounds.schemas.order_items import CartItem, StoredOrderItem, format_timestamp

logger = logging.getLogger(__name__)


def _new_item_id() -> str:
    return str(uuid.uuid4())


def expand_cart_items(
    cart: Sequence[CartItem],
    *,
    placed_at: datetime,
    special_request: str | None = None,
    existing: Sequence[StoredOrderItem] = (),
    id_factory: Callable[[], str] = _new_item_id,
) -> List[StoredOrderItem]:
    """Turn cart lines into stored units for one placement.

    Already placed units are kept as they are. Each cart line yields
    ``quantity`` pending units that share the placement time and note.
    """
    created_at = format_timestamp(placed_at)
    note = special_request or None

    expanded: List[StoredOrderItem] = list(existing)
    for line in cart:
        for _ in range(line.quantity):
            expanded.append(
                StoredOrderItem(
                    item_id=id_factory(),
                    menu_item_id=line.menu_item_id,
                    name=line.name,
                    price=line.price_usd,
                    options=list(line.options),
                    status="pending",
                    created_at=created_at,
                    special_request=note,
                )
            )

    logger.info(
        "Expanded cart into order units existing=%s added=%s",
        len(existing),
        len(expanded) - len(existing),
    )
    return expanded
