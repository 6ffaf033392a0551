from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from order_rounds.schemas.order_items import CartItem, OrderSummary, RoundSummary, StoredOrderItem
from order_rounds.services.item_parsing import InvalidOrderItemError, parse_cart_items, parse_order_items
from order_rounds.services.order_summary import build_order_summary, build_round_summaries
from order_rounds.services.placement import expand_cart_items
from order_rounds.services.totals import calculate_order_total, format_amount

router = APIRouter(prefix="/api/orders", tags=["orders"])


class ItemsSnapshot(BaseModel):
    items: List[Dict[str, Any]] = Field(default_factory=list)


class PlacementRequest(ItemsSnapshot):
    cart: List[Dict[str, Any]] = Field(default_factory=list)
    special_request: Optional[str] = None


class PlacementResponse(BaseModel):
    items: List[StoredOrderItem]
    total: float


def _parse_snapshot(raw_items: List[Dict[str, Any]]) -> List[StoredOrderItem]:
    try:
        return parse_order_items(raw_items)
    except InvalidOrderItemError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _parse_cart(raw_lines: List[Dict[str, Any]]) -> List[CartItem]:
    try:
        return parse_cart_items(raw_lines)
    except InvalidOrderItemError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/summary", response_model=OrderSummary)
def order_summary(payload: ItemsSnapshot):
    items = _parse_snapshot(payload.items)
    return build_order_summary(items)


@router.post("/rounds", response_model=List[RoundSummary])
def list_rounds(payload: ItemsSnapshot):
    items = _parse_snapshot(payload.items)
    return build_round_summaries(items)


@router.post("/place", response_model=PlacementResponse)
def place_order(payload: PlacementRequest):
    existing = _parse_snapshot(payload.items)
    cart = _parse_cart(payload.cart)
    items = expand_cart_items(
        cart,
        placed_at=datetime.now(timezone.utc),
        special_request=payload.special_request,
        existing=existing,
    )
    return PlacementResponse(
        items=items,
        total=float(format_amount(calculate_order_total(items))),
    )
