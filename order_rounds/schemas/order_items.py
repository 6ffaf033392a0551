from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemStatus = Literal["pending", "preparing", "ready", "rejected"]
RoundStatus = Literal["pending", "confirmed", "preparing", "ready", "completed", "rejected"]
GlobalStatus = Literal["No rounds", "Cancelled", "All Ready", "In Progress"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def timestamp_ms(value: str) -> int:
    """Milliseconds since the epoch, truncated like a JS ``Date``."""
    delta = parse_timestamp(value) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def format_timestamp(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class OrderItemOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    group_name: str = Field(alias="groupName")
    label: str
    price: float = Field(..., ge=0, allow_inf_nan=False)


class StoredOrderItem(BaseModel):
    """One ordered unit. Quantity is always 1."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    menu_item_id: str
    name: str
    price: float = Field(..., ge=0, allow_inf_nan=False)
    options: list[OrderItemOption] = Field(default_factory=list)
    status: ItemStatus
    created_at: str
    category_name: Optional[str] = None
    special_request: Optional[str] = None

    @field_validator("options", mode="before")
    @classmethod
    def default_options(cls, value):
        return [] if value is None else value

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, value: str) -> str:
        try:
            parse_timestamp(value)
        except ValueError as exc:
            raise ValueError(f"invalid created_at timestamp: {value!r}") from exc
        return value

    @property
    def created_at_ms(self) -> int:
        return timestamp_ms(self.created_at)


class GroupedOrderItem(BaseModel):
    name: str
    options: list[OrderItemOption] = Field(default_factory=list)
    price: float
    status: ItemStatus
    count: int
    item_ids: list[str]
    created_at: str
    category_name: Optional[str] = None


class OrderRound(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    round_number: int = Field(alias="roundNumber")
    timestamp: str
    items: list[StoredOrderItem]
    special_request: Optional[str] = Field(default=None, alias="specialRequest")


class RoundSummary(OrderRound):
    status: RoundStatus
    display_groups: list[GroupedOrderItem] = Field(default_factory=list)


class OrderSummary(BaseModel):
    items_count: int
    display_groups: list[GroupedOrderItem] = Field(default_factory=list)
    rounds: list[RoundSummary] = Field(default_factory=list)
    global_status: GlobalStatus
    total: float


class CartItem(BaseModel):
    """Cart line before placement; expands into ``quantity`` stored units.

    Client-side fields such as the local line id are ignored.
    """

    model_config = ConfigDict(frozen=True)

    menu_item_id: str
    name: str
    quantity: int = Field(..., ge=1)
    price_usd: float = Field(..., ge=0, allow_inf_nan=False)
    options: list[OrderItemOption] = Field(default_factory=list)

    @field_validator("options", mode="before")
    @classmethod
    def default_options(cls, value):
        return [] if value is None else value
