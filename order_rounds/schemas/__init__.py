from order_rounds.schemas.order_items import (
    CartItem,
    GroupedOrderItem,
    OrderItemOption,
    OrderRound,
    OrderSummary,
    RoundSummary,
    StoredOrderItem,
)

__all__ = [
    "CartItem",
    "GroupedOrderItem",
    "OrderItemOption",
    "OrderRound",
    "OrderSummary",
    "RoundSummary",
    "StoredOrderItem",
]
