"""Data Transfer Objects: plain containers that cross the API boundary.

Request DTOs carry what a client submitted, unvalidated: field types are
what the wire *should* hold, but nothing is enforced until the
``OrderInputValidator`` has looked at them.  Response DTOs describe orders
as returned to a client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ecshop.domain.model.order import OrderStatus
from ecshop.domain.model.value_objects import Money


def wire_name(attribute: str) -> str:
    """Map a snake_case attribute to its camelCase JSON key."""
    head, *rest = attribute.split("_")
    return head + "".join(part.capitalize() for part in rest)


# --- Requests ---------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemRequest:
    """Input: one product the customer wants, and how many."""

    product_id: int | None
    quantity: int | None


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: a proposed order with its shipping address.

    ``shipping_phone`` and ``notes`` are None when not provided; an empty
    string is a provided value.
    """

    items: list[OrderItemRequest]
    shipping_name: str
    shipping_postal_code: str
    shipping_prefecture: str
    shipping_city: str
    shipping_address_line: str
    shipping_phone: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class UpdateOrderStatusRequest:
    """Input: the status the order should move to (name or integer code)."""

    status: object


# --- Responses --------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemResponse:
    """Output: a single line item with its product snapshot."""

    id: int
    product_id: int
    product_name: str
    quantity: int
    price: Money
    subtotal: Money
    product_description: str | None = None

    @staticmethod
    def create(
        id: int,
        product_id: int,
        product_name: str,
        quantity: int,
        price: Money,
        product_description: str | None = None,
    ) -> OrderItemResponse:
        """Build a line item view whose subtotal is quantity x price."""
        return OrderItemResponse(
            id=id,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            price=price,
            subtotal=price * quantity,
            product_description=product_description,
        )


@dataclass(frozen=True)
class OrderSummaryResponse:
    """Output: one row of an order list."""

    id: int
    order_date: datetime
    status: OrderStatus
    total_amount: Money
    item_count: int

    @property
    def status_text(self) -> str:
        return self.status.display_text


@dataclass(frozen=True)
class OrderResponse:
    """Output: a complete order as returned to its owner."""

    id: int
    user_id: int
    order_date: datetime
    status: OrderStatus
    total_amount: Money
    shipping_name: str
    shipping_postal_code: str
    shipping_prefecture: str
    shipping_city: str
    shipping_address_line: str
    created_at: datetime
    updated_at: datetime
    shipping_phone: str | None = None
    notes: str | None = None
    items: list[OrderItemResponse] = field(default_factory=list)

    @property
    def status_text(self) -> str:
        return self.status.display_text

    @property
    def item_count(self) -> int:
        return len(self.items)

    def summary(self) -> OrderSummaryResponse:
        return OrderSummaryResponse(
            id=self.id,
            order_date=self.order_date,
            status=self.status,
            total_amount=self.total_amount,
            item_count=self.item_count,
        )

    @staticmethod
    def items_total(items: list[OrderItemResponse], currency: str = "JPY") -> Money:
        """Sum of item subtotals, for collaborators assembling a view."""
        result = Money.zero(currency)
        for item in items:
            result = result + item.subtotal
        return result
