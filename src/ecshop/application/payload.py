"""Mapping between JSON payloads and the DTOs.

Parsing is deliberately lenient: a missing key becomes None and a value of
the wrong type is carried through unchanged, so that the validator can
report it alongside every other problem.  Only a payload that is not a JSON
object at all is refused here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from ecshop.application.dto import (
    CreateOrderRequest,
    OrderItemRequest,
    OrderItemResponse,
    OrderResponse,
    OrderSummaryResponse,
    UpdateOrderStatusRequest,
    wire_name,
)
from ecshop.domain.exceptions import PayloadError
from ecshop.domain.model.order import OrderStatus
from ecshop.domain.model.value_objects import Money

_SHIPPING_ATTRIBUTES = (
    "shipping_name",
    "shipping_postal_code",
    "shipping_prefecture",
    "shipping_city",
    "shipping_address_line",
    "shipping_phone",
    "notes",
)


def _require_object(data: object, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise PayloadError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


# --- Requests ---------------------------------------------------------------


def _parse_item(raw: object) -> object:
    # Non-objects are kept so the validator can point at their index.
    if not isinstance(raw, Mapping):
        return raw
    return OrderItemRequest(
        product_id=raw.get("productId"),
        quantity=raw.get("quantity"),
    )


def parse_create_order_request(data: object) -> CreateOrderRequest:
    """Build a CreateOrderRequest from a decoded JSON object."""
    payload = _require_object(data, "Order request")

    raw_items = payload.get("items")
    items = [_parse_item(i) for i in raw_items] if isinstance(raw_items, list) else raw_items

    return CreateOrderRequest(
        items=items,  # type: ignore[arg-type]
        **{attr: payload.get(wire_name(attr)) for attr in _SHIPPING_ATTRIBUTES},
    )


def parse_update_status_request(data: object) -> UpdateOrderStatusRequest:
    payload = _require_object(data, "Status update")
    return UpdateOrderStatusRequest(status=payload.get("status"))


# --- Responses --------------------------------------------------------------


def _money(value: object, currency: str) -> Money:
    return Money.of(value, currency)  # type: ignore[arg-type]


def _amount(money: Money) -> str:
    return str(money.amount)


def _parse_order_item(raw: Mapping[str, Any], currency: str) -> OrderItemResponse:
    item = OrderItemResponse.create(
        id=raw["id"],
        product_id=raw["productId"],
        product_name=raw["productName"],
        product_description=raw.get("productDescription"),
        quantity=raw["quantity"],
        price=_money(raw["price"], currency),
    )
    if item.subtotal != _money(raw["subtotal"], currency):
        raise PayloadError(
            f"Order item #{item.id} subtotal {raw['subtotal']} does not match "
            f"quantity x price ({_amount(item.subtotal)})"
        )
    return item


def parse_order_response(data: object, currency: str = "JPY") -> OrderResponse:
    """Rebuild an OrderResponse from its own JSON form (see ``order_to_dict``)."""
    payload = _require_object(data, "Order")
    try:
        items = [_parse_order_item(i, currency) for i in payload.get("items", [])]
        return OrderResponse(
            id=payload["id"],
            user_id=payload["userId"],
            order_date=datetime.fromisoformat(payload["orderDate"]),
            status=OrderStatus.parse(payload["status"]),
            total_amount=_money(payload["totalAmount"], currency),
            shipping_name=payload["shippingName"],
            shipping_postal_code=payload["shippingPostalCode"],
            shipping_prefecture=payload["shippingPrefecture"],
            shipping_city=payload["shippingCity"],
            shipping_address_line=payload["shippingAddressLine"],
            shipping_phone=payload.get("shippingPhone"),
            notes=payload.get("notes"),
            created_at=datetime.fromisoformat(payload["createdAt"]),
            updated_at=datetime.fromisoformat(payload["updatedAt"]),
            items=items,
        )
    except KeyError as exc:
        raise PayloadError(f"Order is missing key {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise PayloadError(f"Order is malformed: {exc}") from exc


def order_item_to_dict(item: OrderItemResponse) -> dict[str, Any]:
    return {
        "id": item.id,
        "productId": item.product_id,
        "productName": item.product_name,
        "productDescription": item.product_description,
        "quantity": item.quantity,
        "price": _amount(item.price),
        "subtotal": _amount(item.subtotal),
    }


def order_to_dict(order: OrderResponse) -> dict[str, Any]:
    return {
        "id": order.id,
        "userId": order.user_id,
        "orderDate": order.order_date.isoformat(),
        "status": order.status.name,
        "statusText": order.status_text,
        "totalAmount": _amount(order.total_amount),
        "shippingName": order.shipping_name,
        "shippingPostalCode": order.shipping_postal_code,
        "shippingPrefecture": order.shipping_prefecture,
        "shippingCity": order.shipping_city,
        "shippingAddressLine": order.shipping_address_line,
        "shippingPhone": order.shipping_phone,
        "notes": order.notes,
        "createdAt": order.created_at.isoformat(),
        "updatedAt": order.updated_at.isoformat(),
        "items": [order_item_to_dict(item) for item in order.items],
    }


def order_summary_to_dict(summary: OrderSummaryResponse) -> dict[str, Any]:
    return {
        "id": summary.id,
        "orderDate": summary.order_date.isoformat(),
        "status": summary.status.name,
        "statusText": summary.status_text,
        "totalAmount": _amount(summary.total_amount),
        "itemCount": summary.item_count,
    }
