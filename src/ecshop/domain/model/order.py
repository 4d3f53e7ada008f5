"""Order status enumeration and the field limits of an order request.

The status set is closed: a value is either one of the six members below or
it is rejected.  There is no fallback member.
"""

from __future__ import annotations

from enum import Enum

from ecshop.domain.exceptions import ValidationError


class OrderStatus(Enum):
    # (wire code, display text)
    PENDING = (0, "Pending")
    CONFIRMED = (1, "Confirmed")
    PROCESSING = (2, "Processing")
    SHIPPED = (3, "Shipped")
    DELIVERED = (4, "Delivered")
    CANCELLED = (5, "Cancelled")

    def __init__(self, code: int, display_text: str) -> None:
        self.code = code
        self.display_text = display_text

    @classmethod
    def parse(cls, raw: object, field: str = "status") -> OrderStatus:
        """Resolve a submitted status value to a member.

        Accepts a member (returned as is), a member name in any case, or the
        integer code.  Raises ``ValidationError`` for anything else.
        """
        if isinstance(raw, OrderStatus):
            return raw
        if isinstance(raw, str):
            member = cls.__members__.get(raw.strip().upper())
            if member is not None:
                return member
        elif isinstance(raw, int) and not isinstance(raw, bool):
            for member in cls:
                if member.code == raw:
                    return member
        expected = ", ".join(status.name for status in cls)
        raise ValidationError.single(
            field, f"unrecognized order status {raw!r}; expected one of {expected}"
        )


# ---------------------------------------------------------------------------
# Constants for request validation (maximum lengths, inclusive)
# ---------------------------------------------------------------------------
SHIPPING_FIELD_LIMITS: dict[str, int] = {
    "shipping_name": 100,
    "shipping_postal_code": 10,
    "shipping_prefecture": 50,
    "shipping_city": 100,
    "shipping_address_line": 200,
}
MAX_PHONE_LENGTH = 20
MAX_NOTES_LENGTH = 500

# Product ids and quantities are 32-bit signed integers on the wire.
MIN_PRODUCT_ID = -(2**31)
MAX_PRODUCT_ID = 2**31 - 1
MIN_ITEM_QUANTITY = 1
MAX_ITEM_QUANTITY = 2**31 - 1
