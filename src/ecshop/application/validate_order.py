"""Application service: validate order requests before they are processed.

Every check runs independently and contributes its own ``Violation``, so a
client sees all of the problems with a request in one response.
"""

from __future__ import annotations

import logging

from ecshop.application.dto import (
    CreateOrderRequest,
    OrderItemRequest,
    UpdateOrderStatusRequest,
    wire_name,
)
from ecshop.domain.exceptions import ValidationError, Violation
from ecshop.domain.model.order import (
    MAX_ITEM_QUANTITY,
    MAX_NOTES_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_PRODUCT_ID,
    MIN_ITEM_QUANTITY,
    MIN_PRODUCT_ID,
    SHIPPING_FIELD_LIMITS,
    OrderStatus,
)

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class OrderInputValidator:

    def validate_creation(self, request: CreateOrderRequest) -> CreateOrderRequest:
        """Return *request* unchanged if it is acceptable.

        Raises ``ValidationError`` carrying one violation per failed check.
        """
        violations = self.collect_creation_violations(request)
        if violations:
            logger.info("Order request rejected with %d violation(s)", len(violations))
            raise ValidationError(violations)

        logger.debug("Order request accepted with %d item(s)", len(request.items))
        return request

    def validate_status_update(self, request: UpdateOrderStatusRequest) -> OrderStatus:
        try:
            status = OrderStatus.parse(request.status, field=wire_name("status"))
        except ValidationError:
            logger.info("Status update rejected: %r", request.status)
            raise

        logger.debug("Status update accepted: %s", status.name)
        return status

    def collect_creation_violations(self, request: CreateOrderRequest) -> list[Violation]:
        violations: list[Violation] = []
        violations.extend(self._check_items(request.items))

        for attribute, max_length in SHIPPING_FIELD_LIMITS.items():
            violations.extend(
                self._check_text(
                    attribute, getattr(request, attribute), max_length, required=True
                )
            )

        violations.extend(
            self._check_text("shipping_phone", request.shipping_phone, MAX_PHONE_LENGTH)
        )
        violations.extend(self._check_text("notes", request.notes, MAX_NOTES_LENGTH))
        return violations

    # --- Individual checks ----------------------------------------------------

    def _check_items(self, items: object) -> list[Violation]:
        if items is None:
            return [Violation("items", "is required")]
        if not isinstance(items, (list, tuple)):
            return [Violation("items", "must be a list of order items")]
        if not items:
            return [Violation("items", "must contain at least one item")]

        violations: list[Violation] = []
        for index, item in enumerate(items):
            violations.extend(self._check_item(index, item))
        return violations

    @staticmethod
    def _check_item(index: int, item: object) -> list[Violation]:
        prefix = f"items[{index}]"
        if not isinstance(item, OrderItemRequest):
            return [Violation(prefix, "must be an order item")]

        violations: list[Violation] = []
        if item.product_id is None:
            violations.append(Violation(f"{prefix}.productId", "is required"))
        elif not _is_int(item.product_id):
            violations.append(Violation(f"{prefix}.productId", "must be an integer"))
        elif not MIN_PRODUCT_ID <= item.product_id <= MAX_PRODUCT_ID:
            violations.append(
                Violation(
                    f"{prefix}.productId",
                    f"must be between {MIN_PRODUCT_ID} and {MAX_PRODUCT_ID}",
                )
            )

        if item.quantity is None:
            violations.append(Violation(f"{prefix}.quantity", "is required"))
        elif not _is_int(item.quantity):
            violations.append(Violation(f"{prefix}.quantity", "must be an integer"))
        elif item.quantity < MIN_ITEM_QUANTITY:
            violations.append(
                Violation(
                    f"{prefix}.quantity",
                    f"must be at least {MIN_ITEM_QUANTITY}, got {item.quantity}",
                )
            )
        elif item.quantity > MAX_ITEM_QUANTITY:
            violations.append(
                Violation(
                    f"{prefix}.quantity",
                    f"must be at most {MAX_ITEM_QUANTITY}",
                )
            )
        return violations

    @staticmethod
    def _check_text(
        attribute: str,
        value: object,
        max_length: int,
        required: bool = False,
    ) -> list[Violation]:
        name = wire_name(attribute)
        if value is None:
            return [Violation(name, "is required")] if required else []
        if not isinstance(value, str):
            return [Violation(name, "must be a string")]
        if required and not value.strip():
            return [Violation(name, "must not be blank")]
        if len(value) > max_length:
            return [
                Violation(
                    name,
                    f"must be at most {max_length} characters, got {len(value)}",
                )
            ]
        return []
