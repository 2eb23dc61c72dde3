"""Application service: Submit Order use case.

Validates the checkout request, builds the Order and appends it to the
orders collection. ID assignment and the append are two independent
store operations; concurrent submissions are not serialized.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from localshop.application.dto import OrderReceiptDTO
from localshop.domain.exceptions import PersistenceError
from localshop.domain.model.order import Order, utc_now
from localshop.domain.repository.order_repository import OrderRepository
from localshop.utils.logging import get_logger

logger = get_logger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, request: Any) -> OrderReceiptDTO:
        """Place an order.

        Steps:
        1. Reject requests without a non-empty ``items`` list.
        2. Build the Order (client total if truthy, else computed).
        3. Persist; any failure from here on is a PersistenceError.
        """
        Order.validate_request(request)

        try:
            order = Order.create(request, now=self._clock())
            self._order_repo.save(order)
        except Exception as exc:
            logger.exception("Failed to save order")
            raise PersistenceError("Failed to save order") from exc

        logger.info("Order %s created with %d item(s)", order.id, len(order.items))
        return OrderReceiptDTO(order_id=order.id)  # type: ignore[arg-type]
