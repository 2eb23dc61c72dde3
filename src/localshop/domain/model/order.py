"""Order aggregate.

An order is created once, at checkout, and is never changed afterwards.
Line items are stored exactly as the client submitted them: they carry the
product's name and price by value so later catalog edits never reach a
placed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from localshop.domain.exceptions import ValidationError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(moment: datetime) -> str:
    """Sortable UTC timestamp, e.g. ``2024-05-01T12:30:00.000Z``."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def compute_total(items: list[Any]) -> Any:
    """Sum of ``price * quantity`` over all items.

    Item shape is not validated; a malformed item raises whatever the
    arithmetic raises.
    """
    return sum(item["price"] * item["quantity"] for item in items)


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating them.
    """

    id: int | None
    items: list[Any]
    total: Any
    customer: dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=lambda: isoformat(utc_now()))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def validate_request(request: Any) -> list[Any]:
        """Return the request's items, or raise if there are none."""
        items = request.get("items") if isinstance(request, dict) else None
        if not isinstance(items, list) or not items:
            raise ValidationError("Order must include items")
        return items

    @staticmethod
    def create(request: dict[str, Any], now: datetime | None = None) -> Order:
        """Create a new order from a checkout request.

        A truthy ``total`` from the client wins; otherwise the total is
        computed from the items.
        """
        items = Order.validate_request(request)
        return Order(
            id=None,
            items=items,
            total=request.get("total") or compute_total(items),
            customer=request.get("customer") or {},
            created_at=isoformat(now or utc_now()),
        )
