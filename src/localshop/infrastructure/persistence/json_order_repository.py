"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from localshop.domain.model.order import Order
from localshop.domain.repository.order_repository import OrderRepository
from localshop.infrastructure.persistence.json_store import JsonCollectionStore

COLLECTION = "orders"


class JsonOrderRepository(OrderRepository):
    """Append-only orders file.

    ``next_id`` and ``save`` are two separate whole-file operations, so two
    concurrent checkouts can read the same highest ID. Nothing serializes
    them.
    """

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(_raw_id(o) for o in orders) + 1

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw() if isinstance(raw, dict)]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()

        orders = self._load_raw()
        orders.append(self._to_raw(order))
        self._store.save(COLLECTION, orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "id": order.id,
            "createdAt": order.created_at,
            "items": order.items,
            "total": order.total,
            "customer": order.customer,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Order:
        return Order(
            id=raw.get("id"),
            items=raw.get("items", []),
            total=raw.get("total"),
            customer=raw.get("customer", {}),
            created_at=raw.get("createdAt", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[Any]:
        raw = self._store.load(COLLECTION)
        return raw if isinstance(raw, list) else []


def _raw_id(raw: Any) -> int:
    """Stored ID of a record; records without one count as 0."""
    if not isinstance(raw, dict):
        return 0
    try:
        return int(raw.get("id") or 0)
    except (TypeError, ValueError):
        return 0
