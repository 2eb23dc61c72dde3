"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from localshop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the highest persisted order ID plus one (1 if none)."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every persisted order in insertion order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Append a new order, assigning its ID if it has none."""
