"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry results from the application layer to the HTTP layer without
exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderReceiptDTO:
    """Output: what the client learns about a freshly placed order."""

    order_id: int

    def to_dict(self) -> dict:
        return {"success": True, "orderId": self.order_id}


@dataclass(frozen=True)
class PingDTO:
    ok: bool
    time: str

    def to_dict(self) -> dict:
        return {"ok": self.ok, "time": self.time}
