"""Product — the catalog entry.

Products are supplied from outside (the products file) and are never
mutated by the shop. Orders and cart lines copy the fields they need at
the moment of purchase, so later catalog edits never reach them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``price`` is a whole number in the smallest currency unit.
    """

    id: int
    name: str
    description: str = ""
    price: int = 0
    category: str = ""
    image: str = ""

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "image": self.image,
        }

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Product:
        """Build a Product from a stored or fetched record.

        Missing text fields fall back to empty strings so a sparse products
        file still renders.
        """
        return Product(
            id=raw.get("id"),  # type: ignore[arg-type]
            name=raw.get("name") or "",
            description=raw.get("description") or "",
            price=raw.get("price") or 0,
            category=raw.get("category") or "",
            image=raw.get("image") or "",
        )
