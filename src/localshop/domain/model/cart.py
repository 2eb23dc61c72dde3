"""Cart aggregate — the client's shopping cart.

A cart holds at most one line per product. Each line snapshots the
product's name, price and image when it is first added; later catalog
changes do not touch it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from localshop.domain.model.product import Product
from localshop.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    product_id: int
    name: str
    price: int
    image: str
    quantity: Quantity

    @property
    def line_total(self) -> int:
        return self.price * self.quantity.value

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "quantity": self.quantity.value,
        }

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> CartLine:
        return CartLine(
            product_id=raw["productId"],
            name=raw.get("name", ""),
            price=raw.get("price", 0),
            image=raw.get("image", ""),
            quantity=Quantity(raw["quantity"]),
        )


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Totals are always derived from the lines, never stored.
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, qty: int = 1) -> CartLine:
        """Add *qty* of *product*, merging into an existing line."""
        line = self.find(product.id)
        if line is not None:
            line.quantity = Quantity(line.quantity.value + qty)
            return line

        line = CartLine(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            quantity=Quantity(qty),
        )
        self.lines.append(line)
        return line

    def set_quantity(self, product_id: int, quantity: Quantity) -> bool:
        """Replace a line's quantity. Returns False if no line matched."""
        line = self.find(product_id)
        if line is None:
            return False
        line.quantity = quantity
        return True

    def remove(self, product_id: int) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def total_price(self) -> int:
        return sum(line.line_total for line in self.lines)

    # --- Serialization --------------------------------------------------------

    def to_list(self) -> list[dict[str, Any]]:
        return [line.to_dict() for line in self.lines]

    @staticmethod
    def from_list(raw: list[dict[str, Any]]) -> Cart:
        return Cart(lines=[CartLine.from_dict(item) for item in raw])
