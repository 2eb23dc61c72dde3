"""Client state owned by the shop controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from localshop.domain.model.cart import Cart
from localshop.domain.model.catalog import ALL_CATEGORIES
from localshop.domain.model.product import Product


@dataclass
class ShopState:
    """Everything the views draw from.

    ``filtered`` is derived from ``products`` and the two criteria and is
    recomputed whenever any of them changes.
    """

    products: list[Product] = field(default_factory=list)
    filtered: list[Product] = field(default_factory=list)
    cart: Cart = field(default_factory=Cart)
    active_category: str = ALL_CATEGORIES
    search_query: str = ""
    cart_open: bool = False
    active_product: Product | None = None
    degraded: bool = False
