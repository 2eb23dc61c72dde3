"""Client catalog/cart controller.

Owns a ShopState and is the only thing that mutates it. Every cart
mutation is written through to client storage and followed by a full cart
redraw; every change to the catalog or the filter criteria recomputes the
filtered view and redraws the listing.
"""

from __future__ import annotations

import json
from typing import Any

from localshop.client.api_client import ShopApiClient
from localshop.client.state import ShopState
from localshop.client.storage import CART_KEY, PENDING_ORDER_KEY, ClientStorage
from localshop.client.ui import ShopUI
from localshop.domain.exceptions import (
    CheckoutRejectedError,
    ServiceUnreachableError,
    ValidationError,
)
from localshop.domain.model.cart import Cart
from localshop.domain.model.catalog import filter_products, normalize_query
from localshop.domain.model.product import Product
from localshop.domain.model.value_objects import Quantity
from localshop.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    Product(
        id=1,
        name="Demo Product",
        description="Demo item",
        price=300,
        category="Misc",
        image="https://picsum.photos/seed/demo/800/600",
    ),
]


class ShopController:

    def __init__(
        self,
        api: ShopApiClient,
        storage: ClientStorage,
        ui: ShopUI,
        state: ShopState | None = None,
    ) -> None:
        self._api = api
        self._storage = storage
        self._ui = ui
        self.state = state or ShopState()
        self.state.cart = self._load_cart()

    # --- Catalog --------------------------------------------------------------

    def load_catalog(self) -> None:
        """Fetch products, falling back to the sample catalog on failure."""
        try:
            self.state.products = self._api.fetch_products()
            self.state.degraded = False
        except ServiceUnreachableError as exc:
            logger.warning("Falling back to demo listing: %s", exc)
            self.state.products = list(SAMPLE_PRODUCTS)
            self.state.degraded = True
        self.apply_filters()

    def apply_filters(
        self,
        category: str | None = None,
        query: str | None = None,
    ) -> list[Product]:
        """Recompute ``filtered``; omitted criteria keep their current value."""
        if category is not None:
            self.state.active_category = category
        if query is not None:
            self.state.search_query = normalize_query(query)

        self.state.filtered = filter_products(
            self.state.products,
            self.state.active_category,
            self.state.search_query,
        )
        self._ui.render_products(self.state)
        return self.state.filtered

    def show_product(self, product_id: int) -> Product | None:
        product = self._find_product(product_id)
        if product is None:
            return None
        self.state.active_product = product
        self._ui.render_product(self.state)
        return product

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, product_id: int, qty: Any = 1) -> None:
        product = self._find_product(product_id)
        if product is None:
            self._ui.alert("Product not found")
            return
        self.state.cart.add(product, Quantity.coerce(qty).value)
        self._save_cart()

    def set_quantity(self, product_id: int, qty: Any) -> None:
        if self.state.cart.set_quantity(product_id, Quantity.coerce(qty)):
            self._save_cart()

    def remove_from_cart(self, product_id: int) -> None:
        self.state.cart.remove(product_id)
        self._save_cart()

    def toggle_cart(self, open_: bool) -> None:
        self.state.cart_open = open_
        self._ui.render_cart(self.state)

    # --- Checkout -------------------------------------------------------------

    def checkout(self) -> int | None:
        """Submit the cart as an order.

        Returns the new order ID, or None when nothing was placed.
        """
        cart = self.state.cart
        if cart.is_empty:
            self._ui.alert("Cart is empty.")
            return None

        name = self._ui.prompt("Enter your name for order")
        if name is None:
            return None
        phone = self._ui.prompt("Enter your phone number")
        if phone is None:
            return None

        order = {
            "items": cart.to_list(),
            "total": cart.total_price,
            "customer": {"name": name, "phone": phone},
        }

        try:
            order_id = self._api.checkout(order)
        except CheckoutRejectedError as exc:
            self._ui.alert(f"Checkout failed: {exc}")
            return None
        except ServiceUnreachableError as exc:
            logger.warning("Checkout could not reach server: %s", exc)
            self._ui.alert(
                "Could not reach server. The order was saved locally "
                "and can be submitted later."
            )
            self._storage.set_item(PENDING_ORDER_KEY, json.dumps(order))
            return None

        self._ui.alert(f"Order placed! Order ID: {order_id}")
        cart.clear()
        self._save_cart()
        self.toggle_cart(False)
        return order_id

    # --- Internal helpers -----------------------------------------------------

    def _find_product(self, product_id: int) -> Product | None:
        for product in self.state.products:
            if product.id == product_id:
                return product
        return None

    def _load_cart(self) -> Cart:
        raw = self._storage.get_item(CART_KEY)
        if not raw:
            return Cart()
        try:
            return Cart.from_list(json.loads(raw))
        except (ValueError, TypeError, KeyError, ValidationError) as exc:
            logger.debug("Ignoring unreadable cart: %s", exc)
            return Cart()

    def _save_cart(self) -> None:
        self._storage.set_item(CART_KEY, json.dumps(self.state.cart.to_list()))
        self._ui.render_cart(self.state)
