"""HTTP client for the shop service."""

from __future__ import annotations

from typing import Any

import requests
from requests import RequestException

from localshop.domain.exceptions import CheckoutRejectedError, ServiceUnreachableError
from localshop.domain.model.product import Product
from localshop.utils.logging import get_logger
from localshop.utils.settings import API_URL

logger = get_logger(__name__)


class ShopApiClient:
    """Talks to the ``/api`` endpoints of the shop service.

    Network-level problems surface as ServiceUnreachableError. Checkout
    has no timeout; a hung request blocks only the checkout.
    """

    def __init__(self, base_url: str | None = None, timeout: int = 5):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.timeout = timeout

    def fetch_products(self) -> list[Product]:
        url = f"{self.base_url}/products"
        logger.debug("GET %s", url)
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            raw = resp.json()
        except (RequestException, ValueError) as exc:
            raise ServiceUnreachableError(f"Could not load products: {exc}") from exc

        if not isinstance(raw, list):
            raise ServiceUnreachableError("Product listing is not a list")
        return [Product.from_dict(item) for item in raw if isinstance(item, dict)]

    def checkout(self, payload: dict[str, Any]) -> int:
        """Submit an order and return its ID."""
        url = f"{self.base_url}/checkout"
        logger.debug("POST %s", url)
        try:
            resp = requests.post(url, json=payload)
        except RequestException as exc:
            raise ServiceUnreachableError(str(exc)) from exc

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise CheckoutRejectedError(message or "unknown")

        # An order only counts as placed once its ID can be read back.
        if not isinstance(data, dict) or data.get("orderId") is None:
            raise ServiceUnreachableError("Unreadable checkout response")
        return data["orderId"]

    def ping(self) -> dict[str, Any]:
        url = f"{self.base_url}/ping"
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (RequestException, ValueError) as exc:
            raise ServiceUnreachableError(str(exc)) from exc
