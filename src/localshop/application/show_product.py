"""Application service: Show Product use case (query)."""

from __future__ import annotations

from localshop.domain.exceptions import EntityNotFoundError
from localshop.domain.model.product import Product
from localshop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int | str) -> Product:
        """Look up one product.

        The ID arrives as text from the URL; anything that is not an
        integer simply matches no product.
        """
        try:
            key = int(product_id)
        except (TypeError, ValueError):
            raise EntityNotFoundError("Product not found")

        product = self._product_repo.get_by_id(key)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product
