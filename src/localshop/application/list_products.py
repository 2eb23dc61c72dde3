"""Application service: List Products use case (query)."""

from __future__ import annotations

from localshop.domain.model.product import Product
from localshop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Return the whole catalog; an unreadable store yields []."""
        return self._product_repo.list_all()
