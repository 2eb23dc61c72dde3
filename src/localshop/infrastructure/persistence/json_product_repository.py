"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from localshop.domain.model.product import Product
from localshop.domain.repository.product_repository import ProductRepository
from localshop.infrastructure.persistence.json_store import JsonCollectionStore

COLLECTION = "products"


class JsonProductRepository(ProductRepository):
    """Read-only view of the products file.

    The file is maintained by hand; the shop never writes it.
    """

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        raw = self._store.load(COLLECTION)
        if not isinstance(raw, list):
            return []
        return [Product.from_dict(item) for item in raw if isinstance(item, dict)]
