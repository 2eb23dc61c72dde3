"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from localshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from localshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from localshop.infrastructure.persistence.json_store import JsonCollectionStore

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def collection_store(data_dir: Path | None = None) -> JsonCollectionStore:
    return JsonCollectionStore(data_dir or DATA_DIR)


def product_repository(data_dir: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(collection_store(data_dir))


def order_repository(data_dir: Path | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(collection_store(data_dir))
