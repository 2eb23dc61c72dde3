"""Client-local storage.

A small string key/value store that survives restarts, the terminal
client's equivalent of a browser's local storage. The cart and any
pending order live here.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

import click

from localshop.utils.logging import get_logger

logger = get_logger(__name__)

CART_KEY = "localshop_cart"
PENDING_ORDER_KEY = "localshop_pending_order"


class ClientStorage(ABC):

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None if the key is unset."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""


class JsonFileStorage(ClientStorage):
    """All keys in one JSON object on disk, rewritten on every change."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._persist(items)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.debug("Starting with empty storage (%s)", exc)
            return {}
        return raw if isinstance(raw, dict) else {}

    def _persist(self, items: dict[str, str]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(items, indent=2) + "\n", encoding="utf-8"
        )


def default_storage() -> JsonFileStorage:
    return JsonFileStorage(Path(click.get_app_dir("localshop")) / "storage.json")
