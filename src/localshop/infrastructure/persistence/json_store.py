"""Flat-file JSON store.

Each named collection lives in ``<data_dir>/<name>.json``. Every access
reads or writes the whole file; there is no indexing and no locking.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from localshop.utils.logging import get_logger

logger = get_logger(__name__)


class JsonCollectionStore:

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def load(self, name: str) -> Any | None:
        """Return the parsed collection, or None if it cannot be read.

        A missing file and a corrupt one look the same to the caller.
        """
        path = self.path_for(name)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.debug("Could not read %s: %s", path, exc)
            return None

    def save(self, name: str, collection: Any) -> None:
        """Overwrite the whole collection file."""
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(collection, indent=2) + "\n", encoding="utf-8")
