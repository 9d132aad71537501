# =========================
# FILE: cookbook/infrastructure/memory_store.py
# =========================
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from cookbook.domain.entities import Entry, Recipe
from cookbook.domain.errors import DuplicateName, DuplicateRequiredItem

log = logging.getLogger("infra.memory_store")


class InMemoryCookbookStore:
    """
    Process-wide cookbook, keyed by exact entry name.

    Created empty at startup and only ever grows. Sync FastAPI endpoints run
    in a thread pool, so every access goes through one lock.
    """

    def __init__(self) -> None:
        self._data: Dict[str, Entry] = {}
        self._lock = threading.RLock()

    def find(self, name: str) -> Optional[Entry]:
        with self._lock:
            return self._data.get(name)

    def all(self) -> List[Entry]:
        with self._lock:
            return list(self._data.values())

    def insert(self, entry: Entry) -> None:
        with self._lock:
            if entry.name in self._data:
                log.warning("Rejected entry %r: name already taken", entry.name)
                raise DuplicateName(entry.name)
            if isinstance(entry, Recipe):
                self._check_required_items(entry)
            self._data[entry.name] = entry
        log.info("Stored %s %r", entry.type, entry.name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._data

    @staticmethod
    def _check_required_items(recipe: Recipe) -> None:
        seen = set()
        for item in recipe.required_items:
            if item.name in seen:
                log.warning("Rejected recipe %r: %r listed twice", recipe.name, item.name)
                raise DuplicateRequiredItem(recipe.name, item.name)
            seen.add(item.name)
