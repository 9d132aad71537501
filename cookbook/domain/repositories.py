from __future__ import annotations

from typing import List, Optional, Protocol

from cookbook.domain.entities import Entry


class CookbookReadRepo(Protocol):
    def find(self, name: str) -> Optional[Entry]: ...

    def all(self) -> List[Entry]: ...


class CookbookRepo(CookbookReadRepo, Protocol):
    def insert(self, entry: Entry) -> None: ...
