# =========================
# FILE: cookbook/application/usecases.py
# =========================
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from cookbook.application.recipe_resolver import RecipeResolver
from cookbook.domain.entities import entry_from_dict
from cookbook.domain.errors import NotFound
from cookbook.domain.repositories import CookbookReadRepo, CookbookRepo
from cookbook.services.text_normalizer import normalize


@dataclass(frozen=True)
class ParseHandwriting:
    def __call__(self, text: str) -> str:
        return normalize(text)


@dataclass(frozen=True)
class AddEntry:
    repo: CookbookRepo

    def __call__(self, payload: Dict[str, Any]) -> None:
        self.repo.insert(entry_from_dict(payload))


@dataclass(frozen=True)
class GetEntry:
    repo: CookbookReadRepo

    def __call__(self, name: str) -> Dict[str, Any]:
        entry = self.repo.find(name)
        if entry is None:
            raise NotFound(name)
        return entry.to_dict()


#: flattened ingredient list + total cook time
@dataclass(frozen=True)
class GetRecipeSummary:
    resolver: RecipeResolver

    def __call__(self, name: str) -> Dict[str, Any]:
        return self.resolver.summarize(name).to_dict()
