# cookbook/domain/entities.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from cookbook.domain.errors import InvalidEntry

Quantity = Union[int, float]

INGREDIENT = "ingredient"
RECIPE = "recipe"


def _check_amount(value: Any, what: str) -> None:
    # bool is an int subclass; JSON true must not become 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidEntry(f"{what} must be a number")
    if (isinstance(value, float) and not math.isfinite(value)) or value < 0:
        raise InvalidEntry(f"{what} must be a finite number >= 0")


@dataclass(frozen=True)
class RequiredItem:
    name: str
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidEntry("Required item name must not be empty")
        _check_amount(self.quantity, f"Quantity of {self.name}")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "quantity": self.quantity}


@dataclass(frozen=True)
class CookbookEntry(ABC):
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidEntry("Entry name must not be empty")

    @property
    @abstractmethod
    def type(self) -> str: ...

    @property
    def is_recipe(self) -> bool:
        return self.type == RECIPE

    @property
    def is_ingredient(self) -> bool:
        return self.type == INGREDIENT


@dataclass(frozen=True)
class Ingredient(CookbookEntry):
    cook_time: Quantity = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_amount(self.cook_time, f"cookTime of {self.name}")

    @property
    def type(self) -> str:
        return INGREDIENT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "name": self.name, "cookTime": self.cook_time}


@dataclass(frozen=True)
class Recipe(CookbookEntry):
    required_items: Tuple[RequiredItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        super().__post_init__()
        # callers may hand in a list; keep the frozen entry hashable
        object.__setattr__(self, "required_items", tuple(self.required_items))

    @property
    def type(self) -> str:
        return RECIPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "requiredItems": [i.to_dict() for i in self.required_items],
        }


Entry = Union[Ingredient, Recipe]


@dataclass(frozen=True)
class RecipeSummary:
    name: str
    cook_time: Quantity
    ingredients: List[RequiredItem]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": RECIPE,
            "cookTime": self.cook_time,
            "ingredients": [i.to_dict() for i in self.ingredients],
        }


def entry_from_dict(payload: Dict[str, Any]) -> Entry:
    """Build an entry from the (already schema-validated) wire shape."""
    kind = payload.get("type")
    name = payload.get("name") or ""
    if kind == INGREDIENT:
        return Ingredient(name=name, cook_time=payload.get("cookTime", 0))
    if kind == RECIPE:
        items = [
            RequiredItem(name=i.get("name") or "", quantity=i.get("quantity", 0))
            for i in (payload.get("requiredItems") or [])
        ]
        return Recipe(name=name, required_items=tuple(items))
    raise InvalidEntry(f"Unknown entry type: {kind!r}")
