# cookbook/domain/errors.py
from __future__ import annotations


class CookbookError(ValueError):
    """Base class for every client-facing cookbook failure."""


class BlankName(CookbookError):
    def __init__(self, raw: str = "") -> None:
        super().__init__(f"Name is blank after normalization: {raw!r}")
        self.raw = raw


class InvalidEntry(CookbookError):
    pass


class DuplicateName(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Entry already exists: {name}")
        self.name = name


class DuplicateRequiredItem(CookbookError):
    def __init__(self, recipe: str, item: str) -> None:
        super().__init__(f"Recipe {recipe} lists required item more than once: {item}")
        self.recipe = recipe
        self.item = item


class NotFound(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Entry not found: {name}")
        self.name = name


class NotARecipe(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Entry is not a recipe: {name}")
        self.name = name


class SelfReference(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Recipe requires itself: {name}")
        self.name = name


class MissingRequiredItem(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Required item not in cookbook: {name}")
        self.name = name


class QuantityOverflow(CookbookError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Aggregated amount is too large to represent: {name}")
        self.name = name
