# cookbook/application/recipe_resolver.py
from __future__ import annotations

import logging
import math
from typing import Dict, List

from cookbook.domain.entities import Quantity, Recipe, RecipeSummary, RequiredItem
from cookbook.domain.errors import (
    MissingRequiredItem,
    NotARecipe,
    NotFound,
    QuantityOverflow,
    SelfReference,
)
from cookbook.domain.repositories import CookbookReadRepo

log = logging.getLogger("app.recipe_resolver")


def _checked(compute, name: str) -> Quantity:
    # huge ints overflow only when mixed with floats; floats overflow to inf
    try:
        value = compute()
    except OverflowError:
        raise QuantityOverflow(name) from None
    if isinstance(value, float) and not math.isfinite(value):
        raise QuantityOverflow(name)
    return value


class RecipeResolver:
    """
    Flattens a recipe into the base ingredients it ultimately needs.

    Quantities of nested recipes are not multiplied by the parent's quantity:
    each leaf counts with the quantity stated by the recipe that lists it, and
    repeated leaves are summed.
    """

    def __init__(self, repo: CookbookReadRepo) -> None:
        self.repo = repo

    def summarize(self, recipe_name: str) -> RecipeSummary:
        entry = self.repo.find(recipe_name)
        if entry is None:
            raise NotFound(recipe_name)
        if not entry.is_recipe:
            raise NotARecipe(recipe_name)

        totals: Dict[str, Quantity] = {}
        cook_times: Dict[str, Quantity] = {}
        self._expand(entry, path=[entry.name], totals=totals, cook_times=cook_times)

        ingredients = [RequiredItem(name=k, quantity=v) for k, v in totals.items()]
        cook_time = _checked(lambda: sum(cook_times[k] * v for k, v in totals.items()), "cookTime")
        return RecipeSummary(name=recipe_name, cook_time=cook_time, ingredients=ingredients)

    def _expand(
        self,
        recipe: Recipe,
        path: List[str],
        totals: Dict[str, Quantity],
        cook_times: Dict[str, Quantity],
    ) -> None:
        log.debug("Expanding %r (depth=%d)", recipe.name, len(path))
        for item in recipe.required_items:
            # path always starts with the queried recipe
            if item.name in path:
                raise SelfReference(item.name)

            found = self.repo.find(item.name)
            if found is None:
                raise MissingRequiredItem(item.name)

            if found.is_recipe:
                path.append(found.name)
                self._expand(found, path, totals, cook_times)
                path.pop()
            elif found.is_ingredient:
                prev = totals.get(item.name, 0)
                totals[item.name] = _checked(lambda: prev + item.quantity, item.name)
                cook_times[item.name] = found.cook_time
