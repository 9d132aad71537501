from __future__ import annotations

import threading

import pytest

from cookbook.domain.entities import CookbookEntry, Ingredient, Recipe, RequiredItem, entry_from_dict
from cookbook.domain.errors import DuplicateName, DuplicateRequiredItem, InvalidEntry
from cookbook.infrastructure.memory_store import InMemoryCookbookStore


@pytest.fixture
def store() -> InMemoryCookbookStore:
    return InMemoryCookbookStore()


def test_find_is_exact(store: InMemoryCookbookStore) -> None:
    store.insert(Ingredient(name="Egg", cook_time=5))
    assert store.find("Egg") == Ingredient(name="Egg", cook_time=5)
    assert store.find("egg") is None
    assert store.find("Egg ") is None


@pytest.mark.parametrize(
    "first,second",
    (
        (Ingredient(name="Egg", cook_time=5), Recipe(name="Egg", required_items=())),
        (Recipe(name="Egg", required_items=()), Ingredient(name="Egg", cook_time=5)),
        (Ingredient(name="Egg", cook_time=5), Ingredient(name="Egg", cook_time=1)),
    ),
)
def test_duplicate_name_keeps_first(store: InMemoryCookbookStore, first, second) -> None:
    store.insert(first)
    with pytest.raises(DuplicateName):
        store.insert(second)
    assert len(store) == 1
    assert store.find("Egg") is first


def test_duplicate_required_item(store: InMemoryCookbookStore) -> None:
    recipe = Recipe(
        name="Omelette",
        required_items=(RequiredItem("Egg", 1), RequiredItem("Egg", 2)),
    )
    with pytest.raises(DuplicateRequiredItem) as exc:
        store.insert(recipe)
    assert exc.value.item == "Egg"
    assert len(store) == 0
    assert "Omelette" not in store


def test_recipe_may_reference_unknown_items(store: InMemoryCookbookStore) -> None:
    store.insert(Recipe(name="Omelette", required_items=(RequiredItem("Egg", 2),)))
    assert store.find("Omelette").is_recipe


def test_all_lists_every_entry(store: InMemoryCookbookStore) -> None:
    store.insert(Ingredient(name="Flour", cook_time=1))
    store.insert(Recipe(name="Dough", required_items=(RequiredItem("Flour", 2),)))
    assert sorted(e.name for e in store.all()) == ["Dough", "Flour"]


def test_concurrent_inserts_of_same_name(store: InMemoryCookbookStore) -> None:
    errors = []

    def worker() -> None:
        try:
            store.insert(Ingredient(name="Salt", cook_time=0))
        except DuplicateName as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1
    assert len(errors) == 15


def test_entry_from_dict() -> None:
    ing = entry_from_dict({"type": "ingredient", "name": "Egg", "cookTime": 6})
    assert ing.is_ingredient and ing.cook_time == 6

    rec = entry_from_dict(
        {"type": "recipe", "name": "Omelette", "requiredItems": [{"name": "Egg", "quantity": 2}]}
    )
    assert rec.is_recipe
    assert rec.required_items == (RequiredItem("Egg", 2),)
    assert rec.to_dict() == {
        "type": "recipe",
        "name": "Omelette",
        "requiredItems": [{"name": "Egg", "quantity": 2}],
    }


@pytest.mark.parametrize(
    "payload",
    (
        {"type": "sauce", "name": "Pesto"},
        {"type": "ingredient", "name": "", "cookTime": 1},
        {"type": "ingredient", "name": "Egg", "cookTime": -1},
        {"type": "recipe", "name": "Toast", "requiredItems": [{"name": "Bread", "quantity": -2}]},
        {"type": "ingredient", "name": "Egg", "cookTime": True},
        {"type": "ingredient", "name": "Egg", "cookTime": float("inf")},
        {"type": "recipe", "name": "Toast", "requiredItems": [{"name": "Bread", "quantity": float("nan")}]},
        {"type": "recipe", "name": "Toast", "requiredItems": [{"name": "Bread", "quantity": "2"}]},
    ),
)
def test_entry_from_dict_rejects(payload) -> None:
    with pytest.raises(InvalidEntry):
        entry_from_dict(payload)


def test_entry_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        CookbookEntry(name="Egg")


def test_discriminant() -> None:
    ing = Ingredient(name="Egg", cook_time=5)
    rec = Recipe(name="Omelette", required_items=())
    assert (ing.is_ingredient, ing.is_recipe) == (True, False)
    assert (rec.is_ingredient, rec.is_recipe) == (False, True)
