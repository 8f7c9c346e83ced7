from __future__ import annotations

import pytest

from recipe_ai.models.recipe import Nutrition, ParsedRecipe
from recipe_ai.services.recipes_repo import DuplicateRecipeError, RecipeStore


def _clock():
    ticks = iter(f"2026-01-{day:02d}T12:00:00+00:00" for day in range(1, 29))
    return lambda: next(ticks)


def _store(tmp_path) -> RecipeStore:
    store = RecipeStore(tmp_path / "data" / "recipes.sqlite3", now=_clock())
    store.ensure_schema()
    return store


def _recipe(title: str, calories: int = 0, ingredients=None, description: str = "") -> ParsedRecipe:
    return ParsedRecipe(
        title=title,
        description=description,
        ingredients=ingredients or [],
        steps=["Cook it."],
        nutrition=Nutrition(calories=calories),
        prep_time="10 minutes",
    )


def test_save_and_get_round_trip(tmp_path):
    store = _store(tmp_path)
    saved = store.save_recipe(user_id="u1", recipe=_recipe("Lemon Chicken", 800, ["1 lemon"]))

    assert saved.id > 0
    assert saved.created_at == "2026-01-01T12:00:00+00:00"

    got = store.get_recipe(user_id="u1", recipe_id=saved.id)
    assert got is not None
    assert got.title == "Lemon Chicken"
    assert got.ingredients == ["1 lemon"]
    assert got.steps == ["Cook it."]
    assert got.nutrition.calories == 800
    assert got.prep_time == "10 minutes"


def test_other_owner_cannot_see_or_delete(tmp_path):
    store = _store(tmp_path)
    saved = store.save_recipe(user_id="u1", recipe=_recipe("Soup"))

    assert store.get_recipe(user_id="u2", recipe_id=saved.id) is None
    assert store.list_recipes(user_id="u2") == []
    assert store.delete_recipe(user_id="u2", recipe_id=saved.id) is False
    assert store.get_recipe(user_id="u1", recipe_id=saved.id) is not None


def test_delete_removes_row(tmp_path):
    store = _store(tmp_path)
    saved = store.save_recipe(user_id="u1", recipe=_recipe("Soup"))

    assert store.delete_recipe(user_id="u1", recipe_id=saved.id) is True
    assert store.get_recipe(user_id="u1", recipe_id=saved.id) is None
    assert store.delete_recipe(user_id="u1", recipe_id=saved.id) is False


def test_list_sort_orders(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("banana bread", 900))
    store.save_recipe(user_id="u1", recipe=_recipe("Apple Pie", 1200))
    store.save_recipe(user_id="u1", recipe=_recipe("Carrot Soup", 300))

    def titles(sort):
        return [r.title for r in store.list_recipes(user_id="u1", sort=sort)]

    assert titles("newest") == ["Carrot Soup", "Apple Pie", "banana bread"]
    assert titles("oldest") == ["banana bread", "Apple Pie", "Carrot Soup"]
    assert titles("title") == ["Apple Pie", "banana bread", "Carrot Soup"]
    assert titles("calories") == ["Apple Pie", "banana bread", "Carrot Soup"]

    with pytest.raises(ValueError):
        store.list_recipes(user_id="u1", sort="spiciest")


def test_list_search_and_limit(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("Lemon Chicken"))
    store.save_recipe(user_id="u1", recipe=_recipe("Tomato Salad", ingredients=["fresh basil"]))
    store.save_recipe(user_id="u1", recipe=_recipe("Stew", description="A hearty LEMON-free stew"))

    assert [r.title for r in store.list_recipes(user_id="u1", q="basil")] == ["Tomato Salad"]
    assert {r.title for r in store.list_recipes(user_id="u1", q="lemon")} == {"Lemon Chicken", "Stew"}
    assert len(store.list_recipes(user_id="u1", q="   ")) == 3
    assert len(store.list_recipes(user_id="u1", limit=2)) == 2


def test_find_by_title_is_owner_scoped(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("Soup"))

    assert store.find_by_title(user_id="u1", title="Soup") is not None
    assert store.find_by_title(user_id="u2", title="Soup") is None


def test_ping(tmp_path):
    _store(tmp_path).ping()


def test_search_treats_like_wildcards_and_json_literally(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("Rice_Bowl", ingredients=["2 cups rice"]))
    store.save_recipe(user_id="u1", recipe=_recipe("Lemon Chicken", ingredients=["1 lemon", "2 chicken legs"]))

    def titles(q):
        return [r.title for r in store.list_recipes(user_id="u1", q=q)]

    assert titles("_") == ["Rice_Bowl"]
    assert titles("%") == []
    assert titles('", "') == []
    assert titles("CHICKEN LEGS") == ["Lemon Chicken"]


def test_search_folds_non_ascii_case(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("Éclair"))
    store.save_recipe(user_id="u1", recipe=_recipe("Straße Pretzel"))

    assert [r.title for r in store.list_recipes(user_id="u1", q="éclair")] == ["Éclair"]
    assert [r.title for r in store.list_recipes(user_id="u1", q="STRASSE")] == ["Straße Pretzel"]


def test_search_applies_limit_after_filtering(tmp_path):
    store = _store(tmp_path)
    for title in ("Soup A", "Stew", "Soup B", "Soup C"):
        store.save_recipe(user_id="u1", recipe=_recipe(title))

    found = store.list_recipes(user_id="u1", q="soup", limit=2)
    assert [r.title for r in found] == ["Soup C", "Soup B"]


def test_same_title_insert_is_rejected_by_the_store(tmp_path):
    store = _store(tmp_path)
    store.save_recipe(user_id="u1", recipe=_recipe("Soup"))

    with pytest.raises(DuplicateRecipeError):
        store.save_recipe(user_id="u1", recipe=_recipe("  Soup "))

    store.save_recipe(user_id="u2", recipe=_recipe("Soup"))
    assert len(store.list_recipes(user_id="u1")) == 1
