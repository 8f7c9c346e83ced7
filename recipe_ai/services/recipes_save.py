# recipe_ai/services/recipes_save.py
from __future__ import annotations

import logging
from typing import Optional

from recipe_ai.models.recipe import StoredRecipe
from recipe_ai.services.recipes_parse import SavedRecipeParser, parse_or_empty
from recipe_ai.services.recipes_repo import DuplicateRecipeError, RecipeStore

log = logging.getLogger("recipe_ai.save")


def save_generated_recipe(
    store: RecipeStore,
    *,
    user_id: str,
    content: str,
    name: Optional[str] = None,
    ingredients: Optional[str] = None,
) -> StoredRecipe:
    """
    Parse generated text and persist it for ``user_id``.

    The request's name and ingredient string fill in for a missing title or
    an empty ingredient list. One title per owner; the store's unique index
    settles concurrent saves that both pass the lookup.
    """
    parser = SavedRecipeParser()
    parsed = parse_or_empty(parser, content)

    title = parsed.title or name or parser.default_title
    if store.find_by_title(user_id=user_id, title=title):
        raise DuplicateRecipeError(title)

    updates = {"title": title}
    if not parsed.ingredients and ingredients:
        updates["ingredients"] = [ingredients]
    recipe = parsed.model_copy(update=updates)

    stored = store.save_recipe(user_id=user_id, recipe=recipe)
    log.info("recipe saved", extra={"recipe_id": stored.id, "user_id": user_id})
    return stored
