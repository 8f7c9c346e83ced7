# recipe_ai/routers/recipes_library.py
from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from recipe_ai.core.deps import get_current_user, get_store
from recipe_ai.models.identity import Identity
from recipe_ai.models.recipe import RecipeGetResponse, RecipeListResponse
from recipe_ai.services.recipes_repo import RecipeStore

router = APIRouter(prefix="/recipes", tags=["recipe"])


@router.get("", response_model=RecipeListResponse)
def recipe_list(
    q: Optional[str] = None,
    sort: Literal["newest", "oldest", "title", "calories"] = "newest",
    limit: int = Query(50, ge=1, le=500),
    user: Identity = Depends(get_current_user),
    store: RecipeStore = Depends(get_store),
) -> RecipeListResponse:
    items = store.list_recipes(user_id=user.id, q=q, sort=sort, limit=limit)
    return RecipeListResponse(recipes=items, count=len(items))


@router.get("/{recipe_id}", response_model=RecipeGetResponse)
def recipe_get(
    recipe_id: int,
    user: Identity = Depends(get_current_user),
    store: RecipeStore = Depends(get_store),
) -> RecipeGetResponse:
    r = store.get_recipe(user_id=user.id, recipe_id=recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return RecipeGetResponse(recipe=r)
