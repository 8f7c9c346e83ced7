# recipe_ai/routers/recipes_ops.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from recipe_ai.core.deps import get_current_user, get_store
from recipe_ai.models.identity import Identity
from recipe_ai.models.recipe import (
    CreateRecipeRequest,
    CreateRecipeResponse,
    ParsedRecipe,
    RecipeDeleteResponse,
    SaveRecipeRequest,
    SaveRecipeResponse,
)
from recipe_ai.services.recipes_repo import RecipeStore
from recipe_ai.services.recipes_save import DuplicateRecipeError, save_generated_recipe

router = APIRouter(prefix="/recipes", tags=["recipe"])

REQUIRED_FIELDS = "title, description, ingredients, steps"


@router.post("", status_code=201, response_model=CreateRecipeResponse)
def create(
    req: CreateRecipeRequest,
    user: Identity = Depends(get_current_user),
    store: RecipeStore = Depends(get_store),
) -> CreateRecipeResponse:
    # Empty lists are accepted; blank strings are not.
    if not (req.title or "").strip() or not req.description or req.ingredients is None or req.steps is None:
        raise HTTPException(status_code=400, detail=f"Missing required fields: {REQUIRED_FIELDS}")

    recipe = ParsedRecipe(
        title=req.title,
        description=req.description,
        ingredients=req.ingredients,
        steps=req.steps,
    )
    try:
        stored = store.save_recipe(user_id=user.id, recipe=recipe)
    except DuplicateRecipeError:
        raise HTTPException(status_code=409, detail="Recipe already exists.")

    return CreateRecipeResponse(recipe_id=stored.id)


@router.post("/save", response_model=SaveRecipeResponse)
def save(
    req: SaveRecipeRequest,
    user: Identity = Depends(get_current_user),
    store: RecipeStore = Depends(get_store),
) -> SaveRecipeResponse:
    try:
        stored = save_generated_recipe(
            store,
            user_id=user.id,
            content=req.content,
            name=req.name,
            ingredients=req.ingredients,
        )
    except DuplicateRecipeError:
        raise HTTPException(status_code=409, detail="Recipe already exists.")

    return SaveRecipeResponse(recipe=stored)


@router.delete("/{recipe_id}", response_model=RecipeDeleteResponse)
def delete(
    recipe_id: int,
    user: Identity = Depends(get_current_user),
    store: RecipeStore = Depends(get_store),
) -> RecipeDeleteResponse:
    if not store.delete_recipe(user_id=user.id, recipe_id=recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found or access denied")
    return RecipeDeleteResponse(message="Recipe deleted successfully")
