# recipe_ai/routers/generate.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from recipe_ai.core.deps import get_current_user, get_generator
from recipe_ai.models.identity import Identity
from recipe_ai.models.recipe import GenerateRecipeRequest, GenerateRecipeResponse
from recipe_ai.services.recipe_generator import GenerationError, RecipeGenerator
from recipe_ai.services.recipes_parse import parse_for_display

router = APIRouter(prefix="/recipes", tags=["generate"])


@router.post("/generate", response_model=GenerateRecipeResponse)
async def generate(
    req: GenerateRecipeRequest,
    user: Identity = Depends(get_current_user),
    generator: RecipeGenerator = Depends(get_generator),
) -> GenerateRecipeResponse:
    if not generator.configured:
        raise HTTPException(status_code=500, detail="Generator not configured")

    try:
        text = await generator.generate(name=req.name, ingredients=req.ingredients)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=f"Failed to generate recipe: {e}")

    return GenerateRecipeResponse(text=text, recipe=parse_for_display(text))
