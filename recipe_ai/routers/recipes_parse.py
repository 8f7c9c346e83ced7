# recipe_ai/routers/recipes_parse.py
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from recipe_ai.models.recipe import ParsedRecipe
from recipe_ai.services.recipes_parse import parse_or_empty, parser_for

router = APIRouter(prefix="/recipes", tags=["recipe"])


class RecipeParseRequest(BaseModel):
    text: str
    mode: Literal["display", "save"] = "display"


@router.post("/parse", response_model=ParsedRecipe)
def recipe_parse(req: RecipeParseRequest) -> ParsedRecipe:
    return parse_or_empty(parser_for(req.mode), req.text)
