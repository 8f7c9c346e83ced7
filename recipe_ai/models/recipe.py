from __future__ import annotations

from typing import List, Optional, Union
from pydantic import BaseModel, Field

Number = Union[int, float]


class Nutrition(BaseModel):
    calories: Number = Field(default=0, ge=0)
    weight: Number = Field(default=0, ge=0)
    protein: Number = Field(default=0, ge=0)
    carbohydrates: Number = Field(default=0, ge=0)
    fats: Number = Field(default=0, ge=0)


class ParsedRecipe(BaseModel):
    title: str
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    nutrition: Nutrition = Field(default_factory=Nutrition)
    servings: Optional[str] = None
    prep_time: Optional[str] = Field(default=None, alias="prepTime")
    cook_time: Optional[str] = Field(default=None, alias="cookTime")
    total_time: Optional[str] = Field(default=None, alias="totalTime")

    model_config = {"populate_by_name": True}


class StoredRecipe(ParsedRecipe):
    id: int
    user_id: str = Field(alias="userId")
    created_at: str = Field(alias="createdAt")


class GenerateRecipeRequest(BaseModel):
    name: Optional[str] = None
    ingredients: Optional[str] = None


class GenerateRecipeResponse(BaseModel):
    text: str
    recipe: ParsedRecipe


class SaveRecipeRequest(BaseModel):
    name: Optional[str] = None
    ingredients: Optional[str] = None
    content: str


class CreateRecipeRequest(BaseModel):
    # All optional; the route answers a missing one with 400.
    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[List[str]] = None
    steps: Optional[List[str]] = None


class CreateRecipeResponse(BaseModel):
    success: bool = True
    recipe_id: int = Field(alias="recipeId")
    message: str = "Recipe created successfully"

    model_config = {"populate_by_name": True}


class SaveRecipeResponse(BaseModel):
    success: bool = True
    recipe: StoredRecipe


class RecipeListResponse(BaseModel):
    success: bool = True
    recipes: List[StoredRecipe]
    count: int


class RecipeGetResponse(BaseModel):
    success: bool = True
    recipe: StoredRecipe


class RecipeDeleteResponse(BaseModel):
    success: bool = True
    message: str
