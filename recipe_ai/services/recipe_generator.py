# recipe_ai/services/recipe_generator.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

log = logging.getLogger("recipe_ai.generator")

FORMAT_INSTRUCTIONS = """Please format the recipe with the following structure:
- Recipe title
- Servings information
- Prep time and cook time
- Ingredients list (one per line with quantities)
- Step-by-step instructions (numbered)
- Nutritional Information (for total dish):
  * Total Calories
  * Total Weight (grams)
  * Total Protein (grams)
  * Total Carbohydrates (grams)
  * Total Fats (grams)
- Any helpful tips

Make it clear, well-organized, and easy to follow. Include accurate nutritional estimates based on the ingredients and quantities used. Calculate the TOTAL nutrition for the entire dish, not per serving."""


class GenerationError(Exception):
    pass


def build_prompt(name: Optional[str], ingredients: Optional[str]) -> str:
    name = (name or "").strip()
    ingredients = (ingredients or "").strip()

    if name:
        using = f" using these ingredients: {ingredients}" if ingredients else ""
        opening = f'Create a detailed recipe for "{name}"{using}.'
    elif ingredients:
        opening = f"Create a creative recipe using these ingredients: {ingredients}."
    else:
        opening = "Generate a random delicious recipe."

    return f"{opening}\n\n{FORMAT_INSTRUCTIONS}"


class RecipeGenerator:
    """
    Webhook first, Gemini second. A webhook failure is logged and falls
    through; only when every source fails does the caller see an error.
    """

    def __init__(self, *, webhook_client: Any = None, gemini_client: Any = None):
        self.webhook_client = webhook_client
        self.gemini_client = gemini_client

    @property
    def configured(self) -> bool:
        return any(
            c is not None and getattr(c, "configured", True)
            for c in (self.webhook_client, self.gemini_client)
        )

    async def _from_webhook(self, prompt: str, name: str, ingredients: str) -> Optional[str]:
        client = self.webhook_client
        if client is None or not getattr(client, "configured", True):
            return None

        payload: Dict[str, Any] = {"message": prompt, "name": name, "ingredients": ingredients}
        try:
            text = await client.trigger(payload)
        except Exception as e:
            log.warning("recipe webhook failed, falling back", extra={"error": str(e)})
            return None

        if not text.strip():
            log.warning("recipe webhook returned no text, falling back")
            return None
        return text

    async def generate(self, name: Optional[str] = None, ingredients: Optional[str] = None) -> str:
        prompt = build_prompt(name, ingredients)
        log.info("generating recipe", extra={"has_name": bool(name), "has_ingredients": bool(ingredients)})

        text = await self._from_webhook(prompt, name or "", ingredients or "")
        if text is not None:
            return text

        client = self.gemini_client
        if client is None or not getattr(client, "configured", True):
            raise GenerationError("No recipe generator available")

        try:
            text = await client.generate(prompt)
        except Exception as e:
            raise GenerationError(f"Recipe generation failed: {e}") from e

        if not text.strip():
            raise GenerationError("Recipe generation failed: empty response")
        return text
