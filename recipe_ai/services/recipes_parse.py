# recipe_ai/services/recipes_parse.py
from __future__ import annotations

import logging
import re
from typing import List, Optional, Protocol

from recipe_ai.core.text import normalize_markdown, strip_markdown
from recipe_ai.models.recipe import Nutrition, ParsedRecipe
from recipe_ai.services import lists, sections
from recipe_ai.services.nutrition import parse_nutrition

log = logging.getLogger("recipe_ai.parse")

_LIST_ITEM = re.compile(r"^(?:[-*•+]|\d+[.)])\s")


class RecipeTextParser(Protocol):
    default_title: str

    def parse(self, text: str) -> ParsedRecipe:
        ...


def empty_recipe(default_title: str) -> ParsedRecipe:
    return ParsedRecipe(title=default_title, nutrition=Nutrition())


def parse_or_empty(parser: RecipeTextParser, text: str) -> ParsedRecipe:
    """
    Parsing is decoration on top of the raw text, so a failure here must
    never block showing or saving that text.
    """
    try:
        return parser.parse(text)
    except Exception:
        log.exception("recipe parse failed", extra={"parser": type(parser).__name__})
        return empty_recipe(parser.default_title)


def _non_empty_lines(text: str) -> List[str]:
    return [ln for ln in text.split("\n") if ln.strip()]


class SavedRecipeParser:
    """
    Parser used when a generated recipe is persisted.

    Title comes from a three-pattern cascade over the cleaned text before
    falling back to the first line. Sections end at the first blank line.
    """

    default_title = "Untitled Recipe"

    TITLE_PATTERNS = [
        re.compile(r"^recipe[:\s]*(.+?)$", re.I | re.M),
        re.compile(r"^(.+?)\s*recipe$", re.I | re.M),
        re.compile(r"^([^:]+?)(?:\s*:|\s*$)", re.M),
    ]

    def parse(self, text: str) -> ParsedRecipe:
        content = strip_markdown(text)
        lines = _non_empty_lines(content)

        ingredients_section = sections.extract_section(content, sections.INGREDIENT_NAMES)
        instructions_section = sections.extract_section(content, sections.INSTRUCTION_NAMES)
        nutrition_section = sections.extract_section(content, sections.NUTRITION_NAMES)
        tips_section = sections.extract_section(content, sections.TIP_NAMES)

        return ParsedRecipe(
            title=self.title(content, lines),
            description=self.description(lines),
            ingredients=lists.split_list(ingredients_section) if ingredients_section else [],
            steps=lists.split_steps(instructions_section) if instructions_section else [],
            tips=lists.split_list(tips_section) if tips_section else [],
            nutrition=parse_nutrition(nutrition_section) if nutrition_section else Nutrition(),
            servings=sections.extract_info(content, sections.SERVING_KEYS),
            prep_time=sections.extract_info(content, sections.PREP_TIME_KEYS),
            cook_time=sections.extract_info(content, sections.COOK_TIME_KEYS),
            total_time=sections.extract_info(content, sections.TOTAL_TIME_KEYS),
        )

    def title(self, content: str, lines: List[str]) -> str:
        for pattern in self.TITLE_PATTERNS:
            m = pattern.search(content)
            if m and m.group(1) and m.group(1).strip():
                return m.group(1).strip()

        if lines:
            first = re.sub(r"[*#-]", "", lines[0]).strip()
            if first:
                return first
        return self.default_title

    @staticmethod
    def description(lines: List[str]) -> str:
        # Line 0 is taken to be the title.
        for line in lines[1:]:
            line = line.strip()
            if line and not sections.is_label_line(line):
                return line
        return ""


class DisplayRecipeParser:
    """
    Parser used to show a freshly generated recipe.

    Title is simply the first non-empty line. Section headings must sit on a
    line of their own, and a missing nutrition block is estimated from the
    whole recipe.
    """

    default_title = "Generated Recipe"

    def parse(self, text: str) -> ParsedRecipe:
        content = normalize_markdown(text)
        lines = _non_empty_lines(content)

        ingredients_section = sections.extract_heading_section(content, sections.INGREDIENT_NAMES)
        instructions_section = sections.extract_heading_section(content, sections.INSTRUCTION_NAMES)
        nutrition_section = sections.extract_heading_section(content, sections.NUTRITION_NAMES)
        tips_section = sections.extract_heading_section(content, sections.DISPLAY_TIP_NAMES)

        return ParsedRecipe(
            title=self.title(lines),
            description=self.description(lines),
            ingredients=lists.split_items(ingredients_section) if ingredients_section else [],
            steps=lists.split_numbered_steps(instructions_section) if instructions_section else [],
            tips=lists.split_items(tips_section) if tips_section else [],
            nutrition=parse_nutrition(nutrition_section or "", fallback_text=content),
            servings=sections.extract_info(content, sections.SERVING_KEYS),
            prep_time=sections.extract_info(content, sections.PREP_TIME_KEYS),
            cook_time=sections.extract_info(content, sections.COOK_TIME_KEYS),
            total_time=sections.extract_info(content, sections.TOTAL_TIME_KEYS),
        )

    def title(self, lines: List[str]) -> str:
        if not lines:
            return self.default_title
        title = re.sub(r"[*#]", "", lines[0]).strip().rstrip(":").strip()
        return title or self.default_title

    @staticmethod
    def description(lines: List[str]) -> str:
        for line in lines[1:]:
            line = line.strip()
            if sections.is_section_heading(line):
                break
            if sections.is_heading_line(line) or sections.is_label_line(line):
                continue
            if _LIST_ITEM.match(line):
                continue
            return line
        return ""


def parse_for_display(text: str) -> ParsedRecipe:
    return parse_or_empty(DisplayRecipeParser(), text)


def parse_for_save(text: str) -> ParsedRecipe:
    return parse_or_empty(SavedRecipeParser(), text)


def parser_for(kind: Optional[str]) -> RecipeTextParser:
    if kind == "save":
        return SavedRecipeParser()
    return DisplayRecipeParser()
