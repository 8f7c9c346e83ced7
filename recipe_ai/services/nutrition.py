# recipe_ai/services/nutrition.py
from __future__ import annotations

import math
import re
from typing import Dict, List, Optional, Tuple, Union

from recipe_ai.models.recipe import Nutrition

Number = Union[int, float]

FIELDS = ("calories", "weight", "protein", "carbohydrates", "fats")

_NUTRIENT_PATTERNS = {
    "calories": re.compile(r"(?:calories?|kcal|energy)[:\s]*(\d+)", re.I),
    "weight": re.compile(r"(?:weight|serving size|portion)[:\s]*(\d+(?:\.\d+)?)", re.I),
    "protein": re.compile(r"(?:protein|proteins)[:\s]*(\d+(?:\.\d+)?)", re.I),
    "carbohydrates": re.compile(r"(?:carbohydrates?|carbs|carb)[:\s]*(\d+(?:\.\d+)?)", re.I),
    "fats": re.compile(r"(?:fats?|fat|lipids)[:\s]*(\d+(?:\.\d+)?)", re.I),
}

_WEIGHT_MENTION = re.compile(r"(\d+(?:\.\d+)?)\s*(g|gram|grams|kg|kilo|kilos)", re.I)

# (calories, protein, carbohydrates, fats)
DEFAULT_BASELINE: Tuple[int, int, int, int] = (300, 15, 30, 12)

# Checked in order; the first category with a keyword in the text wins.
CATEGORY_BASELINES: List[Tuple[Tuple[str, ...], Tuple[int, int, int, int]]] = [
    (("salad", "vegetable"), (150, 8, 20, 5)),
    (("pasta", "rice", "noodle"), (400, 12, 60, 8)),
    (("meat", "chicken", "beef", "pork"), (350, 25, 15, 15)),
    (("fish", "salmon", "tuna"), (250, 20, 5, 12)),
    (("soup", "stew"), (200, 10, 25, 8)),
    (("dessert", "cake", "cookie", "sweet"), (350, 5, 45, 15)),
    (("breakfast", "egg", "pancake"), (300, 15, 25, 12)),
]

# Per gram of summed ingredient weight.
CALORIES_PER_GRAM = 1.5
PROTEIN_PER_GRAM = 0.10
CARBS_PER_GRAM = 0.15
FATS_PER_GRAM = 0.05

# Share of calories per macro, and kcal per gram of that macro.
PROTEIN_SHARE, CARBS_SHARE, FATS_SHARE = 0.15, 0.55, 0.30
KCAL_PROTEIN, KCAL_CARBS, KCAL_FATS = 4, 4, 9
CALORIES_PER_GRAM_SERVED = 2


def round_half_up(value: float) -> int:
    # round() would give banker's rounding: 2.5 -> 2.
    return int(math.floor(value + 0.5))


def _number(raw: str) -> Number:
    value = float(raw)
    return int(value) if value.is_integer() else value


def scan_nutrients(text: str) -> Dict[str, Number]:
    """Per-line keyword scan. A later line overrides an earlier one."""
    found: Dict[str, Number] = dict.fromkeys(FIELDS, 0)
    for line in (text or "").split("\n"):
        line = line.lower().strip()
        for field, pattern in _NUTRIENT_PATTERNS.items():
            m = pattern.search(line)
            if m:
                found[field] = int(m.group(1)) if field == "calories" else _number(m.group(1))
    return found


def parse_nutrition(text: Optional[str], fallback_text: Optional[str] = None) -> Nutrition:
    """
    Read explicit values from a nutrition section and back-fill the gaps.

    When nothing at all is found the whole record is estimated from
    ``fallback_text`` (or ``text`` itself when no fallback is given).
    """
    found = scan_nutrients(text or "")

    if not any(found.values()):
        return estimate_nutrition(fallback_text or text or "")

    calories = found["calories"]
    weight = found["weight"]
    protein = found["protein"]
    carbohydrates = found["carbohydrates"]
    fats = found["fats"]

    if calories == 0:
        calories = round_half_up(protein * KCAL_PROTEIN + carbohydrates * KCAL_CARBS + fats * KCAL_FATS)
    if weight == 0:
        weight = round_half_up(calories / CALORIES_PER_GRAM_SERVED)
    if protein == 0:
        protein = round_half_up(calories * PROTEIN_SHARE / KCAL_PROTEIN)
    if carbohydrates == 0:
        carbohydrates = round_half_up(calories * CARBS_SHARE / KCAL_CARBS)
    if fats == 0:
        fats = round_half_up(calories * FATS_SHARE / KCAL_FATS)

    return Nutrition(
        calories=calories,
        weight=weight,
        protein=protein,
        carbohydrates=carbohydrates,
        fats=fats,
    )


def total_ingredient_weight(text: str) -> float:
    """Sum every "<n> g/gram(s)/kg/kilo(s)" mention, in grams."""
    total = 0.0
    for m in _WEIGHT_MENTION.finditer(text or ""):
        amount = float(m.group(1))
        unit = m.group(2).lower()
        if "kg" in unit or "kilo" in unit:
            amount *= 1000
        total += amount
    return total


def category_baseline(text: str) -> Tuple[int, int, int, int]:
    lowered = (text or "").lower()
    for keywords, baseline in CATEGORY_BASELINES:
        if any(k in lowered for k in keywords):
            return baseline
    return DEFAULT_BASELINE


def estimate_nutrition(text: str) -> Nutrition:
    calories, protein, carbohydrates, fats = category_baseline(text)
    total_weight = total_ingredient_weight(text)

    if total_weight > 0:
        # Ingredient weights beat the category guess outright.
        calories = round_half_up(total_weight * CALORIES_PER_GRAM)
        protein = round_half_up(total_weight * PROTEIN_PER_GRAM)
        carbohydrates = round_half_up(total_weight * CARBS_PER_GRAM)
        fats = round_half_up(total_weight * FATS_PER_GRAM)
    else:
        total_weight = calories / CALORIES_PER_GRAM

    return Nutrition(
        calories=calories,
        weight=round_half_up(total_weight),
        protein=protein,
        carbohydrates=carbohydrates,
        fats=fats,
    )
