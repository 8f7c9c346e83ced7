from __future__ import annotations

from recipe_ai.services import lists
from recipe_ai.services.recipes_parse import (
    DisplayRecipeParser,
    SavedRecipeParser,
    parse_for_display,
    parse_for_save,
    parse_or_empty,
    parser_for,
)

SAMPLE = """# Lemon Garlic Chicken

A bright weeknight dinner with crisp skin.

**Servings:** 4
**Prep Time:** 15 minutes
**Cook Time:** 30 minutes

## Ingredients:
- 500 g chicken thighs
- 2 lemons
- 4 cloves garlic

## Instructions:
1. Preheat the oven to 200C.
2. Season the chicken with lemon and garlic.
3. Roast for 30 minutes.

## Nutritional Information (for total dish):
- Total Calories: 1200
- Total Protein: 110g
- Total Carbohydrates: 20g
- Total Fats: 70g

## Tips:
- Rest the chicken for 5 minutes before serving.
"""


def test_display_parse_of_typical_output():
    r = parse_for_display(SAMPLE)

    assert r.title == "Lemon Garlic Chicken"
    assert r.description == "A bright weeknight dinner with crisp skin."
    assert r.ingredients == ["500 g chicken thighs", "2 lemons", "4 cloves garlic"]
    assert r.steps == [
        "Preheat the oven to 200C.",
        "Season the chicken with lemon and garlic.",
        "Roast for 30 minutes.",
    ]
    assert r.tips == ["Rest the chicken for 5 minutes before serving."]
    assert (r.nutrition.calories, r.nutrition.weight, r.nutrition.protein) == (1200, 600, 110)
    assert (r.nutrition.carbohydrates, r.nutrition.fats) == (20, 70)
    assert r.servings == "4"
    assert r.prep_time == "15 minutes"
    assert r.cook_time == "30 minutes"


def test_save_parse_of_typical_output():
    r = parse_for_save(SAMPLE)

    assert r.title == "Lemon Garlic Chicken"
    assert r.description == "A bright weeknight dinner with crisp skin."
    assert r.ingredients == ["500 g chicken thighs", "2 lemons", "4 cloves garlic"]
    assert r.steps == [
        "Preheat the oven to 200C.",
        "Season the chicken with lemon and garlic.",
        "Roast for 30 minutes.",
    ]
    assert r.tips == ["Rest the chicken for 5 minutes before serving."]
    assert r.servings == "4"


def test_save_parse_needs_nutrition_keyword_right_before_newline():
    # "(for total dish)" sits between the keyword and the newline
    r = parse_for_save(SAMPLE)
    assert r.nutrition.calories == 0
    assert r.nutrition.weight == 0


def test_save_parse_reads_plain_nutrition_section():
    text = "Chicken Rice Bowl\nNutrition:\nCalories: 450\nProtein: 20g\nCarbohydrates: 50g\nFats: 15g"
    n = parse_for_save(text).nutrition
    assert (n.calories, n.weight, n.protein, n.carbohydrates, n.fats) == (450, 225, 20, 50, 15)


def test_titles_disagree_between_parsers():
    text = "Here is a tasty idea for tonight\nRecipe: Tomato Soup\nIngredients:\n- 4 tomatoes"
    assert parse_for_save(text).title == "Tomato Soup"
    assert parse_for_display(text).title == "Here is a tasty idea for tonight"


def test_saved_title_trailing_recipe_word():
    text = "Grandma's Apple Pie Recipe\nIngredients:\n- 3 apples"
    assert parse_for_save(text).title == "Grandma's Apple Pie"
    assert parse_for_display(text).title == "Grandma's Apple Pie Recipe"


def test_saved_title_stops_at_colon():
    text = "Pancakes: fluffy and light\nIngredients:\n- 2 eggs"
    assert parse_for_save(text).title == "Pancakes"
    assert parse_for_display(text).title == "Pancakes: fluffy and light"


def test_default_titles_for_blank_text():
    assert parse_for_save("").title == "Untitled Recipe"
    assert parse_for_display("   \n  ").title == "Generated Recipe"


def test_blank_text_nutrition_differs_by_parser():
    saved = parse_for_save("").nutrition
    shown = parse_for_display("").nutrition
    assert saved.calories == 0
    assert (shown.calories, shown.weight, shown.protein, shown.carbohydrates, shown.fats) == (300, 200, 15, 30, 12)


def test_display_estimates_nutrition_from_whole_text():
    text = (
        "Simple Green Salad\n"
        "Ingredients:\n- 1 cucumber\n- 2 tomatoes\n"
        "Instructions:\n1. Chop everything.\n2. Toss and serve."
    )
    r = parse_for_display(text)
    assert r.ingredients == ["1 cucumber", "2 tomatoes"]
    assert r.steps == ["Chop everything.", "Toss and serve."]
    assert (r.nutrition.calories, r.nutrition.weight) == (150, 100)


def test_display_numbered_ingredients():
    r = parse_for_display("Ingredients:\n1. 200g chicken\n2. 1 onion")
    assert r.ingredients == ["200g chicken", "1 onion"]


def test_failed_parse_yields_empty_recipe(monkeypatch):
    def boom(text):
        raise ValueError("bad list")

    monkeypatch.setattr(lists, "split_list", boom)
    r = parse_for_save(SAMPLE)
    assert r.title == "Untitled Recipe"
    assert r.ingredients == [] and r.steps == []
    assert r.nutrition.calories == 0


def test_parse_or_empty_uses_parser_default_title():
    class Broken:
        default_title = "Fallback"

        def parse(self, text):
            raise RuntimeError("nope")

    assert parse_or_empty(Broken(), "anything").title == "Fallback"


def test_parser_for():
    assert isinstance(parser_for("save"), SavedRecipeParser)
    assert isinstance(parser_for("display"), DisplayRecipeParser)
    assert isinstance(parser_for(None), DisplayRecipeParser)


def test_display_sections_end_at_blank_line():
    text = (
        "Lemon Pasta\n\n"
        "Ingredients:\n- 200 g pasta\n- 1 lemon\n\n"
        "Serve it with a glass of white wine.\n\n"
        "Instructions:\n1. Boil the pasta.\n2. Add lemon juice.\n\n"
        "Enjoy your delicious lemon pasta with friends!"
    )
    shown = parse_for_display(text)
    assert shown.ingredients == ["200 g pasta", "1 lemon"]
    assert shown.steps == ["Boil the pasta.", "Add lemon juice."]
    assert parse_for_save(text).steps == shown.steps
