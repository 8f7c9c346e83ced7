from __future__ import annotations

from recipe_ai.services.lists import split_items, split_list, split_numbered_steps, split_steps


def test_numbered_ingredients_lose_their_numbers():
    assert split_list("1. 200g chicken\n2. 1 onion") == ["200g chicken", "1 onion"]


def test_split_list_drops_single_word_lines():
    # "Sauce:" is a sub-heading; a bare "salt" looks the same and goes too
    assert split_list("- 2 cups flour\nSauce:\n- salt\n\n• 1 tsp sugar") == ["2 cups flour", "1 tsp sugar"]


def test_split_steps_on_numbers():
    assert split_steps("1. Boil water.\n2. Add pasta.") == ["Boil water.", "Add pasta."]


def test_split_steps_falls_back_to_sentences():
    text = "Boil the water in a large pot. Add the pasta and cook until tender."
    assert split_steps(text) == ["Boil the water in a large pot", "Add the pasta and cook until tender."]


def test_split_steps_fallback_drops_short_fragments():
    assert split_steps("Mix. Bake it until golden brown.") == ["Bake it until golden brown."]


def test_split_items_cleans_markers_and_labels():
    text = "- 2 cups flour\n* 1 tsp salt\n1. 200g chicken\n---\nIngredients:\n**Sugar**\n1.5 cups milk"
    assert split_items(text) == ["2 cups flour", "1 tsp salt", "200g chicken", "Sugar", "1.5 cups milk"]


def test_split_numbered_steps_joins_wrapped_lines():
    text = "1. Preheat the oven.\n2. Mix flour\n   and sugar.\n3. Bake."
    assert split_numbered_steps(text) == ["Preheat the oven.", "Mix flour and sugar.", "Bake."]


def test_split_numbered_steps_simple():
    assert split_numbered_steps("1. Boil water.\n2. Add pasta.") == ["Boil water.", "Add pasta."]


def test_split_numbered_steps_fallback_keeps_punctuation():
    text = "Boil the water in a pot. Add the pasta now!"
    assert split_numbered_steps(text) == ["Boil the water in a pot.", "Add the pasta now!"]


def test_single_numbered_step_goes_through_fallback():
    assert split_numbered_steps("1. Whisk the eggs until fluffy.") == ["Whisk the eggs until fluffy."]


def test_splitting_is_repeatable():
    text = "1. Boil water.\n2. Add pasta."
    assert split_numbered_steps(text) == split_numbered_steps(text)
    assert split_steps(text) == split_steps(text)


def test_sub_bullets_under_a_step_collapse_to_single_spaces():
    text = "1. Make sauce:\n   * Mix the soy sauce\n   * Add honey\n2. Serve."
    assert split_numbered_steps(text) == ["Make sauce: Mix the soy sauce Add honey", "Serve."]
