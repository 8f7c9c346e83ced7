from __future__ import annotations

from recipe_ai.core.text import normalize_markdown, strip_markdown


def test_removes_bold_italic_and_heading_markers():
    text = "## **Spicy** Chicken\n*Quick* weeknight dinner"
    assert normalize_markdown(text) == "Spicy Chicken\nQuick weeknight dinner"


def test_bullet_asterisks_survive():
    text = "* 2 eggs\n* 1 cup milk"
    assert normalize_markdown(text) == text


def test_empty_input_gives_empty_output():
    assert normalize_markdown("") == ""
    assert normalize_markdown(None) == ""


def test_normalizing_twice_is_a_no_op():
    text = "### Tips\n- **Rest** the *dough*\n#### ## Notes:\n***Serve warm***\n*Serve with *fresh* basil*"
    once = normalize_markdown(text)
    assert normalize_markdown(once) == once
    assert "*" not in once.replace("- ", "")
    assert "#" not in once


def test_strip_markdown_removes_hashes_anywhere():
    assert strip_markdown("# Title #1\n**Bold** text\n") == "Title 1\nBold text"


def test_nested_emphasis_is_fully_removed():
    assert normalize_markdown("*Serve with *fresh* basil*") == "Serve with fresh basil"
    assert normalize_markdown("*:*1*:*") == ":1:"
    assert normalize_markdown(":1:") == ":1:"
