# recipe_ai/services/sections.py
from __future__ import annotations

import re
from typing import Iterable, List, Optional

INGREDIENT_NAMES = ["ingredients", "what you need", "shopping list"]
INSTRUCTION_NAMES = ["instructions", "directions", "method", "steps", "preparation"]
NUTRITION_NAMES = ["nutritional information", "nutrition", "nutrition facts"]
TIP_NAMES = ["tips", "helpful tips", "notes"]
DISPLAY_TIP_NAMES = ["tips", "helpful tips", "chef's tips", "notes", "variations"]

SERVING_KEYS = ["servings", "serves", "portions"]
PREP_TIME_KEYS = ["prep time", "preparation time"]
COOK_TIME_KEYS = ["cook time", "cooking time", "bake time"]
TOTAL_TIME_KEYS = ["total time", "time"]

SECTION_NAMES = INGREDIENT_NAMES + INSTRUCTION_NAMES + NUTRITION_NAMES + DISPLAY_TIP_NAMES
INFO_LABELS = ["servings", "serves", "yield", "portions", "prep time", "preparation time",
               "cook time", "cooking time", "bake time", "total time"]

# Lines that open with one of these are metadata/headings, not narrative.
LABEL_LINE_PATTERNS = [
    re.compile(r"^ingredients[:\s]*", re.I),
    re.compile(r"^instructions?[:\s]*", re.I),
    re.compile(r"^steps?[:\s]*", re.I),
    re.compile(r"^tips?[:\s]*", re.I),
    re.compile(r"^servings?[:\s]*", re.I),
    re.compile(r"^prep time[:\s]*", re.I),
    re.compile(r"^cook time[:\s]*", re.I),
    re.compile(r"^total time[:\s]*", re.I),
]


def is_label_line(line: str) -> bool:
    return any(p.match(line) for p in LABEL_LINE_PATTERNS)


def _alternation(names: Iterable[str]) -> str:
    # Longest first so "nutrition facts" beats "nutrition".
    return "|".join(re.escape(n) for n in sorted(set(names), key=len, reverse=True))


def extract_section(content: str, names: Iterable[str]) -> Optional[str]:
    """
    Save-path section lookup.

    The body starts on the line after "<name>[:]" and stops at the first blank
    line, the end of the text, or a line holding a single word (a bare
    heading such as "Instructions:"). Names are tried in order and the first
    hit wins. An unrecognised next heading means the body runs to the end.
    """
    for name in names:
        m = re.search(
            rf"{re.escape(name)}[:\s]*\n([\s\S]*?)(?=\n\n|$|\n[a-zA-Z]+[:\s]*\n)",
            content,
            flags=re.I,
        )
        if m:
            return m.group(1).strip()
    return None


def extract_info(content: str, keywords: Iterable[str]) -> Optional[str]:
    for keyword in keywords:
        m = re.search(rf"{re.escape(keyword)}[:\s]*([^\n]+)", content, flags=re.I)
        if m:
            return m.group(1).strip()
    return None


# Up to two capitalised lead words ("Helpful Tips", "Step-by-Step Instructions").
_LEAD_WORDS = r"(?-i:(?:[A-Z][A-Za-z'-]*[ \t]+){0,2})"
_PAREN = r"(?:[ \t]*\([^)\n]*\))?"

_SECTION_HEADING = re.compile(
    rf"^[ \t]*{_LEAD_WORDS}(?:{_alternation(SECTION_NAMES)}){_PAREN}[ \t]*:?[ \t]*$",
    flags=re.I,
)
_INFO_HEADING = re.compile(rf"^[ \t]*(?:{_alternation(INFO_LABELS)})[ \t]*:", flags=re.I)
_CAPS_HEADING = re.compile(r"^[ \t]*[A-Z][A-Z &'-]{2,}:?[ \t]*$")


def is_section_heading(line: str) -> bool:
    return bool(_SECTION_HEADING.match(line) or _CAPS_HEADING.match(line))


def is_heading_line(line: str) -> bool:
    return is_section_heading(line) or bool(_INFO_HEADING.match(line))


def extract_heading_section(content: str, names: Iterable[str]) -> Optional[str]:
    """
    Display-path section lookup: the heading must sit on a line of its own.
    Blank lines straight after the heading are skipped; the body then ends
    at the first blank line, the next heading-style line, or the end of the
    text.
    """
    for name in names:
        heading = re.compile(
            rf"^[ \t]*{_LEAD_WORDS}{re.escape(name)}{_PAREN}[ \t]*:?[ \t]*$",
            flags=re.I | re.M,
        )
        m = heading.search(content)
        if not m:
            continue

        body: List[str] = []
        for line in content[m.end():].split("\n"):
            if not line.strip():
                if body:
                    break
                continue
            if is_heading_line(line):
                break
            body.append(line)
        return "\n".join(body).strip()
    return None
