# recipe_ai/services/lists.py
from __future__ import annotations

import re
from typing import List

from recipe_ai.services.sections import SECTION_NAMES

MIN_FRAGMENT_LEN = 10


def _fallback_fragments(parts: List[str]) -> List[str]:
    return [p.strip() for p in parts if len(p.strip()) > MIN_FRAGMENT_LEN]


# --- save path -------------------------------------------------------------


def split_list(text: str) -> List[str]:
    items: List[str] = []
    for line in text.split("\n"):
        line = re.sub(r"^[-*•]\s*", "", line)
        line = re.sub(r"^\d+\.\s*", "", line).strip()
        if not line or re.match(r"^[a-zA-Z]+[:\s]*$", line):
            continue
        items.append(line)
    return items


def split_steps(text: str) -> List[str]:
    steps = [
        re.sub(r"^\d+\.\s*", "", s).strip()
        for s in re.split(r"\n\d+\.\s*|\n(?=\d+\.\s*)", text)
    ]
    steps = [s for s in steps if s]

    if len(steps) <= 1:
        return _fallback_fragments(re.split(r"\n\n|\. (?=[A-Z])", text))

    return steps


# --- display path ----------------------------------------------------------

_ITEM_MARKER = re.compile(r"^\s*(?:[-*•+]|\d+[.)](?=\s))\s*")
_PUNCT_ONLY = re.compile(r"^[\W_]+$")
_SECTION_LABEL = re.compile(
    r"(?:" + "|".join(re.escape(n) for n in SECTION_NAMES) + r")\s*:?",
    flags=re.I,
)
_STEP_NUMBER = re.compile(r"^[ \t]*\d+\.[ \t]*", flags=re.M)


def split_items(text: str) -> List[str]:
    """Split an ingredient or tip block into one cleaned entry per line."""
    items: List[str] = []
    for line in text.split("\n"):
        line = _ITEM_MARKER.sub("", line).replace("*", "").strip()
        if not line or _PUNCT_ONLY.match(line) or _SECTION_LABEL.fullmatch(line):
            continue
        items.append(line)
    return items


def split_numbered_steps(text: str) -> List[str]:
    """
    Split on "<n>." at line starts. Lines wrapped under a number are joined
    into that step. When numbering yields one step or none the text is
    re-split into paragraphs and sentences instead.
    """
    steps: List[str] = []
    for chunk in _STEP_NUMBER.split(text):
        step = " ".join(ln.strip() for ln in chunk.split("\n") if ln.strip())
        step = re.sub(r"\s+", " ", step.replace("*", "")).strip()
        if step:
            steps.append(step)

    if len(steps) <= 1:
        return _fallback_fragments(re.split(r"\n\s*\n|(?<=[.!?])\s+(?=[A-Z])", text))

    return steps
