import re

_EMPHASIS_RUN = re.compile(r"\*{2,}")
_EMPHASIS_PAIR = re.compile(r"(?<![\w*])\*(?=\S)([^*\n]+?)(?<=\S)\*(?![\w*])")
_HEADING_MARK = re.compile(r"^[ \t]*(?:#+[ \t]*)+", flags=re.M)


def _normalize_once(text: str) -> str:
    text = _EMPHASIS_RUN.sub("", text)
    text = _EMPHASIS_PAIR.sub(r"\1", text)
    text = _HEADING_MARK.sub("", text)
    return text.strip()


def normalize_markdown(text: str) -> str:
    """
    Remove bold/italic markers and heading hashes so they don't leak into
    titles and list items. Bullet asterisks ("* item") are left alone.

    Nested emphasis ("*a *b* c*") only loses its inner pair per pass, so
    passes repeat until the text stops changing. Every pass only deletes
    characters, which bounds the loop.
    """
    text = text or ""
    while True:
        cleaned = _normalize_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def strip_markdown(text: str) -> str:
    # Save-path cleanup: every "**" and every run of "#", wherever it sits.
    text = (text or "").replace("**", "")
    return re.sub(r"#+", "", text).strip()
