import re


def truncate_text(text: str, limit: int) -> str:
    text = text or ""
    if len(text) > limit:
        return text[: max(0, limit - 3)] + "..."
    return text


def make_excerpt(content: str, max_chars: int) -> str:
    """Single-line preview of an article body for feed cards.

    Content is free text: markup-like runs and entities are kept as typed
    and escaped at render time, like the detail view.
    """
    text = re.sub(r"\s+", " ", content or "").strip()
    return truncate_text(text, max_chars)
