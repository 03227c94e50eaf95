"""Editor form: collects raw input and turns it into a new Article record."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Optional

from core.models import CATEGORIES, DEFAULT_CATEGORY, Article, split_tags

REQUIRED_FIELDS = ("title", "author", "content")


def parse_tags(raw: str) -> List[str]:
    return split_tags(raw)


@dataclass
class EditorForm:
    title: str = ""
    author: str = ""
    category: str = DEFAULT_CATEGORY
    content: str = ""
    image: str = ""
    tags: str = ""  # raw comma-separated input

    @classmethod
    def from_post(cls, data: Mapping[str, Any]) -> "EditorForm":
        def get(name: str, default: str = "") -> str:
            v = data.get(name)
            return default if v is None else str(v)

        return cls(
            title=get("title"),
            author=get("author"),
            category=get("category", DEFAULT_CATEGORY),
            content=get("content"),
            image=get("image"),
            tags=get("tags"),
        )

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    def errors(self) -> List[str]:
        errs = self.missing_fields()
        if self.category not in CATEGORIES:
            errs.append("category")
        return errs


def build_article(form: EditorForm, now: Optional[datetime] = None) -> Article:
    """Stamp id and date from the local clock and split the tag input."""
    now = now or datetime.now()
    return Article(
        id=int(now.timestamp() * 1000),
        title=form.title,
        author=form.author,
        category=form.category,
        content=form.content,
        tags=parse_tags(form.tags),
        date=now.date().isoformat(),
        image=form.image.strip(),
    )
