from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

CATEGORIES = ("General", "English Tips", "Events", "Culture", "Staff Voice")
DEFAULT_CATEGORY = "General"

ArticleId = Union[int, str]


def split_tags(raw: str) -> List[str]:
    """Split a comma-separated tag string, trimming and dropping empties."""
    return [t.strip() for t in (raw or "").split(",") if t.strip()]


def _clean_tags(value: Any) -> List[str]:
    if isinstance(value, str):
        return split_tags(value)
    if isinstance(value, (list, tuple)):
        out = []
        for t in value:
            if t is None:
                continue
            t = str(t).strip()
            if t:
                out.append(t)
        return out
    return []


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Article:
    id: ArticleId
    title: str
    author: str
    category: str
    content: str
    tags: List[str] = field(default_factory=list)
    date: str = ""  # YYYY-MM-DD
    image: str = ""  # empty = no image

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Article":
        # category is kept verbatim: records written by other sources may fall
        # outside CATEGORIES.
        return cls(
            id=record.get("id", ""),
            title=_text(record.get("title")),
            author=_text(record.get("author")),
            category=_text(record.get("category")),
            content=_text(record.get("content")),
            tags=_clean_tags(record.get("tags")),
            date=_text(record.get("date")),
            image=_text(record.get("image")).strip(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "category": self.category,
            "content": self.content,
            "tags": list(self.tags),
            "date": self.date,
            "image": self.image,
        }
