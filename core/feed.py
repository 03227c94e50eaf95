from typing import Iterable, List

from core.models import Article

ALL_TAG = "All"


def tag_universe(articles: Iterable[Article]) -> List[str]:
    """Return "All" first, then every distinct tag in first-seen order."""
    seen = {ALL_TAG}
    out = [ALL_TAG]
    for a in articles:
        for t in a.tags or []:
            if t not in seen:
                seen.add(t)
                out.append(t)
    return out


def matches_search(article: Article, term: str) -> bool:
    if not term:
        return True
    needle = term.lower()
    return needle in (article.title or "").lower() or needle in (article.content or "").lower()


def matches_tag(article: Article, tag: str) -> bool:
    if not tag or tag == ALL_TAG:
        return True
    return tag in (article.tags or [])


def filter_articles(articles: Iterable[Article], search: str = "", tag: str = ALL_TAG) -> List[Article]:
    return [a for a in articles if matches_search(a, search) and matches_tag(a, tag)]
