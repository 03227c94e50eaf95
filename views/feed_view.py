from typing import Any, List
from urllib.parse import quote, urlencode

from core.config import CARD_EXCERPT_MAX
from core.feed import ALL_TAG, filter_articles, tag_universe
from core.models import Article
from core.store import AppState
from core.utils import make_excerpt
from views.base import View
from views.layout import esc, render_page

NOT_FOUND_TEXT = "No articles found."


def _feed_url(search: str, tag: str) -> str:
    params = {}
    if search:
        params["q"] = search
    if tag and tag != ALL_TAG:
        params["tag"] = tag
    return "/?" + urlencode(params) if params else "/"


class FeedView(View):
    def __init__(self, excerpt_max: int = CARD_EXCERPT_MAX):
        self.excerpt_max = excerpt_max

    def _hero(self, search: str, tag: str) -> str:
        hidden_tag = ""
        if tag and tag != ALL_TAG:
            hidden_tag = f'<input type="hidden" name="tag" value="{esc(tag)}">'
        return (
            '<section class="hero">'
            "<h2>Welcome to ECG Article</h2>"
            "<p>Check out English learning tips, cross-cultural stories and event news "
            "from our staff and coaches.</p>"
            '<form class="search" method="get" action="/">'
            f'<input type="text" name="q" value="{esc(search)}" '
            'placeholder="Search by keyword...">'
            f"{hidden_tag}"
            "</form>"
            "</section>"
        )

    def _tag_bar(self, tags: List[str], search: str, selected: str) -> str:
        items = []
        for t in tags:
            cls = "tag-filter active" if t == selected else "tag-filter"
            items.append(f'<a class="{cls}" href="{esc(_feed_url(search, t))}">{esc(t)}</a>')
        return f'<div class="tag-bar">{"".join(items)}</div>'

    def _card(self, article: Article) -> str:
        if article.image:
            media = f'<img src="{esc(article.image)}" alt="{esc(article.title)}">'
        else:
            media = '<div class="image-placeholder" aria-hidden="true"></div>'
        chips = "".join(f'<span class="tag-chip">#{esc(t)}</span>' for t in article.tags)
        href = "/articles/" + quote(str(article.id), safe="")
        return (
            f'<article class="card" data-id="{esc(article.id)}">'
            f'<a href="{esc(href)}">'
            f'<div class="card-media">{media}'
            f'<span class="category-badge">{esc(article.category)}</span></div>'
            '<div class="card-body">'
            f'<div class="card-meta"><span class="date">{esc(article.date)}</span>'
            f' • <span class="author">{esc(article.author)}</span></div>'
            f"<h3>{esc(article.title)}</h3>"
            f'<p class="excerpt">{esc(make_excerpt(article.content, self.excerpt_max))}</p>'
            f'<div class="tags">{chips}</div>'
            "</div></a></article>"
        )

    def render_body(self, state: AppState, search: str = "", tag: str = ALL_TAG) -> str:
        tags = tag_universe(state.articles)
        visible = filter_articles(state.articles, search, tag)
        cards = "".join(self._card(a) for a in visible)
        parts = [
            self._hero(search, tag),
            self._tag_bar(tags, search, tag),
            f'<div class="card-grid">{cards}</div>',
        ]
        # Only after loading finished, so "not found" never flashes early.
        if not state.loading and not visible:
            parts.append(f'<div class="empty-state"><p>{NOT_FOUND_TEXT}</p></div>')
        return '<div class="feed">' + "".join(parts) + "</div>"

    def render(self, state: AppState, **kwargs: Any) -> str:
        search = kwargs.get("search") or ""
        tag = kwargs.get("tag") or ALL_TAG
        return render_page(state, self.render_body(state, search, tag))
