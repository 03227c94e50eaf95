from typing import Any
from urllib.parse import quote

from core.models import Article
from core.store import CONFIRM_DELETE_MESSAGE, AppState
from views.base import View
from views.layout import esc, render_page


def article_path(article: Article) -> str:
    return "/articles/" + quote(str(article.id), safe="")


class DetailView(View):
    def render_body(self, state: AppState, article: Article) -> str:
        parts = ['<div class="detail">', '<a class="back" href="/">&lsaquo; Back to Feed</a>']
        parts.append('<article class="article-full">')
        if article.image:
            parts.append(
                f'<div class="hero-image"><img src="{esc(article.image)}" alt="{esc(article.title)}"></div>'
            )
        parts.append(
            '<div class="article-meta">'
            f'<span class="category-badge">{esc(article.category)}</span>'
            f'<span class="date">{esc(article.date)}</span>'
            "</div>"
        )
        parts.append(f"<h1>{esc(article.title)}</h1>")
        parts.append(
            '<div class="byline">'
            f'<p class="author">{esc(article.author)}</p>'
            '<p class="role">ECG Staff Member</p>'
            "</div>"
        )
        parts.append(f'<div class="article-content" style="white-space: pre-wrap">{esc(article.content)}</div>')
        chips = "".join(f'<span class="tag-chip">#{esc(t)}</span>' for t in article.tags)
        parts.append(f'<div class="related-tags"><h4>Related Tags</h4><div class="tags">{chips}</div></div>')
        parts.append("</article>")

        if state.admin_mode:
            parts.append(
                '<div class="admin-actions">'
                f'<a class="delete-link" href="{esc(article_path(article))}/delete">'
                "Delete this article (admin only)</a>"
                "</div>"
            )
        parts.append("</div>")
        return "".join(parts)

    def render_confirm(self, state: AppState, article: Article) -> str:
        """Confirmation step that stands in for a blocking confirm dialog."""
        path = esc(article_path(article))
        body = (
            '<div class="confirm-delete">'
            f"<p>{esc(CONFIRM_DELETE_MESSAGE)}</p>"
            f'<p class="confirm-title">{esc(article.title)}</p>'
            f'<form method="post" action="{path}/delete">'
            '<input type="hidden" name="confirm" value="yes">'
            '<button type="submit" class="confirm-yes">Delete</button>'
            "</form>"
            f'<a class="confirm-cancel" href="{path}">Cancel</a>'
            "</div>"
        )
        return render_page(state, body, title="Delete article")

    def render(self, state: AppState, **kwargs: Any) -> str:
        article = kwargs.get("article") or state.selected
        return render_page(state, self.render_body(state, article), title=article.title)
