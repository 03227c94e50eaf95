"""Rendering tests: build pages from an AppState and inspect the HTML."""

from bs4 import BeautifulSoup

from conftest import make_article
from core.editor import EditorForm
from core.store import AppState
from views.detail_view import DetailView
from views.editor_view import EditorView
from views.feed_view import NOT_FOUND_TEXT, FeedView
from views.layout import render_page


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _state(**overrides) -> AppState:
    state = AppState(articles=[
        make_article(id=1, title="Hello World", content="intro", tags=["intro"]),
        make_article(id=2, title="Events", content="meetup", tags=["events"], category="Events"),
    ])
    for k, v in overrides.items():
        setattr(state, k, v)
    return state


# ── layout ────────────────────────────────────────────────────

class TestLayout:
    def test_error_banner_shown(self):
        soup = _soup(render_page(_state(error="Failed to load"), "<p>x</p>"))
        banner = soup.select_one(".error-banner")
        assert banner is not None
        assert "Failed to load" in banner.get_text()
        assert banner.select_one("form[action='/error/dismiss']") is not None

    def test_no_banner_without_error(self):
        assert _soup(render_page(_state(), "")).select_one(".error-banner") is None

    def test_loading_indicator(self):
        soup = _soup(render_page(_state(in_flight=1), ""))
        assert soup.select_one(".loading") is not None

    def test_scroll_to_top_anchor_consumed(self):
        state = _state(scroll_to_top=True)
        soup = _soup(render_page(state, ""))
        assert soup.body.get("id") == "top"
        assert state.scroll_to_top is False

    def test_html_escaped(self):
        soup = _soup(render_page(_state(error="<script>alert(1)</script>"), ""))
        assert soup.find("script") is None


# ── feed ──────────────────────────────────────────────────────

class TestFeedView:
    def test_cards_for_every_article(self):
        soup = _soup(FeedView().render(_state()))
        assert len(soup.select("article.card")) == 2

    def test_search_filters_cards(self):
        soup = _soup(FeedView().render(_state(), search="hello"))
        cards = soup.select("article.card")
        assert [c["data-id"] for c in cards] == ["1"]

    def test_tag_filter_and_active_tag(self):
        soup = _soup(FeedView().render(_state(), tag="events"))
        assert [c["data-id"] for c in soup.select("article.card")] == ["2"]
        assert soup.select_one(".tag-filter.active").get_text() == "events"

    def test_tag_bar_order(self):
        soup = _soup(FeedView().render(_state()))
        assert [a.get_text() for a in soup.select(".tag-filter")] == ["All", "intro", "events"]

    def test_empty_state_after_loading(self):
        soup = _soup(FeedView().render(_state(), search="zzz"))
        assert NOT_FOUND_TEXT in soup.get_text()

    def test_no_empty_state_while_loading(self):
        soup = _soup(FeedView().render(_state(articles=[], in_flight=1)))
        assert NOT_FOUND_TEXT not in soup.get_text()

    def test_unknown_category_rendered_verbatim(self):
        state = _state(articles=[make_article(category="Legacy Import")])
        soup = _soup(FeedView().render(state))
        assert soup.select_one(".category-badge").get_text() == "Legacy Import"

    def test_image_or_placeholder(self):
        state = _state(articles=[make_article(id=1, image="https://example.com/a.jpg"), make_article(id=2)])
        soup = _soup(FeedView().render(state))
        assert soup.select_one("article.card img")["src"] == "https://example.com/a.jpg"
        assert len(soup.select(".image-placeholder")) == 1

    def test_excerpt_matches_content_text(self):
        content = "Say <hello> to new members & use &amp; correctly"
        html = FeedView().render(_state(articles=[make_article(content=content)]))
        assert "Say &lt;hello&gt; to new members &amp; use &amp;amp; correctly" in html
        assert _soup(html).select_one(".excerpt").get_text() == content

    def test_card_links_to_detail(self):
        soup = _soup(FeedView().render(_state()))
        assert soup.select_one("article.card a")["href"] == "/articles/1"


# ── detail ────────────────────────────────────────────────────

class TestDetailView:
    def test_renders_article(self):
        article = make_article(content="Line 1\nLine 2", tags=["a", "b"])
        soup = _soup(DetailView().render(_state(), article=article))
        assert soup.select_one(".article-full h1").get_text() == "Hello World"
        assert soup.select_one(".article-content").get_text() == "Line 1\nLine 2"
        assert [t.get_text() for t in soup.select(".related-tags .tag-chip")] == ["#a", "#b"]

    def test_no_delete_outside_admin_mode(self):
        soup = _soup(DetailView().render(_state(), article=make_article()))
        assert soup.select_one(".delete-link") is None

    def test_delete_in_admin_mode(self):
        soup = _soup(DetailView().render(_state(admin_mode=True), article=make_article()))
        assert soup.select_one(".delete-link")["href"] == "/articles/1/delete"

    def test_uses_selected_article(self):
        state = _state(selected=make_article(title="Selected"))
        soup = _soup(DetailView().render(state))
        assert soup.select_one(".article-full h1").get_text() == "Selected"

    def test_confirm_page_posts_confirmation(self):
        soup = _soup(DetailView().render_confirm(_state(admin_mode=True), make_article()))
        form = soup.select_one("form[action='/articles/1/delete']")
        assert form.select_one("input[name='confirm']")["value"] == "yes"
        assert soup.select_one(".confirm-cancel")["href"] == "/articles/1"


# ── editor ────────────────────────────────────────────────────

class TestEditorView:
    def test_required_fields(self):
        soup = _soup(EditorView().render(_state()))
        for name in ("title", "author", "content"):
            assert soup.select_one(f"[name='{name}']").has_attr("required")
        assert not soup.select_one("[name='image']").has_attr("required")

    def test_closed_category_choice(self):
        soup = _soup(EditorView().render(_state()))
        options = [o["value"] for o in soup.select("select[name='category'] option")]
        assert options == ["General", "English Tips", "Events", "Culture", "Staff Voice"]
        assert soup.select_one("option[selected]")["value"] == "General"

    def test_submit_disabled_while_loading(self):
        soup = _soup(EditorView().render(_state(in_flight=1)))
        button = soup.select_one("button.publish")
        assert button.has_attr("disabled")
        assert "Saving..." in button.get_text()

    def test_submit_disabled_while_creating(self):
        soup = _soup(EditorView().render(_state(creating=True)))
        assert soup.select_one("button.publish").has_attr("disabled")

    def test_form_disables_submit_on_submit(self):
        soup = _soup(EditorView().render(_state()))
        onsubmit = soup.select_one("form[action='/admin']")["onsubmit"]
        assert "disabled=true" in onsubmit
        assert "Saving..." in onsubmit

    def test_submit_enabled_when_idle(self):
        soup = _soup(EditorView().render(_state()))
        assert not soup.select_one("button.publish").has_attr("disabled")

    def test_preserves_input(self):
        form = EditorForm(title="Draft", author="Kairi", category="Culture",
                          content="Body", image="", tags="a, b")
        soup = _soup(EditorView().render(_state(), form=form))
        assert soup.select_one("[name='title']")["value"] == "Draft"
        assert soup.select_one("textarea[name='content']").get_text() == "Body"
        assert soup.select_one("[name='tags']")["value"] == "a, b"
        assert soup.select_one("option[selected]")["value"] == "Culture"

    def test_errors_listed(self):
        soup = _soup(EditorView().render(_state(), form=EditorForm(), errors=["title"]))
        assert "Title is required." in soup.select_one(".form-errors").get_text()
