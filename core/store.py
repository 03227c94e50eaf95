"""Application state and the Shell controller.

``ArticleHub`` owns the single article store and is the only place it is
mutated. Every mutation is followed by a full reload from the service;
there are no local patches or optimistic updates.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from core.models import Article, ArticleId
from core.service import ArticleService, ArticleServiceError

log = logging.getLogger("hub.store")

VIEW_HOME = "home"
VIEW_ARTICLE = "article"
VIEW_ADMIN = "admin"

LOAD_ERROR = "Failed to load articles. Please try again in a little while."
CREATE_ERROR = "Failed to save the article. Please try again."
DELETE_ERROR = "Failed to delete the article. Please try again."
CONFIRM_DELETE_MESSAGE = "Do you really want to delete this article?"

Confirm = Callable[[str], bool]


@dataclass
class AppState:
    view: str = VIEW_HOME
    articles: List[Article] = field(default_factory=list)
    selected: Optional[Article] = None
    # Visibility toggle only. It is never checked by the service, so it
    # grants no authorization; create/delete need server-side protection.
    admin_mode: bool = False
    error: Optional[str] = None
    scroll_to_top: bool = False
    in_flight: int = 0
    creating: bool = False

    @property
    def loading(self) -> bool:
        return self.in_flight > 0


class ArticleHub:
    def __init__(self, service: ArticleService, state: Optional[AppState] = None):
        self.service = service
        self.state = state if state is not None else AppState()
        self._load_seq = 0
        self._applied_seq = 0

    @contextmanager
    def _busy(self) -> Iterator[None]:
        self.state.in_flight += 1
        try:
            yield
        finally:
            self.state.in_flight -= 1

    # ---------- fetch / mutate / refresh ----------

    async def load_articles(self) -> None:
        self._load_seq += 1
        seq = self._load_seq
        self.state.error = None
        with self._busy():
            try:
                articles = await self.service.fetch_articles()
            except ArticleServiceError as e:
                if seq < self._applied_seq:
                    log.info("Ignoring stale failed load #%d: %s", seq, e)
                    return
                log.warning("Article load failed: %s", e)
                self._applied_seq = seq
                self.state.articles = []
                self.state.error = LOAD_ERROR
                return

            if seq < self._applied_seq:
                log.info("Ignoring stale load #%d (store already at #%d).", seq, self._applied_seq)
                return
            self._applied_seq = seq
            self.state.articles = articles
            log.info("Loaded %d article(s).", len(articles))

    async def create_article(self, article: Article) -> bool:
        # One create at a time: repeated submits must not add duplicates.
        if self.state.creating:
            log.info("Create already in flight, ignoring submit (id=%s).", article.id)
            return False

        self.state.error = None
        self.state.creating = True
        try:
            with self._busy():
                try:
                    await self.service.create(article)
                except ArticleServiceError as e:
                    log.warning("Article create failed (id=%s): %s", article.id, e)
                    self.state.error = CREATE_ERROR
                    return False

                log.info("Article created: id=%s title=%r", article.id, article.title)
                await self.load_articles()
                self.state.view = VIEW_HOME
                return True
        finally:
            self.state.creating = False

    async def delete_article(self, article_id: ArticleId, confirm: Confirm) -> bool:
        if not confirm(CONFIRM_DELETE_MESSAGE):
            log.info("Delete of id=%s not confirmed.", article_id)
            return False

        self.state.error = None
        with self._busy():
            try:
                await self.service.delete(article_id)
            except ArticleServiceError as e:
                log.warning("Article delete failed (id=%s): %s", article_id, e)
                self.state.error = DELETE_ERROR
                return False

            log.info("Article deleted: id=%s", article_id)
            await self.load_articles()
            return True

    # ---------- navigation ----------

    def open_article(self, article: Article) -> None:
        self.state.selected = article
        self.state.view = VIEW_ARTICLE
        self.state.scroll_to_top = True

    def go_home(self) -> None:
        self.state.view = VIEW_HOME
        self.state.selected = None
        self.state.scroll_to_top = True

    def open_admin(self) -> None:
        self.state.view = VIEW_ADMIN
        self.state.admin_mode = True

    def cancel_editor(self) -> None:
        self.go_home()

    def dismiss_error(self) -> None:
        self.state.error = None

    def find_article(self, article_id: ArticleId) -> Optional[Article]:
        key = str(article_id)
        for a in self.state.articles:
            if str(a.id) == key:
                return a
        return None
