import pytest

from core.models import Article
from core.service import ArticleServiceError


def make_article(**overrides) -> Article:
    defaults = dict(
        id=1,
        title="Hello World",
        author="Kairi",
        category="General",
        content="intro",
        tags=["intro"],
        date="2025-06-01",
        image="",
    )
    defaults.update(overrides)
    return Article(**defaults)


class FakeService:
    """In-memory stand-in for ArticleService that records every call."""

    def __init__(self, articles=None):
        self.articles = list(articles or [])
        self.calls = []
        self.fail_fetch = False
        self.fail_create = False
        self.fail_delete = False
        self.on_fetch = None
        self.create_gate = None
        self.closed = False

    async def fetch_articles(self):
        self.calls.append(("fetch",))
        if self.on_fetch is not None:
            self.on_fetch()
        if self.fail_fetch:
            raise ArticleServiceError("list failed: status=500")
        return list(self.articles)

    async def create(self, article):
        self.calls.append(("create", article))
        if self.create_gate is not None:
            await self.create_gate.wait()
        if self.fail_create:
            raise ArticleServiceError("create failed: status=500")
        self.articles.append(article)

    async def delete(self, article_id):
        self.calls.append(("delete", article_id))
        if self.fail_delete:
            raise ArticleServiceError("delete failed: status=500")
        self.articles = [a for a in self.articles if a.id != article_id]

    async def close(self):
        self.closed = True

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def articles():
    return [
        make_article(),
        make_article(id=2, title="Events", content="meetup", tags=["events"], category="Events"),
    ]


@pytest.fixture
def service(articles):
    return FakeService(articles)
