import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse

from aiohttp import web

from core.config import (
    ARTICLE_SERVICE_URL,
    HUB_HOST,
    HUB_PORT,
    LOG_LEVEL,
    SERVICE_TIMEOUT,
    validate_required_env,
)
from core.editor import EditorForm, build_article
from core.feed import ALL_TAG
from core.service import ArticleService
from core.store import ArticleHub
from views.detail_view import DetailView, article_path
from views.editor_view import EditorView
from views.feed_view import FeedView
from views.layout import render_page

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
log = logging.getLogger("hub.web")

HUB_KEY = web.AppKey("hub", ArticleHub)
LOAD_ON_STARTUP_KEY = web.AppKey("load_on_startup", bool)

feed_view = FeedView()
detail_view = DetailView()
editor_view = EditorView()

routes = web.RouteTableDef()


def _html(text: str, status: int = 200) -> web.Response:
    return web.Response(text=text, content_type="text/html", status=status)


def _not_found(hub: ArticleHub) -> web.Response:
    body = '<div class="not-found"><p>Article not found.</p><a href="/">Back to Feed</a></div>'
    return _html(render_page(hub.state, body, title="Not found"), status=404)


def _safe_back(request: web.Request) -> str:
    ref = request.headers.get("Referer")
    if not ref:
        return "/"
    u = urlparse(ref)
    if u.netloc and u.netloc != request.host:
        return "/"
    return (u.path or "/") + (f"?{u.query}" if u.query else "")


# =========================
# FEED
# =========================

@routes.get("/")
async def feed_page(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    hub.go_home()
    search = request.query.get("q", "")
    tag = request.query.get("tag", ALL_TAG)
    return _html(feed_view.render(hub.state, search=search, tag=tag))


@routes.post("/refresh")
async def refresh(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    await hub.load_articles()
    raise web.HTTPFound("/")


# =========================
# DETAIL / DELETE
# =========================

@routes.get("/articles/{article_id}")
async def article_page(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    article = hub.find_article(request.match_info["article_id"])
    if article is None:
        return _not_found(hub)
    hub.open_article(article)
    return _html(detail_view.render(hub.state, article=article))


@routes.get("/articles/{article_id}/delete")
async def confirm_delete_page(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    article = hub.find_article(request.match_info["article_id"])
    if article is None:
        return _not_found(hub)
    if not hub.state.admin_mode:
        raise web.HTTPFound(article_path(article))
    return _html(detail_view.render_confirm(hub.state, article))


@routes.post("/articles/{article_id}/delete")
async def delete_article(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    article = hub.find_article(request.match_info["article_id"])
    if article is None:
        return _not_found(hub)
    if not hub.state.admin_mode:
        raise web.HTTPFound(article_path(article))

    data = await request.post()
    confirmed = data.get("confirm") == "yes"
    await hub.delete_article(article.id, confirm=lambda _message: confirmed)
    hub.go_home()
    raise web.HTTPFound("/")


# =========================
# EDITOR
# =========================

@routes.get("/admin")
async def editor_page(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    hub.open_admin()
    return _html(editor_view.render(hub.state, form=EditorForm()))


@routes.post("/admin")
async def submit_article(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    hub.open_admin()
    form = EditorForm.from_post(await request.post())
    if hub.state.creating:
        # Repeated click while the first submit is still saving.
        log.info("Duplicate article submit ignored.")
        raise web.HTTPFound("/")

    errors = form.errors()
    if errors:
        return _html(editor_view.render(hub.state, form=form, errors=errors), status=400)

    if await hub.create_article(build_article(form)):
        raise web.HTTPFound("/")
    # Create failed: stay on the editor with the input preserved.
    return _html(editor_view.render(hub.state, form=form))


# =========================
# ERROR BANNER
# =========================

@routes.post("/error/dismiss")
async def dismiss_error(request: web.Request) -> web.Response:
    hub = request.app[HUB_KEY]
    hub.dismiss_error()
    raise web.HTTPFound(_safe_back(request))


# =========================
# APP
# =========================

async def _service_ctx(app: web.Application):
    hub = app[HUB_KEY]
    task: Optional[asyncio.Task] = None
    if app[LOAD_ON_STARTUP_KEY]:
        task = asyncio.create_task(hub.load_articles())
        log.info("Initial article load started.")
    yield
    if task is not None and not task.done():
        await task
    await hub.service.close()


def create_app(service: Optional[ArticleService] = None, load_on_startup: bool = True) -> web.Application:
    if service is None:
        service = ArticleService(ARTICLE_SERVICE_URL, timeout=SERVICE_TIMEOUT)
    app = web.Application()
    app[HUB_KEY] = ArticleHub(service)
    app[LOAD_ON_STARTUP_KEY] = load_on_startup
    app.add_routes(routes)
    app.cleanup_ctx.append(_service_ctx)
    return app


def main() -> None:
    validate_required_env()
    log.info("Community hub listening on %s:%s", HUB_HOST, HUB_PORT)
    web.run_app(create_app(), host=HUB_HOST, port=HUB_PORT)


if __name__ == "__main__":
    main()
