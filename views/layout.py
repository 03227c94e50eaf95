"""Page chrome shared by every view: header, error banner, loading, footer."""

import html as htmlmod

from core.config import FOOTER_MOTTO, FOOTER_TEXT, SITE_NAME, SITE_TAGLINE
from core.store import VIEW_ADMIN, VIEW_HOME, AppState


def esc(value) -> str:
    return htmlmod.escape("" if value is None else str(value), quote=True)


def render_header(state: AppState) -> str:
    home_cls = "nav-link active" if state.view == VIEW_HOME else "nav-link"
    admin_cls = "nav-write active" if state.view == VIEW_ADMIN else "nav-write"
    return (
        '<header class="site-header">'
        f'<a class="brand" href="/"><span class="brand-mark">{esc(SITE_NAME[:1])}</span>'
        f'<h1>{esc(SITE_NAME)} <span class="tagline">{esc(SITE_TAGLINE)}</span></h1></a>'
        '<nav>'
        f'<a class="{home_cls}" href="/">Community Feed</a>'
        f'<a class="{admin_cls}" href="/admin">Staff Write</a>'
        '</nav>'
        '</header>'
    )


def render_error_banner(state: AppState) -> str:
    if not state.error:
        return ""
    return (
        '<div class="error-banner" role="alert">'
        '<p class="error-title">Error</p>'
        f'<p class="error-message">{esc(state.error)}</p>'
        '<form method="post" action="/error/dismiss">'
        '<button type="submit" class="error-dismiss">Close</button>'
        '</form>'
        '<form method="post" action="/refresh">'
        '<button type="submit" class="error-reload">Reload articles</button>'
        '</form>'
        '</div>'
    )


def render_loading(state: AppState) -> str:
    if not state.loading:
        return ""
    return '<div class="loading"><div class="spinner"></div><p>Loading...</p></div>'


def render_footer() -> str:
    return (
        '<footer class="site-footer">'
        f'<p>{esc(FOOTER_TEXT)}</p>'
        f'<p class="motto">{esc(FOOTER_MOTTO)}</p>'
        '</footer>'
    )


def render_page(state: AppState, body: str, title: str = "") -> str:
    page_title = f"{title} | {SITE_NAME} {SITE_TAGLINE}" if title else f"{SITE_NAME} {SITE_TAGLINE}"
    # Every render is a full page load, so the browser starts at the top;
    # the anchor keeps that explicit for the navigations that ask for it.
    top = ' id="top"' if state.scroll_to_top else ""
    state.scroll_to_top = False
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{esc(page_title)}</title></head>"
        f"<body{top}>"
        + render_header(state)
        + '<main class="content">'
        + render_error_banner(state)
        + render_loading(state)
        + body
        + "</main>"
        + render_footer()
        + "</body></html>"
    )
