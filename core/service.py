"""Client for the Remote Article Service (single HTTP/JSON endpoint).

GET lists every article; POST carries a ``method`` discriminator
(``create`` or ``delete``) plus its payload.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from core.models import Article, ArticleId

log = logging.getLogger("hub.service")

JSON_HEADERS = {"Content-Type": "application/json"}


class ArticleServiceError(Exception):
    """Any failed call: transport error, non-2xx status or undecodable body."""


def normalize_articles(body: Any) -> List[Any]:
    """Resolve the list response shape.

    The service answers either with a bare array or with an object wrapping
    the array under ``articles`` or ``data``. Any other shape means no
    articles.
    """
    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        for key in ("articles", "data"):
            value = body.get(key)
            if isinstance(value, list):
                return value
    return []


def records_to_articles(records: List[Any]) -> List[Article]:
    out: List[Article] = []
    for rec in records:
        if not isinstance(rec, dict):
            log.warning("Skipping non-object article record: %r", rec)
            continue
        if rec.get("id") in (None, ""):
            # Cards and detail links are keyed by id.
            log.warning("Skipping article record without id: %r", rec)
            continue
        out.append(Article.from_dict(rec))
    return out


class ArticleService:
    def __init__(self, endpoint: str, timeout: float = 30):
        self.endpoint = endpoint
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def fetch_articles(self) -> List[Article]:
        sess = await self._ensure_session()
        try:
            async with sess.get(self.endpoint, headers=JSON_HEADERS) as resp:
                if resp.status < 200 or resp.status >= 300:
                    body = await resp.text()
                    raise ArticleServiceError(
                        f"list failed: status={resp.status} body={body[:300]}"
                    )
                # Script endpoints often answer JSON as text/plain.
                data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ArticleServiceError(f"list failed: {e!r}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ArticleServiceError(f"list returned malformed JSON: {e}") from e
        return records_to_articles(normalize_articles(data))

    async def _post(self, payload: Dict[str, Any]) -> None:
        sess = await self._ensure_session()
        method = payload.get("method")
        try:
            async with sess.post(self.endpoint, json=payload, headers=JSON_HEADERS) as resp:
                # The response body is read but never relied upon.
                body = await resp.text()
                if resp.status < 200 or resp.status >= 300:
                    raise ArticleServiceError(
                        f"{method} failed: status={resp.status} body={body[:300]}"
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ArticleServiceError(f"{method} failed: {e!r}") from e

    async def create(self, article: Article) -> None:
        await self._post({"method": "create", "article": article.to_dict()})

    async def delete(self, article_id: ArticleId) -> None:
        await self._post({"method": "delete", "id": article_id})
