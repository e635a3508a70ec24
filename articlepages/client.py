"""
Upstream client — fetches article list/detail JSON from the article API.

One GET per call, no retries. Non-2xx answers raise FetchError, transport
failures raise NetworkError. Image URLs are built here but never fetched.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

import httpx

from articlepages.config import API_BASE
from articlepages.errors import FetchError, NetworkError, UpstreamError

logger = logging.getLogger(__name__)


def image_url(api_base: str, article_id) -> str:
    """Image resource of an article; referenced by URL only, never fetched here."""
    return f"{api_base}/{article_id}/image"


class UpstreamClient:
    def __init__(self, api_base: str = API_BASE, http: Optional[httpx.Client] = None):
        self.api_base = api_base.rstrip("/")
        self._owns_http = http is None
        # no timeout: a cold upstream may take a while to answer
        self.http = http or httpx.Client(timeout=None, follow_redirects=True, headers={
            "User-Agent": "Mozilla/5.0 (compatible; ArticlePages/1.0)"
        })

    # ── URLs ──────────────────────────────────────────────────────────

    def list_url(self) -> str:
        return self.api_base

    def article_url(self, article_id) -> str:
        return f"{self.api_base}/{article_id}"

    # ── Fetch ─────────────────────────────────────────────────────────

    def fetch_json(self, url: str) -> Any:
        logger.debug(f"GET {url}")
        try:
            resp = self.http.get(url, follow_redirects=True)
        except httpx.TransportError as e:
            raise NetworkError(url, e) from e

        if not resp.is_success:
            raise FetchError(url, resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from {url}: {e}") from e

    def fetch_list(self) -> Any:
        return self.fetch_json(self.list_url())

    def fetch_article(self, article_id) -> Any:
        return self.fetch_json(self.article_url(article_id))

    def close(self):
        if self._owns_http:
            self.http.close()


# ── Response shapes ───────────────────────────────────────────────────

def articles_from(payload: Any) -> list:
    """The `data` array of a list response; anything else counts as empty."""
    data = payload.get("data") if isinstance(payload, dict) else None
    return data if isinstance(data, list) else []


def resolve_article(payload: Any) -> Optional[dict]:
    """
    Pick the article out of a detail response.

    `data` may be an object or an array; for an array the first element wins.
    Returns None when nothing usable is there.
    """
    if not isinstance(payload, dict):
        return None
    article = payload.get("data")
    if isinstance(article, list):
        article = article[0] if article else None
    if not isinstance(article, dict):
        return None
    return article
