"""Open Graph metadata for article pages."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping

from articlepages.client import image_url
from articlepages.config import API_BASE
from articlepages.sanitize import preview

DEFAULT_TITLE = "Article"


@dataclass(frozen=True)
class RequestContext:
    host: str
    proto: str

    @classmethod
    def from_headers(cls, headers: Mapping, host: str, scheme: str) -> "RequestContext":
        """Forwarding headers (set by the proxy in front of us) win over the direct values."""
        return cls(
            host=headers.get("X-Forwarded-Host") or host,
            proto=headers.get("X-Forwarded-Proto") or scheme,
        )

    @property
    def base_url(self) -> str:
        return f"{self.proto}://{self.host}"


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    image: str
    url: str


def describe(article: dict) -> str:
    """Explicit `seo` text verbatim, else the first 160 chars of the stripped body."""
    seo = article.get("seo")
    if seo:
        return str(seo)
    text = article.get("ArticleText")
    if text:
        return preview(text)
    return ""


def build_metadata(article: dict, ctx: RequestContext, api_base: str = API_BASE) -> PageMeta:
    article_id = article.get("id", "")
    return PageMeta(
        title=article.get("Title") or DEFAULT_TITLE,
        description=describe(article),
        image=image_url(api_base, article_id),
        url=f"{ctx.base_url}/pages/{article_id}",
    )
