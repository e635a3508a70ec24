"""Exceptions raised between the upstream client, renderer and routes."""

from __future__ import annotations


class ArticlePagesError(Exception):
    """Base exception for everything raised by this package."""


class UpstreamError(ArticlePagesError):
    """The upstream article API could not give us usable JSON."""


class NetworkError(UpstreamError):
    """Transport-level failure (DNS, connect, read timeout)."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


class FetchError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, url: str, status: int):
        super().__init__(f"Fetch failed: {status}")
        self.url = url
        self.status = status


class NotFoundError(ArticlePagesError):
    def __init__(self, article_id: str):
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class RenderError(ArticlePagesError):
    """A page template could not be composed from its data."""
