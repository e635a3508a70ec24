"""Tag stripping for plaintext previews."""

from __future__ import annotations
import re

# `<`, optional `/`, anything up to `>` or end of string
_TAG_RE = re.compile(r"</?[^>]+(>|$)")

PREVIEW_LENGTH = 160


def strip_html(html) -> str:
    """Drop tags from `html`. Entities and script/style text are left alone."""
    if not html:
        return ""
    return _TAG_RE.sub("", str(html))


def preview(html, limit: int = PREVIEW_LENGTH) -> str:
    return strip_html(html)[:limit]
