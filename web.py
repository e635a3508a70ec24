#!/usr/bin/env python3
"""
Article Pages Web Interface

Server-rendered front-end for the remote article API: a list page, a detail
page with Open Graph tags for social previews, and a root redirect. Upstream
responses are cached in memory for a short TTL.

Usage:
    python web.py                    # Start on $PORT (default 3000)
    python web.py --port 8080        # Custom port
    python web.py --host 127.0.0.1   # Listen on loopback only
"""

import argparse
import logging
from typing import Optional

from flask import Flask, Response, jsonify, redirect, request

from articlepages.cache import LIST_KEY, ExpiringCache, article_key
from articlepages.client import UpstreamClient, articles_from, resolve_article
from articlepages.config import Config
from articlepages.errors import NotFoundError, RenderError, UpstreamError
from articlepages.meta import RequestContext, build_metadata
from articlepages.pages import render

logger = logging.getLogger(__name__)


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(client: Optional[UpstreamClient] = None, cache: Optional[ExpiringCache] = None,
               config: Optional[Config] = None) -> Flask:
    config = config or Config()
    client = client or UpstreamClient(config.api_base)
    cache = cache or ExpiringCache(config.cache_ttl_ms)

    app = Flask(__name__)
    app.extensions["upstream"] = client

    def render_article(article: dict) -> str:
        ctx = RequestContext.from_headers(request.headers, request.host, request.scheme)
        meta = build_metadata(article, ctx, client.api_base)
        return render("article", {"article": article, "meta": meta})

    # ── Routes ────────────────────────────────────────────────────────

    @app.route("/")
    def index():
        return redirect("/pages", code=302)

    @app.route("/pages")
    def article_list():
        now = cache.now()
        articles = cache.get(LIST_KEY, now)
        if articles is None:
            logger.debug("List cache miss")
            try:
                articles = articles_from(client.fetch_list())
            except UpstreamError as e:
                logger.exception(f"Error fetching list: {e}")
                return _text("Server error fetching articles.", 500)
            cache.set(LIST_KEY, articles, now)

        try:
            return render("index", {"articles": articles})
        except RenderError as e:
            logger.exception(f"Error rendering list: {e}")
            return _text("Server error rendering page.", 500)

    @app.route("/pages/<article_id>")
    def article_detail(article_id):
        key = article_key(article_id)
        now = cache.now()
        article = cache.get(key, now)
        try:
            if article is None:
                logger.debug(f"Article cache miss: {article_id}")
                article = resolve_article(client.fetch_article(article_id))
                if article is None:
                    raise NotFoundError(article_id)
                cache.set(key, article, now)
            return render_article(article)
        except NotFoundError:
            return _text("Article not found", 404)
        except UpstreamError as e:
            logger.exception(f"Error fetching article {article_id}: {e}")
            return _text("Server error fetching article.", 500)
        except RenderError as e:
            logger.exception(f"Error rendering article {article_id}: {e}")
            return _text("Server error rendering page.", 500)

    # ── API ───────────────────────────────────────────────────────────

    @app.route("/api/health")
    def api_health():
        return jsonify({"status": "ok", "cached_entries": len(cache)})

    return app


app = create_app()


# ── Main ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    parser = argparse.ArgumentParser(description="Article pages front-end")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 3000)")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    port = Config(port=args.port).port

    logger.info(f"Server running: http://localhost:{port}/pages")
    try:
        app.run(host=args.host, port=port, debug=args.debug, threaded=True)
    finally:
        app.extensions["upstream"].close()
