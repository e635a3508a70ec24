"""
Page renderer — list and detail templates.

Templates are f-strings around a shared layout. Every interpolated value goes
through markupsafe.escape; the upstream article body is the only thing
emitted as raw HTML.
"""

from __future__ import annotations

from markupsafe import Markup, escape

from articlepages.errors import RenderError
from articlepages.meta import DEFAULT_TITLE, PageMeta, describe


SITE_NAME = "Articles"


def _layout(content_html: str, page_title: str, head_html: str = "") -> str:
    """Render the full page with base layout."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(page_title)}</title>
{head_html}
<style>
:root {{
  --bg: #f0eeeb; --card-bg: #fff; --text: #1a1a1a; --muted: #6b6b6b;
  --border: #ddd; --link: #2d5a8e; --accent: #b34233;
}}
* {{ margin:0; padding:0; box-sizing:border-box; }}
body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', system-ui, sans-serif;
       background: var(--bg); color: var(--text); line-height: 1.5; }}
a {{ color: var(--link); text-decoration: none; }}
a:hover {{ text-decoration: underline; }}

/* ── Top Bar ── */
.topbar {{ background: #1a1a1a; color: #fff; padding: 0.75rem 1.5rem; }}
.topbar h1 {{ font-size: 1.1rem; font-weight: 700; letter-spacing: -0.02em; }}
.topbar h1 a {{ color: #fff; }}

/* ── Card List ── */
.grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(340px, 1fr));
         gap: 1.25rem; padding: 1.5rem; max-width: 1600px; margin: 0 auto; }}
.card {{ background: var(--card-bg); border-radius: 10px; overflow: hidden;
         box-shadow: 0 1px 3px rgba(0,0,0,0.06), 0 1px 2px rgba(0,0,0,0.04);
         padding: 1rem 1.25rem 1.25rem; }}
.card h2 {{ font-size: 1.05rem; font-weight: 700; line-height: 1.35; margin-bottom: 0.5rem; }}
.card h2 a {{ color: var(--text); }}
.card-desc {{ font-size: 0.85rem; color: var(--muted); line-height: 1.55; }}

/* ── Article Page ── */
.article-page {{ max-width: 760px; margin: 0 auto; padding: 1.5rem; }}
.article-back {{ display: inline-block; font-size: 0.85rem; margin-bottom: 1rem; }}
.article-page h1 {{ font-size: 1.9rem; line-height: 1.25; margin-bottom: 1rem; }}
.article-hero {{ width: 100%; border-radius: 10px; margin-bottom: 1.5rem; background: #e8e5e0; }}
.article-body {{ font-size: 1.05rem; line-height: 1.75; }}
.article-body p {{ margin-bottom: 1rem; }}
.article-body img {{ max-width: 100%; height: auto; }}

/* ── Empty State ── */
.empty {{ text-align: center; padding: 4rem 1.5rem; color: var(--muted); }}
</style>
</head>
<body>

<div class="topbar">
  <h1><a href="/pages">{SITE_NAME}</a></h1>
</div>

{content_html}

</body>
</html>"""


def _card_html(article: dict) -> str:
    """Render a single article summary card."""
    aid = escape(article.get("id", ""))
    title = escape(article.get("Title") or DEFAULT_TITLE)
    desc = escape(describe(article))
    return f"""<article class="card">
  <h2><a href="/pages/{aid}">{title}</a></h2>
  <p class="card-desc">{desc}</p>
</article>"""


def _index(data: dict) -> str:
    articles = [a for a in data["articles"] if isinstance(a, dict)]
    if not articles:
        content = '<div class="empty"><h2>No articles yet</h2></div>'
    else:
        cards = "\n".join(_card_html(a) for a in articles)
        content = f'<div class="grid">{cards}</div>'
    return _layout(content, page_title=SITE_NAME)


def _og_tags(meta: PageMeta) -> str:
    title = escape(meta.title)
    desc = escape(meta.description)
    image = escape(meta.image)
    url = escape(meta.url)
    return f"""<meta name="description" content="{desc}">
<link rel="canonical" href="{url}">
<meta property="og:type" content="article">
<meta property="og:title" content="{title}">
<meta property="og:description" content="{desc}">
<meta property="og:image" content="{image}">
<meta property="og:url" content="{url}">
<meta name="twitter:card" content="summary_large_image">
<meta name="twitter:title" content="{title}">
<meta name="twitter:description" content="{desc}">
<meta name="twitter:image" content="{image}">"""


def _article(data: dict) -> str:
    article = data["article"]
    meta: PageMeta = data["meta"]
    body_html = Markup(article.get("ArticleText") or "")

    content = f"""<div class="article-page">
  <a href="/pages" class="article-back">← Back to articles</a>
  <h1>{escape(meta.title)}</h1>
  <img class="article-hero" src="{escape(meta.image)}" alt="{escape(meta.title)}">
  <div class="article-body">
    {body_html}
  </div>
</div>"""

    return _layout(content, page_title=meta.title, head_html=_og_tags(meta))


TEMPLATES = {
    "index": _index,
    "article": _article,
}


def render(template_name: str, data: dict) -> str:
    """Compose `template_name` with `data`. Any failure surfaces as RenderError."""
    template = TEMPLATES.get(template_name)
    if template is None:
        raise RenderError(f"Unknown template: {template_name}")
    try:
        return template(data)
    except Exception as e:
        raise RenderError(f"Failed to render {template_name}: {e}") from e
