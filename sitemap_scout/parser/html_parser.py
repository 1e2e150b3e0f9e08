# === FILE: sitemap_scout/parser/html_parser.py ===
"""HTML parsing utilities for SitemapScout.

Only the handful of fields an SEO summary needs are pulled out of a page:

* title — text of the first ``<title>`` or ``""`` if absent.
* h1 — text of the first ``<h1>`` or ``""``.
* meta_description — ``content`` of ``<meta name="description">`` or ``""``.

``html.parser`` is lenient, so malformed markup degrades to empty fields
instead of raising.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Dict

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("extract_seo",)


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _first_text(soup: BeautifulSoup, name: str) -> str:
    tag = soup.find(name)
    return _collapse(tag.get_text(" ")) if isinstance(tag, Tag) else ""


def _meta_description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if not isinstance(tag, Tag):
        return ""
    content = tag.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    return _collapse(content) if content else ""


def extract_seo(html: str) -> Dict[str, str]:
    """Return ``{"title", "h1", "meta_description"}`` extracted from *html*."""
    soup = BeautifulSoup(html or "", "html.parser")
    return {
        "title": _first_text(soup, "title"),
        "h1": _first_text(soup, "h1"),
        "meta_description": _meta_description(soup),
    }
