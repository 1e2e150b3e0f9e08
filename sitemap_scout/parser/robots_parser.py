# File: sitemap_scout/parser/robots_parser.py
"""sitemap_scout.parser.robots_parser: Извлечение директив Sitemap из robots.txt."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin

_DIRECTIVE = "sitemap:"


def parse_robots_sitemaps(text: str, base_url: str) -> List[str]:
    """Возвращает URL из строк ``Sitemap:`` в порядке файла.

    Регистр директивы не важен. Относительные значения (не начинающиеся с
    ``http``) разрешаются относительно *base_url*.

    Args:
        text: содержимое robots.txt.
        base_url: корневой URL сайта.

    Returns:
        Список абсолютных URL sitemap.
    """
    sitemaps: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line.lower().startswith(_DIRECTIVE):
            continue
        value = line[len(_DIRECTIVE):].split("#", 1)[0].strip()
        if not value:
            continue
        if not value.startswith("http"):
            value = urljoin(base_url, value)
        sitemaps.append(value)
    return sitemaps


__all__ = ["parse_robots_sitemaps"]
