"""sitemap_scout.parser: Разбор sitemap, robots.txt и HTML-страниц."""

from .html_parser import extract_seo
from .robots_parser import parse_robots_sitemaps
from .sitemap_parser import is_sitemap_reference, parse_sitemap, split_sitemap_entries

__all__ = [
    "extract_seo",
    "parse_robots_sitemaps",
    "parse_sitemap",
    "is_sitemap_reference",
    "split_sitemap_entries",
]
