# sitemap_scout/resolver.py
"""
Sitemap resolver: walks a sitemap and its nested indexes into a flat page list.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Set

from sitemap_scout.logger import logger
from sitemap_scout.parser.sitemap_parser import parse_sitemap, split_sitemap_entries

if TYPE_CHECKING:
    from sitemap_scout.crawler.fetcher import Fetcher


class SitemapResolver:
    """Depth-first sitemap traversal driven by an explicit stack.

    Every distinct URL is fetched at most once per :meth:`resolve` call, so
    cyclic or repeated index entries always terminate. Pages listed by several
    sitemaps are kept every time they appear.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher
        self.fetch_count = 0

    async def resolve(self, start_url: str) -> List[str]:
        visited: Set[str] = set()
        pages: List[str] = []
        stack: List[str] = [start_url]
        self.fetch_count = 0

        while stack:
            url = stack.pop()
            if url in visited:
                continue
            visited.add(url)

            self.fetch_count += 1
            response = await self.fetcher.fetch(url)
            if response is None:
                logger.debug("Skipping unreachable sitemap %s", url)
                continue

            nested, found_pages = split_sitemap_entries(parse_sitemap(response.text))
            pages.extend(found_pages)
            for sitemap_url in nested:
                logger.info("Found sitemap %s", sitemap_url)
            # reversed so the first nested sitemap is popped (and finished) first
            stack.extend(reversed(nested))

        logger.debug("Resolved %s into %d page(s), %d fetch(es)", start_url, len(pages), self.fetch_count)
        return pages


__all__ = ["SitemapResolver"]
