# sitemap_scout/scraper.py
"""
Scrape orchestrator: fetches pages in fixed-size concurrent batches and
extracts their SEO fields.
"""
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence

from sitemap_scout.crawler.models import SeoRecord
from sitemap_scout.logger import logger
from sitemap_scout.parser.html_parser import extract_seo

if TYPE_CHECKING:
    from sitemap_scout.crawler.fetcher import Fetcher

DEFAULT_BATCH_SIZE: int = 10


def iter_batches(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield contiguous slices of *items* of at most *size* elements."""
    if size < 1:
        raise ValueError("batch size must be >= 1")
    for start in range(0, len(items), size):
        yield items[start:start + size]


async def scrape_page(fetcher: Fetcher, url: str) -> Optional[SeoRecord]:
    """Fetch *url* and build its SeoRecord, or return None if the fetch failed."""
    response = await fetcher.fetch(url)
    if response is None:
        return None
    fields = extract_seo(response.text)
    return SeoRecord(
        url=url,
        title=fields["title"],
        h1=fields["h1"],
        meta_description=fields["meta_description"],
        status_code=response.status,
    )


async def scrape_pages(
    fetcher: Fetcher,
    urls: Sequence[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[SeoRecord]:
    """
    Scrape *urls* in batches of *batch_size*.

    Batches run one after another; pages inside a batch are fetched
    concurrently. Failed pages are dropped, the rest keep input order.
    """
    urls = list(urls)
    results: List[SeoRecord] = []
    batches = list(iter_batches(urls, batch_size))
    for index, batch in enumerate(batches, start=1):
        logger.debug("Batch %d/%d: %d page(s)", index, len(batches), len(batch))
        batch_results = await asyncio.gather(*(scrape_page(fetcher, url) for url in batch))
        results.extend(record for record in batch_results if record is not None)
    dropped = len(urls) - len(results)
    if dropped:
        logger.debug("Dropped %d page(s) that could not be fetched", dropped)
    return results


__all__ = ["DEFAULT_BATCH_SIZE", "iter_batches", "scrape_page", "scrape_pages"]
