# File: sitemap_scout/engine.py
"""sitemap_scout.engine: Orchestration layer: поиск sitemap, разбор и сбор SEO-данных."""

from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientSession

from sitemap_scout.config import ScraperConfig
from sitemap_scout.crawler.fetcher import Fetcher
from sitemap_scout.crawler.models import ScanReport
from sitemap_scout.locator import discover_sitemaps
from sitemap_scout.logger import logger
from sitemap_scout.resolver import SitemapResolver
from sitemap_scout.scraper import scrape_pages

__all__ = ["run_pipeline", "start_scan"]


async def run_pipeline(config: ScraperConfig, session: Optional[ClientSession] = None) -> ScanReport:
    """Находит sitemap сайта и собирает SeoRecord по каждой странице.

    Каждый найденный sitemap обрабатывается отдельно и по порядку: свой
    обход вложенных индексов, затем пакетный сбор страниц.
    """
    base_url = str(config.base_url)
    report = ScanReport(base_url=base_url)

    async with Fetcher(config, session) as fetcher:
        report.sitemaps = await discover_sitemaps(fetcher, base_url, config.sitemap_paths)
        if not report.sitemaps:
            return report

        resolver = SitemapResolver(fetcher)
        for sitemap_url in report.sitemaps:
            logger.info("Scraping sitemap: %s", sitemap_url)
            pages = await resolver.resolve(sitemap_url)
            records = await scrape_pages(fetcher, pages, config.batch_size)
            logger.info("%s: %d of %d page(s) scraped", sitemap_url, len(records), len(pages))
            report.records.extend(records)

    return report


def start_scan(config: ScraperConfig) -> ScanReport:
    """Синхронная обёртка над run_pipeline для CLI и скриптов."""
    try:
        return asyncio.run(run_pipeline(config))
    except Exception as exc:
        logger.error("Scanning failed: %s", exc)
        raise
