# File: sitemap_scout/locator.py
"""sitemap_scout.locator: Поиск sitemap по типовым путям и директивам robots.txt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence, Tuple
from urllib.parse import urljoin

from sitemap_scout.logger import logger
from sitemap_scout.parser.robots_parser import parse_robots_sitemaps

if TYPE_CHECKING:
    from sitemap_scout.crawler.fetcher import Fetcher

DEFAULT_SITEMAP_PATHS: Sequence[str] = (
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/sitemap1.xml",
    "/robots.txt",
    "/de/sitemap/sitemap.xml",
)


def candidate_sitemaps(
    base_url: str, paths: Iterable[str] = DEFAULT_SITEMAP_PATHS
) -> Tuple[str, ...]:
    """Строит абсолютные URL-кандидаты: каждый путь разрешается относительно base_url."""
    return tuple(urljoin(base_url, path) for path in paths)


def is_robots_url(url: str) -> bool:
    return url.endswith("robots.txt")


async def discover_sitemaps(
    fetcher: Fetcher,
    base_url: str,
    paths: Iterable[str] = DEFAULT_SITEMAP_PATHS,
) -> List[str]:
    """Последовательно запрашивает кандидатов и возвращает найденные sitemap.

    Кандидат с ответом HTTP 200 добавляется как есть; robots.txt вместо себя
    добавляет все свои директивы ``Sitemap:``. Пустой результат: штатная
    ситуация, а не ошибка.
    """
    logger.info("Searching for sitemaps...")
    found: List[str] = []
    for url in candidate_sitemaps(base_url, paths):
        response = await fetcher.fetch(url)
        if response is None or response.status != 200:
            logger.debug("No sitemap found at %s", url)
            continue
        if is_robots_url(url):
            listed = parse_robots_sitemaps(response.text, base_url)
            logger.debug("robots.txt lists %d sitemap(s)", len(listed))
            found.extend(listed)
        else:
            found.append(url)

    if found:
        logger.info("Discovered %d sitemap(s) for %s", len(found), base_url)
    else:
        logger.info("No sitemaps found.")
    return found


__all__ = ["DEFAULT_SITEMAP_PATHS", "candidate_sitemaps", "discover_sitemaps", "is_robots_url"]
