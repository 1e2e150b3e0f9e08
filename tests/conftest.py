# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator
from typing import Dict, List, Optional, Tuple, Union

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from sitemap_scout.crawler.models import FetchResponse

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def urlset(*locs: str) -> str:
    """Build a <urlset> sitemap listing *locs*."""
    body = "".join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{SITEMAP_NS}">{body}</urlset>'


def sitemapindex(*locs: str) -> str:
    """Build a <sitemapindex> pointing at *locs*."""
    body = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><sitemapindex xmlns="{SITEMAP_NS}">{body}</sitemapindex>'


def seo_page(title: str = "", h1: str = "", description: Optional[str] = None) -> str:
    meta = f'<meta name="description" content="{description}">' if description is not None else ""
    return f"<html><head><title>{title}</title>{meta}</head><body><h1>{h1}</h1></body></html>"


Route = Union[str, Tuple[int, str], None]


class FakeFetcher:
    """In-memory stand-in for Fetcher.

    ``routes`` maps URL -> body (status 200), ``(status, body)`` or ``None``
    (fetch failure). Unknown URLs fail. Every call is recorded, and the
    number of concurrently running fetches is tracked.
    """

    def __init__(self, routes: Dict[str, Route], delay: float = 0.01) -> None:
        self.routes = routes
        self.delay = delay
        self.calls: List[str] = []
        self.events: List[Tuple[str, str]] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def fetch(self, url: str) -> Optional[FetchResponse]:
        self.calls.append(url)
        self.events.append(("start", url))
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
            self.events.append(("end", url))
        route = self.routes.get(url)
        if route is None:
            return None
        status, text = route if isinstance(route, tuple) else (200, route)
        return FetchResponse(url=url, status=status, text=text)

    def call_count(self, url: str) -> int:
        return self.calls.count(url)


@pytest.fixture()
def fake_fetcher_factory():
    def make(routes: Dict[str, Route], delay: float = 0.01) -> FakeFetcher:
        return FakeFetcher(routes, delay=delay)

    return make


async def serve_app(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on a free local port, yield its base URL, ensure cleanup."""
    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/")).rstrip("/")
    finally:
        await server.close()

