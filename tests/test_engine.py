# File: tests/test_engine.py
# End-to-end pipeline runs against a local aiohttp site
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from conftest import seo_page, serve_app, sitemapindex, urlset
from sitemap_scout.config import ScraperConfig
from sitemap_scout.engine import run_pipeline


def _config(base: str, **overrides) -> ScraperConfig:
    values = dict(base_url=base, timeout=2.0, batch_size=2, user_agents=["TestAgent/1.0"])
    values.update(overrides)
    return ScraperConfig(**values)


@pytest_asyncio.fixture
async def site() -> AsyncIterator[tuple[str, Counter]]:
    """
    /robots.txt          -> Sitemap: /index-a.xml
    /sitemap.xml         -> index of /pages.xml and /index-a.xml
    /index-a.xml         -> index of /sitemap.xml (cycle) and /more.xml
    /pages.xml, /more.xml -> page lists, one page missing on the server
    """
    hits: Counter = Counter()
    app = web.Application()

    @web.middleware
    async def count_hits(request, handler):
        hits[request.path] += 1
        return await handler(request)

    app.middlewares.append(count_hits)

    # bodies are built per request so absolute <loc> values match the bound port
    routes = {
        "/robots.txt": (lambda b: "User-agent: *\nDisallow:\nSitemap: /index-a.xml\n", "text/plain"),
        "/sitemap.xml": (lambda b: sitemapindex(f"{b}/pages.xml", f"{b}/index-a.xml"), "application/xml"),
        "/index-a.xml": (lambda b: sitemapindex(f"{b}/sitemap.xml", f"{b}/more.xml"), "application/xml"),
        "/pages.xml": (lambda b: urlset(f"{b}/", f"{b}/about", f"{b}/gone"), "application/xml"),
        "/more.xml": (lambda b: urlset(f"{b}/contact"), "application/xml"),
        "/": (lambda b: seo_page("Home", "Welcome", "Front page"), "text/html"),
        "/about": (lambda b: seo_page("About", "About us"), "text/html"),
        "/contact": (lambda b: seo_page("Contact", "", "Reach us"), "text/html"),
    }

    async def serve(request):
        build, content_type = routes[request.path]
        base = f"{request.scheme}://{request.host}"
        return web.Response(text=build(base), content_type=content_type)

    for path in routes:
        app.router.add_get(path, serve)

    async for base in serve_app(app):
        yield base, hits


@pytest.mark.asyncio()
async def test_full_pipeline(site):
    base, hits = site
    report = await run_pipeline(_config(base))

    assert report.sitemaps == [f"{base}/sitemap.xml", f"{base}/index-a.xml"]

    # each discovered sitemap is resolved on its own; both reach the same pages
    # (sitemap.xml: pages.xml, index-a.xml -> more.xml; index-a.xml: sitemap.xml -> pages.xml, more.xml)
    per_run = [f"{base}/", f"{base}/about", f"{base}/contact"]
    assert [r.url for r in report.records] == per_run * 2

    home = report.records[0].to_dict()
    assert home == {
        "url": f"{base}/",
        "title": "Home",
        "h1": "Welcome",
        "metaDescription": "Front page",
        "statusCode": 200,
    }
    assert report.records[1].meta_description == ""
    assert report.records[2].h1 == ""

    # each run fetches each sitemap once; two runs in total
    assert hits["/pages.xml"] == 2
    assert hits["/more.xml"] == 2
    assert hits["/gone"] == 2


@pytest.mark.asyncio()
async def test_no_sitemaps(bare_site):
    report = await run_pipeline(_config(bare_site))
    assert report.sitemaps == []
    assert report.records == []
    assert not report.found_sitemaps


@pytest_asyncio.fixture
async def bare_site() -> AsyncIterator[str]:
    app = web.Application()

    async def robots(_):
        return web.Response(text="User-agent: *\nDisallow:", content_type="text/plain")

    app.router.add_get("/robots.txt", robots)
    async for base in serve_app(app):
        yield base


@pytest.mark.asyncio()
async def test_custom_sitemap_paths(site):
    base, hits = site
    report = await run_pipeline(_config(base, sitemap_paths=["/more.xml"]))
    assert report.sitemaps == [f"{base}/more.xml"]
    assert [r.url for r in report.records] == [f"{base}/contact"]
    assert hits["/robots.txt"] == 0
