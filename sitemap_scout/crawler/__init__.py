"""sitemap_scout.crawler: HTTP fetching and pipeline data models."""

from .fetcher import DEFAULT_USER_AGENTS, Fetcher
from .models import FetchResponse, ScanReport, SeoRecord

__all__ = ["DEFAULT_USER_AGENTS", "Fetcher", "FetchResponse", "ScanReport", "SeoRecord"]
