# sitemap_scout/crawler/models.py
"""
Data models for the SitemapScout pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Successful result of a single GET: requested URL, HTTP status and decoded body."""

    url: str
    status: int
    text: str


@dataclass(frozen=True, slots=True)
class SeoRecord:
    """SEO fields extracted from one successfully fetched page."""

    url: str
    title: str
    h1: str
    meta_description: str
    status_code: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Serialize with the camelCase keys used in reports."""
        return {
            "url": self.url,
            "title": self.title,
            "h1": self.h1,
            "metaDescription": self.meta_description,
            "statusCode": self.status_code,
        }


@dataclass(slots=True)
class ScanReport:
    """Outcome of one pipeline run. An empty ``sitemaps`` list means nothing was found."""

    base_url: str
    sitemaps: List[str] = field(default_factory=list)
    records: List[SeoRecord] = field(default_factory=list)

    @property
    def found_sitemaps(self) -> bool:
        return bool(self.sitemaps)
