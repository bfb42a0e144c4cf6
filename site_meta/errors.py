# site_meta/errors.py
"""
Exception hierarchy for SiteMeta.

Sitemap errors are fatal for a crawl run. Page errors never leave the
extractor: they only turn into ``"unknown"`` cells in the report.
"""
from __future__ import annotations

__all__ = [
    "SiteMetaError",
    "SitemapError",
    "SitemapUnavailable",
    "SitemapMalformed",
    "PageError",
    "PageFetchFailed",
    "PageParseFailed",
]


class SiteMetaError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url}")


class SitemapError(SiteMetaError):
    """The sitemap could not be turned into a list of entries."""


class SitemapUnavailable(SitemapError):
    """Sitemap could not be retrieved (network error, timeout, bad status, empty body)."""


class SitemapMalformed(SitemapError):
    """Sitemap was retrieved but is not XML or has no ``url`` collection."""


class PageError(SiteMetaError):
    """Problem with a single page; degrades that row only."""


class PageFetchFailed(PageError):
    """Resource could not be retrieved."""


class PageParseFailed(PageError):
    """Body was retrieved but an extraction strategy could not parse it."""
