# site_meta/crawler/sitemap.py
"""
Sitemap acquisition: fetch ``<base>/sitemap.xml`` and parse it into entries.
"""
from __future__ import annotations

from typing import List

from site_meta.crawler.fetcher import Fetcher
from site_meta.errors import PageFetchFailed, SitemapUnavailable
from site_meta.logger import logger
from site_meta.models import SitemapEntry
from site_meta.parser.sitemap_parser import parse_sitemap
from site_meta.utils import join_base


class SitemapLoader:
    """Loads the sitemap of a site; both failure modes are fatal for the run."""

    def __init__(self, fetcher: Fetcher, sitemap_path: str = "/sitemap.xml") -> None:
        self.fetcher = fetcher
        self.sitemap_path = sitemap_path

    def sitemap_url(self, base_url: str) -> str:
        return join_base(base_url, self.sitemap_path)

    async def load(self, base_url: str) -> List[SitemapEntry]:
        """
        Return the sitemap entries of *base_url* in document order.

        Raises SitemapUnavailable when the document cannot be retrieved or is
        empty, SitemapMalformed when it cannot be parsed.
        """
        url = self.sitemap_url(base_url)
        try:
            page = await self.fetcher.fetch(url)
        except PageFetchFailed as exc:
            raise SitemapUnavailable(url, f"Sitemap not found ({exc.reason})") from exc

        if not page.content.strip():
            raise SitemapUnavailable(url, "Sitemap is empty")

        entries = parse_sitemap(page.content, source=url)
        logger.info("Sitemap %s: %d entries", url, len(entries))
        return entries
