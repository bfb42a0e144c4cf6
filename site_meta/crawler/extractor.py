# site_meta/crawler/extractor.py
"""
Per-page metadata extraction with an ordered chain of strategies.

The page is fetched once. Description strategies and title strategies then
run over the same decoded body; within each chain the first strategy that
yields a usable value wins and the rest are not consulted.
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from site_meta.crawler.fetcher import Fetcher
from site_meta.errors import PageFetchFailed, PageParseFailed
from site_meta.logger import logger
from site_meta.models import SENTINEL, PageMetadata
from site_meta.parser.html_parser import find_raw_title, parse_meta_tags, parse_title

__all__ = (
    "ExtractionStrategy",
    "MetaDescription",
    "StructuredTitle",
    "RawTextTitle",
    "PageExtractor",
)


class ExtractionStrategy(Protocol):
    """Reads one value from a page body; None means "not found here"."""

    name: str

    def extract(self, html: str, url: str) -> Optional[str]:
        ...


class MetaDescription:
    """``<meta name="description">`` from the document head."""

    name = "meta-description"

    def extract(self, html: str, url: str) -> Optional[str]:
        return parse_meta_tags(html, url).get("description")


class StructuredTitle:
    """``<title>`` element found by a full HTML parse."""

    name = "structured-title"

    def extract(self, html: str, url: str) -> Optional[str]:
        return parse_title(html, url)


class RawTextTitle:
    """Regex over the raw text; catches titles the parser does not see as elements."""

    name = "raw-text-title"

    def extract(self, html: str, url: str) -> Optional[str]:
        return find_raw_title(html)


DEFAULT_DESCRIPTION_STRATEGIES: Sequence[ExtractionStrategy] = (MetaDescription(),)
DEFAULT_TITLE_STRATEGIES: Sequence[ExtractionStrategy] = (StructuredTitle(), RawTextTitle())


class PageExtractor:
    """Fetches a page and extracts its title and description. Never raises page errors."""

    def __init__(
        self,
        fetcher: Fetcher,
        title_strategies: Sequence[ExtractionStrategy] = DEFAULT_TITLE_STRATEGIES,
        description_strategies: Sequence[ExtractionStrategy] = DEFAULT_DESCRIPTION_STRATEGIES,
    ) -> None:
        self.fetcher = fetcher
        self.title_strategies = tuple(title_strategies)
        self.description_strategies = tuple(description_strategies)

    async def extract(self, url: str) -> PageMetadata:
        try:
            page = await self.fetcher.fetch(url)
        except PageFetchFailed as exc:
            logger.warning("Failed %s: %s", url, exc.reason)
            return PageMetadata()
        except Exception:  # extract() never raises for a single page
            logger.exception("Unexpected error while fetching %s", url)
            return PageMetadata()

        html = page.text
        try:
            return PageMetadata(
                title=self._first_value(self.title_strategies, html, url),
                description=self._first_value(self.description_strategies, html, url),
            )
        except Exception:
            logger.exception("Unexpected error while extracting %s", url)
            return PageMetadata()

    @staticmethod
    def _first_value(strategies: Sequence[ExtractionStrategy], html: str, url: str) -> str:
        for strategy in strategies:
            try:
                value = strategy.extract(html, url)
            except PageParseFailed as exc:
                logger.debug("%s failed for %s: %s", strategy.name, url, exc.reason)
                continue
            if value is not None and value != SENTINEL:
                logger.debug("%s matched for %s", strategy.name, url)
                return value
        return SENTINEL
