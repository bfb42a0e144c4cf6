# === FILE: site_meta/pipeline.py ===
"""site_meta.pipeline: Оркестрация обхода sitemap и сбор упорядоченного отчёта."""

from __future__ import annotations

import asyncio
import time
from typing import Callable, List, Optional

from site_meta.crawler.classifier import classify
from site_meta.crawler.extractor import PageExtractor
from site_meta.crawler.sitemap import SitemapLoader
from site_meta.logger import logger
from site_meta.models import Classification, ReportRow, ReportSet, SitemapEntry

__all__ = ["CrawlPipeline", "ProgressCallback"]

#: called as ``on_progress(completed, total)`` once per finished entry
ProgressCallback = Callable[[int, int], None]


class CrawlPipeline:
    """SitemapLoader -> classify -> PageExtractor для всех записей sitemap.

    Фатальны только SitemapUnavailable и SitemapMalformed; ошибки отдельных
    страниц превращаются в строки со значениями ``"unknown"``.
    """

    def __init__(
        self,
        loader: SitemapLoader,
        extractor: PageExtractor,
        concurrency: int = 1,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self.loader = loader
        self.extractor = extractor
        self.concurrency = concurrency
        self.on_progress = on_progress

    async def run(self, base_url: str) -> ReportSet:
        """Загружает sitemap и возвращает ReportSet в порядке записей sitemap."""
        logger.info("Старт обхода: %s", base_url)
        start = time.monotonic()

        entries = [e for e in await self.loader.load(base_url) if e.location]
        total = len(entries)
        semaphore = asyncio.Semaphore(self.concurrency)
        completed = 0

        async def process(entry: SitemapEntry) -> ReportRow:
            nonlocal completed
            async with semaphore:
                row = await self._process_entry(entry)
            completed += 1
            if self.on_progress is not None:
                self.on_progress(completed, total)
            return row

        rows: List[ReportRow] = await asyncio.gather(*(process(e) for e in entries))
        report = ReportSet(rows=list(rows))

        duration = time.monotonic() - start
        logger.info(
            "Завершено: %d строк за %.2f с (%.2f стр/с)",
            len(report), duration, len(report) / duration if duration else 0,
        )
        return report

    async def _process_entry(self, entry: SitemapEntry) -> ReportRow:
        url = entry.location
        if classify(url) is Classification.SKIP:
            logger.debug("Skip asset %s", url)
            return ReportRow(url)
        metadata = await self.extractor.extract(url)
        return ReportRow.from_metadata(url, metadata)
