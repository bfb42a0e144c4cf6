# === FILE: site_meta/scanner.py ===
"""
Модуль-обёртка для запуска обхода sitemap с собственной HTTP-сессией.
"""
from typing import Optional

from site_meta.config import CrawlerConfig
from site_meta.crawler.extractor import PageExtractor
from site_meta.crawler.fetcher import Fetcher, create_session
from site_meta.crawler.sitemap import SitemapLoader
from site_meta.models import ReportSet
from site_meta.pipeline import CrawlPipeline, ProgressCallback


async def start_crawl(
    cfg: CrawlerConfig,
    base_url: str,
    on_progress: Optional[ProgressCallback] = None,
) -> ReportSet:
    """
    Собирает Fetcher, SitemapLoader, PageExtractor и CrawlPipeline и запускает обход.

    Parameters
    ----------
    cfg : CrawlerConfig
        Настройки обхода.
    base_url : str
        Корневой URL сайта; sitemap ищется по ``base_url + cfg.sitemap_path``.
    on_progress : callable, optional
        Получает ``(completed, total)`` после каждой обработанной записи.

    Returns
    -------
    ReportSet
        Строки отчёта в порядке sitemap.
    """
    async with create_session(cfg) as session:
        fetcher = Fetcher(session, cfg)
        pipeline = CrawlPipeline(
            SitemapLoader(fetcher, cfg.sitemap_path),
            PageExtractor(fetcher),
            concurrency=cfg.concurrency,
            on_progress=on_progress,
        )
        return await pipeline.run(base_url)

__all__ = ["start_crawl"]
