"""site_meta.crawler: Загрузка sitemap, классификация URL и извлечение метаданных страниц."""

from .classifier import classify, is_crawlable
from .extractor import PageExtractor
from .fetcher import Fetcher, create_session
from .sitemap import SitemapLoader

__all__ = ["Fetcher", "create_session", "SitemapLoader", "PageExtractor", "classify", "is_crawlable"]
