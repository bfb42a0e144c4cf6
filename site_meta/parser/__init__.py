"""site_meta.parser: Разбор sitemap и HTML без сетевых запросов."""

from .html_parser import find_raw_title, parse_meta_tags, parse_title
from .sitemap_parser import parse_sitemap

__all__ = ["parse_sitemap", "parse_meta_tags", "parse_title", "find_raw_title"]
