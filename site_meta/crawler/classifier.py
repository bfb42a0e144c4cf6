# site_meta/crawler/classifier.py
"""
Decides which sitemap URLs are worth fetching.

A URL that ends in a dot followed by two or more letters is treated as a
static or media file (``.pdf``, ``.jpg``, ``.zip``) and skipped. The test runs
on the whole URL string, so ``/page.html`` and a bare ``https://example.com``
are skipped too, while ``https://example.com/`` is crawled.
"""
from __future__ import annotations

import re

from site_meta.models import Classification

__all__ = ("classify", "is_crawlable")

_ASSET_RE = re.compile(r"\.[a-zA-Z]{2,}$")


def classify(url: str) -> Classification:
    """Return SKIP for asset-looking URLs, CRAWLABLE otherwise."""
    if _ASSET_RE.search(url):
        return Classification.SKIP
    return Classification.CRAWLABLE


def is_crawlable(url: str) -> bool:
    return classify(url) is Classification.CRAWLABLE
