# site_meta/crawler/models.py
"""
Data models for the SiteMeta fetch layer.
"""
from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class PageData:
    """Raw response of a successful fetch: final URL, status, body and declared charset."""

    url: str
    status: int
    content: bytes
    charset: Optional[str] = None

    @property
    def text(self) -> str:
        """Body decoded with the declared charset (UTF-8 otherwise); bad bytes are replaced."""
        encoding = self.charset or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            encoding = "utf-8"
        return self.content.decode(encoding, errors="replace")
