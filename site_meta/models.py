# site_meta/models.py
"""
Data models shared by the crawler, the pipeline and the exporters.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple

__all__ = (
    "SENTINEL",
    "SitemapEntry",
    "Classification",
    "PageMetadata",
    "ReportRow",
    "ReportSet",
)

#: placeholder for a value that could not be extracted
SENTINEL = "unknown"


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<url>`` element of a sitemap. Only ``location`` is used by the crawl."""

    location: str
    last_modified: Optional[str] = None
    change_frequency: Optional[str] = None
    priority: Optional[str] = None


class Classification(str, Enum):
    """Decision taken for a URL before fetching it."""

    CRAWLABLE = "crawlable"
    SKIP = "skip"


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """Title and description of a page, sentinel when not found."""

    title: str = SENTINEL
    description: str = SENTINEL


@dataclass(frozen=True, slots=True)
class ReportRow:
    """One line of the report."""

    url: str
    title: str = SENTINEL
    description: str = SENTINEL

    @classmethod
    def from_metadata(cls, url: str, metadata: PageMetadata) -> ReportRow:
        return cls(url=url, title=metadata.title, description=metadata.description)

    def as_tuple(self) -> Tuple[str, str, str]:
        return astuple(self)

    def as_dict(self) -> Dict[str, str]:
        return {"url": self.url, "title": self.title, "description": self.description}


@dataclass(slots=True)
class ReportSet:
    """Ordered rows of a crawl run; row order is sitemap order."""

    HEADER: ClassVar[Tuple[str, str, str]] = ("url", "title", "description")

    rows: List[ReportRow] = field(default_factory=list)

    def as_dicts(self) -> List[Dict[str, str]]:
        return [row.as_dict() for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ReportRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> ReportRow:
        return self.rows[index]
