# === FILE: site_meta/parser/html_parser.py ===
"""HTML helpers for pulling page metadata.

Three independent readers, each working on the decoded page body:

* :func:`parse_meta_tags` scans ``<meta name=... content=...>`` tags of the
  document head and returns them as a mapping, the way PHP's
  ``get_meta_tags`` does.
* :func:`parse_title` runs a structured BeautifulSoup parse and returns the
  text of the first ``<title>`` element.
* :func:`find_raw_title` ignores document structure: it collapses whitespace
  and regex-matches a ``<title>...</title>`` span anywhere in the text, so it
  also sees titles hidden in comments or scripts.

All of them return ``None`` when nothing was found and raise
:class:`~site_meta.errors.PageParseFailed` when the markup cannot be read.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

from bs4 import BeautifulSoup, SoupStrainer
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from site_meta.errors import PageParseFailed

__all__: Sequence[str] = ("parse_meta_tags", "parse_title", "find_raw_title")

_HEAD_END_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_META_NAME_RE = re.compile(r"[^a-z0-9_]")
_WHITESPACE_RE = re.compile(r"\s+")
_RAW_TITLE_RE = re.compile(r"<title>(.*)</title>", re.IGNORECASE)


def _soup(html: str, url: str, **kwargs) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "html.parser", **kwargs)
    except (ParserRejectedMarkup, AssertionError) as exc:
        raise PageParseFailed(url, f"HTML parser rejected markup ({exc})") from exc


def parse_meta_tags(html: str, url: str = "") -> dict[str, str]:
    """Return ``{name: content}`` for named meta tags found before ``</head>``.

    Names are lower-cased and characters other than ``[a-z0-9_]`` become
    ``_`` (so ``og:title`` is reported as ``og_title``). The first tag with a
    given name wins. Values are not trimmed, but character references in
    them are decoded (``A &amp; B`` is returned as ``A & B``).
    """
    head = _HEAD_END_RE.split(html, maxsplit=1)[0]
    soup = _soup(head, url, parse_only=SoupStrainer("meta"))

    tags: dict[str, str] = {}
    for tag in soup.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        name = tag.get("name")
        content = tag.get("content")
        if not isinstance(name, str) or not isinstance(content, str):
            continue
        key = _META_NAME_RE.sub("_", name.strip().lower())
        tags.setdefault(key, content)
    return tags


def parse_title(html: str, url: str = "") -> str | None:
    """Text of the first ``<title>`` element or ``None``."""
    soup = _soup(html, url)
    title_tag = soup.find("title")
    if title_tag is None:
        return None
    return title_tag.get_text().strip() or None


def find_raw_title(html: str) -> str | None:
    """Regex search for ``<title>...</title>`` on whitespace-collapsed text.

    The match is greedy and case-insensitive: with several title tags the span
    runs from the first opening tag to the last closing one.
    """
    text = _WHITESPACE_RE.sub(" ", html).strip()
    if not text:
        return None
    match = _RAW_TITLE_RE.search(text)
    if match is None:
        return None
    return match.group(1).strip() or None
