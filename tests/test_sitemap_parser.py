# File: tests/test_sitemap_parser.py
import pytest

from site_meta.errors import SitemapMalformed
from site_meta.models import SitemapEntry
from site_meta.parser.sitemap_parser import parse_sitemap

NS = 'xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"'


def test_entries_keep_document_order_and_metadata():
    xml = f"""<?xml version="1.0" encoding="UTF-8"?>
    <urlset {NS}>
      <url>
        <loc> https://example.com/ </loc>
        <lastmod>2024-01-02</lastmod>
        <changefreq>daily</changefreq>
        <priority>1.0</priority>
      </url>
      <url><loc>https://example.com/about</loc></url>
      <url><loc>https://example.com/logo.png</loc></url>
    </urlset>"""

    entries = parse_sitemap(xml)

    assert [e.location for e in entries] == [
        "https://example.com/",
        "https://example.com/about",
        "https://example.com/logo.png",
    ]
    assert entries[0] == SitemapEntry(
        location="https://example.com/",
        last_modified="2024-01-02",
        change_frequency="daily",
        priority="1.0",
    )
    assert entries[1].last_modified is None


def test_single_url_element_is_a_one_item_list():
    xml = f"<urlset {NS}><url><loc>https://example.com/only</loc></url></urlset>"
    entries = parse_sitemap(xml)
    assert isinstance(entries, list)
    assert entries == [SitemapEntry(location="https://example.com/only")]


def test_entries_without_loc_are_dropped():
    xml = f"""<urlset {NS}>
      <url><loc>https://example.com/a</loc></url>
      <url><lastmod>2024-01-01</lastmod></url>
      <url><loc>   </loc></url>
      <url><loc>https://example.com/b</loc></url>
    </urlset>"""
    assert [e.location for e in parse_sitemap(xml)] == [
        "https://example.com/a",
        "https://example.com/b",
    ]


def test_without_namespace_and_from_bytes():
    xml = b"<urlset><url><loc>https://example.com/x</loc></url></urlset>"
    assert parse_sitemap(xml)[0].location == "https://example.com/x"


@pytest.mark.parametrize(
    "content",
    [
        "this is not xml",
        "<urlset><url><loc>https://example.com/</loc></url>",
        f"<urlset {NS}></urlset>",
        # sitemap index documents have no url collection
        '<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        "<sitemap><loc>https://example.com/sitemap-1.xml</loc></sitemap></sitemapindex>",
        # url elements must be direct children of the root
        "<root><group><url><loc>https://example.com/</loc></url></group></root>",
    ],
)
def test_malformed_sitemaps(content):
    with pytest.raises(SitemapMalformed) as exc_info:
        parse_sitemap(content, source="https://example.com/sitemap.xml")
    assert exc_info.value.url == "https://example.com/sitemap.xml"


def test_declared_encoding_for_text_and_bytes():
    xml = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<urlset><url><loc>https://example.com/café</loc></url></urlset>"
    )
    assert parse_sitemap(xml)[0].location == "https://example.com/café"
    assert parse_sitemap(xml.encode("latin-1"))[0].location == "https://example.com/café"


def test_comment_inside_loc_does_not_cut_the_url():
    xml = "<urlset><url><loc>https://example.com/<!-- moved -->about</loc></url></urlset>"
    assert parse_sitemap(xml)[0].location == "https://example.com/about"


def test_unresolved_entity_in_loc_is_malformed():
    xml = (
        b'<?xml version="1.0"?>'
        b'<!DOCTYPE urlset [<!ENTITY page "about">]>'
        b"<urlset><url><loc>https://example.com/&page;</loc></url></urlset>"
    )
    with pytest.raises(SitemapMalformed, match="&page;"):
        parse_sitemap(xml, source="https://example.com/sitemap.xml")
