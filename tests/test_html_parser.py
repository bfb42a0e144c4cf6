# File: tests/test_html_parser.py
from site_meta.parser.html_parser import find_raw_title, parse_meta_tags, parse_title


def test_meta_tags_from_head():
    html = """<html><head>
        <meta charset="utf-8">
        <meta name="Description" content="Welcome to the site">
        <meta name="og:title" content="OG">
        <meta name="description" content="second one">
    </head><body>
        <meta name="keywords" content="body meta">
    </body></html>"""

    tags = parse_meta_tags(html)

    assert tags["description"] == "Welcome to the site"
    assert tags["og_title"] == "OG"
    assert "keywords" not in tags


def test_meta_tags_without_head_section():
    assert parse_meta_tags('<meta name="description" content="bare">') == {"description": "bare"}
    assert parse_meta_tags("<p>no meta</p>") == {}


def test_parse_title():
    assert parse_title("<html><head><title>  Example Home \n</title></head></html>") == "Example Home"
    assert parse_title("<html><body>No title</body></html>") is None
    assert parse_title("<title>   </title>") is None


def test_parse_title_ignores_comments():
    assert parse_title("<html><head><!-- <title>Home</title> --></head></html>") is None


def test_raw_title_collapses_whitespace():
    html = "<html><head><TITLE>\n   Home\n\t Page  </TITLE></head></html>"
    assert find_raw_title(html) == "Home Page"


def test_raw_title_sees_commented_title():
    assert find_raw_title("<html><!-- <title>Home</title> --></html>") == "Home"


def test_raw_title_missing():
    assert find_raw_title("") is None
    assert find_raw_title("<html><body>nothing</body></html>") is None


def test_meta_content_entities_are_decoded():
    html = '<head><meta name="description" content="  A &amp; B &quot;quoted&quot; "></head>'
    assert parse_meta_tags(html) == {"description": '  A & B "quoted" '}
