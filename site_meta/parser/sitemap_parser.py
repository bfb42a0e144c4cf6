# File: site_meta/parser/sitemap_parser.py
"""site_meta.parser.sitemap_parser: Разбор sitemap.xml в упорядоченный список SitemapEntry."""

from __future__ import annotations

import re
from typing import List, Optional, Union

from lxml import etree

from site_meta.errors import SitemapMalformed
from site_meta.models import SitemapEntry

# у уже декодированной строки объявление кодировки не имеет смысла
_XML_DECL_RE = re.compile(r"\A\s*<\?xml\b[^>]*\?>")


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _child_text(element: etree._Element, name: str, source: str) -> Optional[str]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child) == name:
            parts = [child.text or ""]
            for node in child:
                if isinstance(node, etree._Entity):
                    raise SitemapMalformed(source, f"Unresolved entity {node.text} in <{name}>")
                parts.append(node.tail or "")
            text = "".join(parts).strip()
            return text or None
    return None


def parse_sitemap(xml_content: Union[str, bytes], source: str = "<sitemap>") -> List[SitemapEntry]:
    """Разбирает sitemap и возвращает записи в порядке документа.

    Args:
        xml_content: содержимое sitemap.xml. Для bytes кодировку определяет
            объявление XML; str считается уже декодированным текстом.
        source: URL документа, попадает в текст ошибок.

    Returns:
        Список SitemapEntry, всегда list: и для 0, и для 1, и для N элементов
        ``<url>``. Элементы без ``<loc>`` пропускаются.

    Raises:
        SitemapMalformed: документ не XML или у корня нет дочерних ``<url>``,
            либо в значении осталась неразрешённая DTD-сущность.

    Пример:
    ```python
    from site_meta.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', 'rb') as f:
        entries = parse_sitemap(f.read())
    print([e.location for e in entries])
    ```
    """
    if isinstance(xml_content, str):
        xml_content = _XML_DECL_RE.sub("", xml_content, count=1)

    parser = etree.XMLParser(ns_clean=True, recover=False, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml_content, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise SitemapMalformed(source, f"Sitemap is not valid XML ({exc})") from exc

    url_elements = [el for el in root if isinstance(el.tag, str) and _local_name(el) == "url"]
    if not url_elements:
        raise SitemapMalformed(source, "Sitemap XML not formatted properly, URLs not found")

    entries: List[SitemapEntry] = []
    for element in url_elements:
        location = _child_text(element, "loc", source)
        if location is None:
            continue
        entries.append(
            SitemapEntry(
                location=location,
                last_modified=_child_text(element, "lastmod", source),
                change_frequency=_child_text(element, "changefreq", source),
                priority=_child_text(element, "priority", source),
            )
        )
    return entries
