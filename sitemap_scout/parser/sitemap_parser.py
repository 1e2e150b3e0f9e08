# File: sitemap_scout/parser/sitemap_parser.py
"""sitemap_scout.parser.sitemap_parser: Парсинг sitemap.xml и классификация найденных URL."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from lxml import etree

SITEMAP_MARKER = "xml"


def parse_sitemap(xml_content: str) -> List[str]:
    """Разбирает XML content sitemap и возвращает список URL из тегов <loc>.

    Парсер работает в режиме восстановления: битый или пустой документ даёт
    пустой список, а не исключение.

    Args:
        xml_content: строка с содержимым sitemap.xml.

    Returns:
        Список URL, найденных в <loc> тегах, в порядке документа.

    Пример:
    ```python
    from sitemap_scout.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', encoding='utf-8') as f:
        content = f.read()
    urls = parse_sitemap(content)
    print(urls)
    ```
    """
    if not xml_content or not xml_content.strip():
        return []
    # the body is already decoded text; ignore any encoding in the XML declaration
    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False, encoding="utf-8")
    try:
        root = etree.fromstring(xml_content.strip().encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError:
        return []
    if root is None:
        return []
    locs = root.iter("{*}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]


def is_sitemap_reference(url: str) -> bool:
    """Считает URL ссылкой на вложенный sitemap, если в нём есть подстрока "xml"."""
    return SITEMAP_MARKER in url


def split_sitemap_entries(urls: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Делит URL на (вложенные sitemap, обычные страницы), сохраняя исходный порядок."""
    sitemaps: List[str] = []
    pages: List[str] = []
    for url in urls:
        if is_sitemap_reference(url):
            sitemaps.append(url)
        else:
            pages.append(url)
    return sitemaps, pages


__all__ = ["parse_sitemap", "is_sitemap_reference", "split_sitemap_entries"]
