# member_scout/crawler/link_extractor.py
"""
Link extraction for directory pages: pagination links and member detail links.

Only absolute http(s) hrefs are kept. Relative, fragment, ``javascript:`` and
empty hrefs are dropped without resolving them against the page URL.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from bs4.element import Tag

from member_scout.config import SelectorConfig
from member_scout.parser.dom import Markup, find_all_exact, is_absolute_http, make_soup

_DEFAULT_SELECTORS = SelectorConfig()


def _absolute_hrefs(anchors: Iterable[Tag]) -> List[str]:
    links: List[str] = []
    for a in anchors:
        href = a.get("href")
        if isinstance(href, str) and is_absolute_http(href):
            links.append(href)
    return links


def extract_pagination_links(markup: Markup, selectors: Optional[SelectorConfig] = None) -> List[str]:
    """Links found inside pagination containers, in document order."""
    sel = selectors or _DEFAULT_SELECTORS
    soup = make_soup(markup)
    anchors: List[Tag] = []
    for container in find_all_exact(soup, sel.pagination_tag, sel.pagination_class):
        anchors.extend(a for a in container.find_all("a") if isinstance(a, Tag))
    return _absolute_hrefs(anchors)


def extract_enterprise_links(markup: Markup, selectors: Optional[SelectorConfig] = None) -> List[str]:
    """Links to member detail pages anywhere in the document."""
    sel = selectors or _DEFAULT_SELECTORS
    soup = make_soup(markup)
    return _absolute_hrefs(find_all_exact(soup, "a", sel.detail_link_class))


__all__ = ["extract_pagination_links", "extract_enterprise_links"]
