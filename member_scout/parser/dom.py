"""DOM helpers shared by the link and record extractors.

Pages are parsed with ``multi_valued_attributes=None`` so that ``class`` stays
the raw attribute string. Matching ``attrs={"class": value}`` is then an exact
string comparison: ``class="lm"`` matches, ``class="lm extra"`` does not.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = (
    "Markup",
    "make_soup",
    "find_all_exact",
    "find_exact",
    "joined_text",
    "is_absolute_http",
)

Markup = Union[str, BeautifulSoup]

_ABSOLUTE_PREFIXES = ("http://", "https://")


def make_soup(markup: Markup) -> BeautifulSoup:
    """Parse *markup* unless it already is a parsed document."""
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)


def find_all_exact(root: Tag, name: str, css_class: str) -> List[Tag]:
    """All descendants of *root* named *name* whose class attribute equals *css_class*."""
    return [t for t in root.find_all(name, attrs={"class": css_class}) if isinstance(t, Tag)]


def find_exact(root: Tag, name: str, css_class: str) -> Optional[Tag]:
    found = root.find(name, attrs={"class": css_class})
    return found if isinstance(found, Tag) else None


def joined_text(tag: Tag) -> str:
    """Concatenate every text node under *tag* in document order, untrimmed."""
    return "".join(tag.strings)


def is_absolute_http(href: str) -> bool:
    return href.startswith(_ABSOLUTE_PREFIXES)
