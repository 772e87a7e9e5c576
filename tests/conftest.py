# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Sequence, Union

import pytest

from member_scout.config import ScraperConfig
from member_scout.crawler.fetcher import FetchError
from member_scout.logger import init_logging

SEED = "https://directory.example/socios"


def listing_page(*, pages: Sequence[str] = (), members: Sequence[str] = ()) -> str:
    """Build a listing page with a pager and member links."""
    pager = "".join(f'<li><a href="{href}">{i}</a></li>' for i, href in enumerate(pages, 1))
    cards = "".join(f'<a class="lm" href="{href}">Socio</a>' for href in members)
    return (
        "<html><body>"
        f"<div class=\"listado\">{cards}</div>"
        f"<ul class=\"pager lfr-pagination-buttons\">{pager}</ul>"
        "</body></html>"
    )


def detail_page(name: str, *blocks: str, members: Sequence[str] = ()) -> str:
    """Build a member detail page; each *blocks* item becomes a description div."""
    descriptions = "".join(f'<div class="socios-descripcion">{b}</div>' for b in blocks)
    extra = "".join(f'<a class="lm" href="{href}">Otro</a>' for href in members)
    return (
        "<html><body>"
        '<div class="socios-panel-lat">'
        f'<h2 class="tit-soc">{name}</h2>{descriptions}'
        "</div>"
        f"{extra}"
        "</body></html>"
    )


class FakeFetcher:
    """In-memory fetcher: str → body, Exception → raised; unknown URL → FetchError."""

    def __init__(self, pages: Dict[str, Union[str, Exception]]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError(url, "ClientResponseError: 404, message='Not Found'")
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests rebind the project logger to CliRunner streams; restore it."""
    yield
    init_logging()


@pytest.fixture()
def basic_config() -> ScraperConfig:
    """Return a basic valid ScraperConfig for crawler tests."""
    return ScraperConfig(seed_url=SEED, timeout=2.0, retries_on_timeout=2, user_agent="TestAgent/1.0")


@pytest.fixture()
def directory_site() -> Dict[str, str]:
    """
    Two listing pages and three members; member 2 is linked from both listings
    and from member 1, listing 1 links back to itself through the pager.
    """
    p1 = SEED
    p2 = f"{SEED}?page=2"
    m1, m2, m3 = (f"https://directory.example/socio/{i}" for i in (1, 2, 3))
    return {
        p1: listing_page(pages=[p1, p2], members=[m1, m2]),
        p2: listing_page(pages=[p1, p2], members=[m2, m3]),
        m1: detail_page("Aceros del Norte", "Domicilio Av. Juárez 10", members=[m2]),
        m2: detail_page("Bodegas Unidas", "Teléfono 55 1234 5678"),
        m3: detail_page("Cafés Finos", "Correo electrónico ventas@cafes.example"),
    }
