# === FILE: member_scout/scanner.py ===
"""
Модуль-обёртка для функции запуска обхода каталога.
"""
from typing import Optional

from member_scout.config import ScraperConfig
from member_scout.crawler.crawler import DirectoryCrawler, ProgressCallback
from member_scout.crawler.models import CrawlResult


async def start_scrape(cfg: ScraperConfig, progress: Optional[ProgressCallback] = None) -> CrawlResult:
    """
    Запускает DirectoryCrawler в контексте (своя aiohttp-сессия) и
    возвращает результат обхода.

    Parameters
    ----------
    cfg : ScraperConfig
        Конфигурация обхода.
    progress : callable, optional
        Наблюдатель, получающий CrawlProgress после каждой итерации.
    """
    async with DirectoryCrawler(cfg, progress=progress) as crawler:
        return await crawler.crawl()

__all__ = ["start_scrape"]
