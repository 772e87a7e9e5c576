# === FILE: member_scout/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque, List, Optional, Protocol, Set

from aiohttp import ClientSession

from member_scout.config import ScraperConfig
from member_scout.crawler.fetcher import FetchError, Fetcher
from member_scout.crawler.link_extractor import extract_enterprise_links, extract_pagination_links
from member_scout.crawler.models import (
    CrawlProgress,
    CrawlResult,
    CrawlState,
    EnterpriseRecord,
    FetchFailure,
)
from member_scout.parser.dom import make_soup
from member_scout.parser.record_parser import extract_enterprise_record

__all__ = ("DirectoryCrawler", "PageFetcher", "ProgressCallback")

ProgressCallback = Callable[[CrawlProgress], None]


class PageFetcher(Protocol):
    def fetch(self, url: str) -> Awaitable[str]: ...


class DirectoryCrawler:
    """
    Sequential directory crawler.

    The frontier is a FIFO queue; ``_known`` holds every URL that is either
    queued or visited, so a URL is enqueued at most once per run. One URL is
    fetched and fully processed before the next one is popped.
    """

    def __init__(
        self,
        config: ScraperConfig,
        *,
        fetcher: Optional[PageFetcher] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.progress = progress
        self.frontier: Deque[str] = deque()
        self.visited: List[str] = []
        self._known: Set[str] = set()
        self.records: List[EnterpriseRecord] = []
        self.failures: List[FetchFailure] = []
        self.state = CrawlState.RUNNING
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("MemberScout")

    async def __aenter__(self) -> DirectoryCrawler:
        if self.fetcher is None:
            self.session = ClientSession(headers={"User-Agent": self.config.user_agent})
            self.fetcher = Fetcher(
                self.session,
                timeout=self.config.timeout,
                max_retries=self.config.retries_on_timeout,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def enqueue(self, url: str) -> bool:
        """Append *url* to the frontier unless it is already queued or visited."""
        if url in self._known:
            return False
        self._known.add(url)
        self.frontier.append(url)
        return True

    async def crawl(self) -> CrawlResult:
        fetcher = self.fetcher
        if fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        self.logger.info("Crawl started: %s", self.config.seed_url)
        start = time.monotonic()
        self.state = CrawlState.RUNNING
        self.enqueue(self.config.seed_url)

        while self.frontier:
            url = self.frontier.popleft()
            await self._process(fetcher, url)
            self.visited.append(url)
            self._report_progress(start)

            if self._budget_reached():
                self.state = CrawlState.BUDGET_REACHED
                self.logger.info("Reached maximum number of records: %d", self.config.max_records)
                break
        else:
            self.state = CrawlState.DRAINING

        stop_reason = self.state
        self.state = CrawlState.DONE
        elapsed = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d URLs visited, %d records, %d failures in %.2f s",
            len(self.visited), len(self.records), len(self.failures), elapsed,
        )
        return CrawlResult(
            records=list(self.records),
            visited=list(self.visited),
            pending=list(self.frontier),
            failures=list(self.failures),
            stop_reason=stop_reason,
            elapsed=elapsed,
        )

    async def _process(self, fetcher: PageFetcher, url: str) -> None:
        try:
            body = await fetcher.fetch(url)
        except FetchError as exc:
            self.logger.error('ERROR on "%s": %s', url, exc)
            self.failures.append(FetchFailure(url, str(exc)))
            return

        try:
            soup = make_soup(body)
            sel = self.config.selectors
            for link in extract_pagination_links(soup, sel) + extract_enterprise_links(soup, sel):
                self.enqueue(link)
            record = extract_enterprise_record(soup, sel, self.config.labels)
        except Exception as exc:
            self.logger.exception('Extraction failed on "%s"', url)
            self.failures.append(FetchFailure(url, f"{type(exc).__name__}: {exc}"))
            return

        if record is not None:
            self.records.append(record)
            self.logger.debug("Record found on %s: %s", url, record.name)

    def _budget_reached(self) -> bool:
        return self.config.max_records > 0 and len(self.records) >= self.config.max_records

    def _report_progress(self, start: float) -> None:
        if self.progress is None:
            return
        visited = len(self.visited)
        self.progress(
            CrawlProgress(
                visited=visited,
                total=visited + len(self.frontier),
                records=len(self.records),
                elapsed=time.monotonic() - start,
            )
        )
