"""
Data models for the MemberScout crawler.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass, field
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class EnterpriseRecord:
    """One member business scraped from a detail page."""

    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    contact_person: str = ""

    def as_row(self) -> Tuple[str, ...]:
        return astuple(self)


class CrawlState(str, Enum):
    RUNNING = "running"
    DRAINING = "draining"
    BUDGET_REACHED = "budget_reached"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class CrawlProgress:
    """Snapshot handed to progress observers after every crawl iteration."""

    visited: int
    total: int
    records: int
    elapsed: float

    @property
    def fraction(self) -> float:
        return self.visited / self.total if self.total else 1.0

    @property
    def percent(self) -> float:
        return self.fraction * 100


@dataclass(frozen=True, slots=True)
class FetchFailure:
    url: str
    error: str


@dataclass(slots=True)
class CrawlResult:
    """Everything a finished crawl produced."""

    records: List[EnterpriseRecord] = field(default_factory=list)
    visited: List[str] = field(default_factory=list)
    pending: List[str] = field(default_factory=list)
    failures: List[FetchFailure] = field(default_factory=list)
    stop_reason: CrawlState = CrawlState.DRAINING
    elapsed: float = 0.0

    @property
    def budget_reached(self) -> bool:
        return self.stop_reason is CrawlState.BUDGET_REACHED
