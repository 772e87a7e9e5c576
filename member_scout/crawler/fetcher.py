# member_scout/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per URL, retried only when an attempt times out.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError, ClientSession, ClientTimeout

__all__ = ("Fetcher", "FetchError", "FetchTimeoutError")


class FetchError(Exception):
    """A URL could not be fetched; the crawl skips it."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchTimeoutError(FetchError):
    """Every attempt for a URL ran into the per-attempt timeout."""

    def __init__(self, url: str, attempts: int) -> None:
        super().__init__(url, f"Timeout after {attempts} attempt(s)")
        self.attempts = attempts


class Fetcher:
    """Fetches page bodies through a shared aiohttp session."""

    def __init__(self, session: ClientSession, *, timeout: float, max_retries: int) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout!r}")
        if max_retries <= 0:
            raise ValueError(f"max_retries must be > 0, got {max_retries!r}")
        self.session = session
        self.timeout = timeout
        self.max_retries = max_retries
        self.logger = logging.getLogger("MemberScout")

    async def fetch(self, url: str) -> str:
        """
        Return the decoded body of *url*.

        Raises FetchTimeoutError once ``max_retries`` attempts have timed out,
        and FetchError straight away for any other failure (DNS, refused
        connection, non-2xx status, broken response, malformed host).
        """
        timeout = ClientTimeout(total=self.timeout)
        for attempt in range(1, self.max_retries + 1):
            try:
                async with self.session.get(url, timeout=timeout, raise_for_status=True) as resp:
                    return await resp.text(errors="replace")
            except asyncio.TimeoutError:
                self.logger.debug("Timeout %d/%d for %s", attempt, self.max_retries, url)
                continue
            except (ClientError, ValueError, OSError) as exc:
                # UnicodeError from IDNA host encoding lands here too
                raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc
        raise FetchTimeoutError(url, self.max_retries)
