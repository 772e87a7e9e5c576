"""Console progress line for long crawls.

The crawler only knows the :data:`~member_scout.crawler.crawler.ProgressCallback`
protocol; this module is the observer the CLI plugs in.
"""
from __future__ import annotations

import click

from member_scout.crawler.models import CrawlProgress


def format_progress(progress: CrawlProgress) -> str:
    minutes, seconds = divmod(int(progress.elapsed), 60)
    return (
        f"Done {progress.visited}/{progress.total} ({progress.percent:.2f}%) URLs, "
        f"found {progress.records} enterprises on {minutes}m / {seconds}s"
    )


class ConsoleProgress:
    """Rewrites a single status line on stderr after every crawl iteration."""

    def __init__(self) -> None:
        self._dirty = False

    def __call__(self, progress: CrawlProgress) -> None:
        click.echo(f"{format_progress(progress)}\t\t\r", err=True, nl=False)
        self._dirty = True

    def finish(self) -> None:
        """Move off the status line so later output starts on a clean line."""
        if self._dirty:
            click.echo(err=True)
            self._dirty = False
