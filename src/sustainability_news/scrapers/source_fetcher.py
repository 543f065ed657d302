from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Iterator

import feedparser

from sustainability_news.processing.types import RawCandidate, SourceDescriptor
from sustainability_news.scrapers.feed_fetcher import FeedParser, fetch_feed_candidates
from sustainability_news.scrapers.fetcher_config import FetcherConfig
from sustainability_news.scrapers.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)


class SourceFetcher:
    """소스 종류(kind)에 따라 HTML 목록 페이지 또는 RSS 피드에서 후보를 수집."""

    def __init__(
        self,
        *,
        config: FetcherConfig | None = None,
        page_fetcher: PageFetcher | None = None,
        feed_parser: FeedParser = feedparser.parse,
        delay_sec: float = 0.0,
        sleep_func: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config or FetcherConfig()
        self._page_fetcher = page_fetcher or PageFetcher(self._config, sleep_func=sleep_func)
        self._feed_parser = feed_parser
        self._delay_sec = max(0.0, delay_sec)
        self._sleep = sleep_func

    def fetch_source(self, source: SourceDescriptor) -> list[RawCandidate]:
        kind = (source.get("kind") or "html").lower()
        if kind == "rss":
            return fetch_feed_candidates(
                source,
                feed_parser=self._feed_parser,
                limit=self._config.max_articles_per_source,
            )
        if kind != "html":
            logger.warning("Unknown source kind %r for %s, skipping", kind, source["name"])
            return []
        return self._page_fetcher.fetch(source)

    def iter_sources(
        self, sources: Iterable[SourceDescriptor]
    ) -> Iterator[tuple[SourceDescriptor, list[RawCandidate]]]:
        """소스별 (descriptor, 후보 목록)을 차례로 돌려준다. 소스 사이에 delay_sec만큼 대기."""
        for idx, source in enumerate(sources):
            if idx and self._delay_sec:
                self._sleep(self._delay_sec)
            yield source, self.fetch_source(source)
