from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterable, Optional

import requests
from bs4 import BeautifulSoup, Tag

from sustainability_news.processing.types import RawCandidate, SourceDescriptor
from sustainability_news.scrapers.fetcher_config import (
    FALLBACK_CONTAINER_SELECTORS,
    FALLBACK_LINK_SELECTORS,
    FALLBACK_SUMMARY_SELECTORS,
    FALLBACK_TITLE_SELECTORS,
    FetcherConfig,
)
from sustainability_news.utils import clean_text

logger = logging.getLogger(__name__)


def _selectors(primary: Optional[str], fallbacks: Iterable[str]) -> list[str]:
    return [s for s in [primary, *fallbacks] if s]


def _first_text(el: Tag, selectors: list[str], min_chars: int) -> str:
    for selector in selectors:
        found = el.select_one(selector)
        if found is None:
            continue
        text = clean_text(found.get_text(" ", strip=True))
        if text and len(text) > min_chars:
            return text
    return ""


def _first_href(el: Tag, selectors: list[str]) -> str:
    # 컨테이너 자체가 링크인 경우(h3 a 같은 fallback selector)
    if el.name == "a" and el.get("href"):
        return str(el.get("href"))
    for selector in selectors:
        found = el.select_one(selector)
        if found is None:
            continue
        href = found.get("href")
        if href:
            return str(href)
    return ""


def _date_value(el: Tag, selector: Optional[str]) -> str:
    if not selector:
        return ""
    found = el.select_one(selector)
    if found is None:
        return ""
    return str(found.get("datetime") or "") or clean_text(found.get_text(" ", strip=True))


class PageFetcher:
    """목록 페이지 HTML에서 제목/링크/요약 후보를 뽑는다.

    네트워크 실패나 5xx 응답은 지수 backoff로 재시도하고, 끝내 실패하면 빈 목록을 돌려준다.
    """

    def __init__(
        self,
        config: FetcherConfig | None = None,
        *,
        session: Any = None,
        sleep_func: Callable[[float], None] = time.sleep,
        log: logging.Logger | None = None,
    ) -> None:
        self._config = config or FetcherConfig()
        self._session = session or requests.Session()
        self._sleep = sleep_func
        self._log = log or logger

    def fetch_html(self, url: str) -> str:
        response = self._session.get(
            url,
            headers=self._config.request_headers(),
            timeout=self._config.timeout_sec,
            allow_redirects=True,
        )
        if response.status_code >= 500:
            raise requests.HTTPError(f"server error {response.status_code}", response=response)
        return response.text or ""

    def find_containers(self, soup: BeautifulSoup, primary: Optional[str]) -> tuple[str, list[Tag]]:
        for selector in _selectors(primary, FALLBACK_CONTAINER_SELECTORS):
            found = soup.select(selector)
            if found:
                return selector, found
        return "", []

    def parse_listing(self, html: str, source: SourceDescriptor) -> list[RawCandidate]:
        selectors = source.get("selectors") or {}
        soup = BeautifulSoup(html, "html.parser")
        selector, containers = self.find_containers(soup, selectors.get("articles"))
        if not containers:
            self._log.warning("No article containers found for %s", source["name"])
            return []
        self._log.info("Found %d article containers with selector: %s", len(containers), selector)

        title_selectors = _selectors(selectors.get("title"), FALLBACK_TITLE_SELECTORS)
        link_selectors = _selectors(selectors.get("link"), FALLBACK_LINK_SELECTORS)
        summary_selectors = _selectors(selectors.get("summary"), FALLBACK_SUMMARY_SELECTORS)

        candidates: list[RawCandidate] = []
        for el in containers[: self._config.max_articles_per_source]:
            title = _first_text(el, title_selectors, self._config.min_title_chars)
            if not title and el.name == "a":
                title = clean_text(el.get_text(" ", strip=True))
            link = _first_href(el, link_selectors)
            if not title or not link:
                continue
            candidates.append({
                "title": title,
                "link": link,
                "summary": _first_text(el, summary_selectors, self._config.min_summary_chars),
                "sourceName": source["name"],
                "baseUrl": source["baseUrl"],
                "publishedAt": _date_value(el, selectors.get("date")),
            })
        return candidates

    def fetch(self, source: SourceDescriptor) -> list[RawCandidate]:
        max_retries = max(1, self._config.max_retries)
        for attempt in range(1, max_retries + 1):
            try:
                self._log.info("Scraping %s (attempt %d/%d)", source["name"], attempt, max_retries)
                html = self.fetch_html(source["searchUrl"])
                candidates = self.parse_listing(html, source)
                self._log.info("Collected %d candidates from %s", len(candidates), source["name"])
                return candidates
            except requests.RequestException as exc:
                self._log.error("Attempt %d failed for %s: %s", attempt, source["name"], exc)
                if attempt == max_retries:
                    self._log.error("All attempts failed for %s", source["name"])
                    return []
                delay = self._config.backoff_delay(attempt)
                self._log.info("Waiting %.1fs before retry", delay)
                self._sleep(delay)
        return []
