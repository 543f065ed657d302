from __future__ import annotations

import calendar
import datetime
import logging
from typing import Any, Callable

import feedparser
from bs4 import BeautifulSoup

from sustainability_news.processing.types import RawCandidate, SourceDescriptor
from sustainability_news.utils import clean_text, to_iso_utc

logger = logging.getLogger(__name__)

FeedParser = Callable[[str], Any]


def _strip_html(raw: str) -> str:
    if not raw or "<" not in raw:
        return clean_text(raw or "")
    return clean_text(BeautifulSoup(raw, "html.parser").get_text(" ", strip=True))


def entry_published_at(entry: Any) -> str:
    # published_parsed는 UTC 기준 struct_time
    for attr in ("published_parsed", "updated_parsed"):
        parsed = getattr(entry, attr, None)
        if parsed:
            ts = calendar.timegm(parsed)
            return to_iso_utc(datetime.datetime.fromtimestamp(ts, tz=datetime.timezone.utc))
    return getattr(entry, "published", "") or getattr(entry, "updated", "") or ""


def entry_to_candidate(entry: Any, source: SourceDescriptor) -> RawCandidate | None:
    title = _strip_html(getattr(entry, "title", "") or "")
    link = (getattr(entry, "link", "") or "").strip()
    if not title or not link:
        return None
    return {
        "title": title,
        "link": link,
        "summary": _strip_html(getattr(entry, "summary", "") or ""),
        "sourceName": source["name"],
        "baseUrl": source["baseUrl"],
        "publishedAt": entry_published_at(entry),
    }


def fetch_feed_candidates(
    source: SourceDescriptor,
    *,
    feed_parser: FeedParser = feedparser.parse,
    limit: int = 25,
) -> list[RawCandidate]:
    """RSS 피드 항목을 후보로 변환. 파싱 실패 시 빈 목록."""
    try:
        feed = feed_parser(source["searchUrl"])
    except Exception as exc:
        logger.error("Feed load failed for %s: %s", source["name"], exc)
        return []

    entries = list(getattr(feed, "entries", None) or [])
    if getattr(feed, "bozo", False) and not entries:
        logger.warning("Malformed feed for %s: %s", source["name"], getattr(feed, "bozo_exception", ""))
        return []

    candidates: list[RawCandidate] = []
    for entry in entries[: max(0, limit)]:
        candidate = entry_to_candidate(entry, source)
        if candidate is not None:
            candidates.append(candidate)
    logger.info("Feed %s: %d entries, %d candidates", source["name"], len(entries), len(candidates))
    return candidates
