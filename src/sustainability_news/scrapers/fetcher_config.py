from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except Exception:
        return default


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS: Tuple[Tuple[str, str], ...] = (
    ("Accept", "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"),
    ("Accept-Language", "en-US,en;q=0.5"),
    ("Connection", "keep-alive"),
    ("Upgrade-Insecure-Requests", "1"),
    ("Cache-Control", "max-age=0"),
)

# 소스별 selector가 맞지 않을 때 차례로 시도하는 범용 selector
FALLBACK_CONTAINER_SELECTORS: Tuple[str, ...] = (
    "article, .article, .story, .post, .item",
    '[class*="card"], [class*="story"], [class*="article"]',
    "h2 a, h3 a, h4 a",
)
FALLBACK_TITLE_SELECTORS: Tuple[str, ...] = (
    "h1, h2, h3, h4, h5",
    '[class*="title"], [class*="headline"]',
    "a",
)
FALLBACK_LINK_SELECTORS: Tuple[str, ...] = ("a[href]", "h1 a, h2 a, h3 a")
FALLBACK_SUMMARY_SELECTORS: Tuple[str, ...] = (
    '[class*="summary"], [class*="excerpt"], [class*="description"]',
    "p",
)


@dataclass(frozen=True)
class FetcherConfig:
    timeout_sec: int = _env_int("FETCH_TIMEOUT_SEC", 25)
    max_retries: int = _env_int("FETCH_MAX_RETRIES", 3)
    backoff_base_sec: float = _env_float("FETCH_BACKOFF_BASE_SEC", 1.0)
    max_articles_per_source: int = _env_int("FETCH_MAX_ARTICLES_PER_SOURCE", 25)
    min_title_chars: int = _env_int("FETCH_MIN_TITLE_CHARS", 10)
    min_summary_chars: int = _env_int("FETCH_MIN_SUMMARY_CHARS", 20)
    user_agent: str = os.getenv("FETCH_USER_AGENT", DEFAULT_USER_AGENT)
    headers: Tuple[Tuple[str, str], ...] = field(default_factory=lambda: DEFAULT_HEADERS)

    def request_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, **dict(self.headers)}

    def backoff_delay(self, attempt: int) -> float:
        return (2 ** attempt) * self.backoff_base_sec
