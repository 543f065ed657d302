from __future__ import annotations

import datetime
import email.utils
import html
import math
import re
from decimal import ROUND_HALF_UP, Decimal

_WS_RE = re.compile(r"\s+")  # 연속 공백을 단일 공백으로 축약
_TAG_RE = re.compile(r"<[^>]+>")  # 섞여 들어온 HTML 태그 제거용


def clean_text(s: str) -> str:
    """HTML 엔티티/태그를 제거하고 공백을 정리한 깔끔한 텍스트로 정규화."""
    if not s:
        return ""
    s = html.unescape(s)
    s = s.replace("\u00a0", " ")
    s = _TAG_RE.sub("", s)
    return _WS_RE.sub(" ", s).strip()


def clean_text_ws(text: str) -> str:
    return _WS_RE.sub(" ", (text or "").strip())


def normalize_for_matching(text: str) -> str:
    """키워드 매칭용: 소문자 + 공백 정리."""
    return clean_text_ws(text).lower()


def word_count(text: str) -> int:
    return len((text or "").split())


def truncate(text: str, max_chars: int) -> str:
    return (text or "")[:max_chars]


def round_half_up(value: float, digits: int = 0) -> float:
    """파이썬 round()의 은행가 반올림 대신 0.5 올림."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def estimate_read_time_minutes(text: str, words_per_minute: int = 200) -> int:
    """분당 단어 수 기준 읽기 시간(분). 최소 1분."""
    return max(1, math.ceil(word_count(text) / words_per_minute))


def slugify_source(name: str) -> str:
    return _WS_RE.sub("-", (name or "").strip().lower())


def parse_datetime_utc(value: str, *, default_tz: datetime.tzinfo | None = None) -> datetime.datetime | None:
    if not value:
        return None
    value = value.strip()
    try:
        dt = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except Exception:
        try:
            dt = email.utils.parsedate_to_datetime(value)
        except Exception:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=default_tz or datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def to_iso_utc(dt: datetime.datetime) -> str:
    """JS toISOString()과 같은 형태(밀리초 + Z)로 직렬화."""
    dt = dt.astimezone(datetime.timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)
