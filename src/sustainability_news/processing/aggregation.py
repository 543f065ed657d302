from __future__ import annotations

import datetime
import functools
from typing import Callable, Iterable

from sustainability_news.models import ArticleRecord
from sustainability_news.processing.types import LogFunc
from sustainability_news.utils import parse_datetime_utc, utc_now

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def published_at(record: ArticleRecord) -> datetime.datetime:
    return parse_datetime_utc(record.get("publishedAt") or "") or _EPOCH


def sort_by_published_desc(records: Iterable[ArticleRecord]) -> list[ArticleRecord]:
    return sorted(records, key=published_at, reverse=True)


class ArticleAggregator:
    """한 번의 수집 결과를 필터/중복제거/정렬해 게시 대상과 보관 이력을 만든다."""

    def __init__(
        self,
        *,
        accept_confidence: float = 0.01,
        tie_window: float = 0.01,
        top_limit: int = 100,
        history_limit: int = 1000,
        max_age_days: int = 0,
        logger: LogFunc | None = None,
        now_provider: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        self._accept_confidence = accept_confidence
        self._tie_window = tie_window
        self._top_limit = max(0, top_limit)
        self._history_limit = max(0, history_limit)
        self._max_age_days = max(0, max_age_days)
        self._log = logger or (lambda _msg: None)
        self._now_provider = now_provider or utc_now

    def passes_confidence(self, record: ArticleRecord) -> bool:
        return float(record.get("confidence") or 0.0) >= self._accept_confidence

    def passes_recency(self, record: ArticleRecord) -> bool:
        if not self._max_age_days:
            return True
        cutoff = self._now_provider() - datetime.timedelta(days=self._max_age_days)
        return published_at(record) >= cutoff

    def _compare(self, a: ArticleRecord, b: ArticleRecord) -> int:
        conf_a = float(a.get("confidence") or 0.0)
        conf_b = float(b.get("confidence") or 0.0)
        if abs(conf_b - conf_a) > self._tie_window:
            return -1 if conf_a > conf_b else 1
        # 신뢰도 차이가 tie_window 이내면 최신 기사 우선
        pub_a = published_at(a)
        pub_b = published_at(b)
        if pub_a == pub_b:
            return 0
        return -1 if pub_a > pub_b else 1

    def rank(self, records: list[ArticleRecord]) -> list[ArticleRecord]:
        return sorted(records, key=functools.cmp_to_key(self._compare))

    def select_batch(
        self,
        new_records: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        """이번 실행에서 새로 게시할 기사 목록 (신뢰도 순, 상위 top_limit)."""
        seen_urls = {r.get("sourceUrl") for r in (persisted_records or []) if r.get("sourceUrl")}
        accepted: list[ArticleRecord] = []
        low_confidence = 0
        stale = 0
        duplicates = 0
        for record in new_records:
            if not self.passes_confidence(record):
                low_confidence += 1
                continue
            if not self.passes_recency(record):
                stale += 1
                continue
            url = record.get("sourceUrl")
            if not url or url in seen_urls:
                duplicates += 1
                continue
            seen_urls.add(url)
            accepted.append(record)

        ranked = self.rank(accepted)[: self._top_limit]
        self._log(
            f"집계: 입력 {len(new_records)}개, 저신뢰 {low_confidence}개, 오래됨 {stale}개, "
            f"중복 {duplicates}개, 게시 {len(ranked)}개"
        )
        return ranked

    def merge(
        self,
        batch: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        """보관 이력과 합쳐 발행일 역순으로 정렬하고 history_limit까지만 유지."""
        persisted = list(persisted_records or [])
        known = {r.get("sourceUrl") for r in persisted}
        combined = persisted + [r for r in batch if r.get("sourceUrl") not in known]
        return sort_by_published_desc(combined)[: self._history_limit]

    def aggregate(
        self,
        new_records: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        batch = self.select_batch(new_records, persisted_records)
        return self.merge(batch, persisted_records)
