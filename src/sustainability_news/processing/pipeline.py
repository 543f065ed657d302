from __future__ import annotations

import datetime
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from sustainability_news.core.config import (
    ACCEPT_CONFIDENCE,
    CLASSIFY_MAX_WORKERS,
    CONFIDENCE_TIE_WINDOW,
    FALLBACK_SDG_COUNT,
    HISTORY_LIMIT,
    MAX_AGE_DAYS,
    MAX_SDGS,
    MIN_CONFIDENCE,
    MIN_WORD_COUNT,
    PILLAR_DEFAULT_SDGS,
    TOP_LIMIT,
)
from sustainability_news.models import ArticleRecord
from sustainability_news.processing.aggregation import ArticleAggregator
from sustainability_news.processing.assembler import ArticleAssembler
from sustainability_news.processing.classifier import TextClassifier
from sustainability_news.processing.keywords import KeywordIndex, build_keyword_index
from sustainability_news.processing.rating import RatingSynthesizer
from sustainability_news.processing.types import GovernanceFunc, LogFunc, RawCandidate, SourceDescriptor
from sustainability_news.utils import utc_now


class ClassificationPipeline:
    def __init__(
        self,
        *,
        classifier: TextClassifier,
        synthesizer: RatingSynthesizer,
        assembler: ArticleAssembler,
        aggregator: ArticleAggregator,
        logger: LogFunc,
        max_workers: int = 1,
        now_provider: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        self._classifier = classifier
        self._synthesizer = synthesizer
        self._assembler = assembler
        self._aggregator = aggregator
        self._log = logger
        self._max_workers = max(1, max_workers)
        self._now_provider = now_provider or utc_now

    def process_candidate(
        self,
        candidate: RawCandidate,
        *,
        index: int,
        now: datetime.datetime,
    ) -> ArticleRecord | None:
        """후보 하나를 분류 -> 평점 -> 기사 레코드로 변환. 탈락이면 None."""
        if not self._assembler.is_acceptable(candidate):
            return None
        result = self._classifier.classify(self._assembler.analysis_text(candidate))
        if result is None:
            return None
        rating = self._synthesizer.rate(result)
        impact = self._synthesizer.impact_score(result)
        return self._assembler.assemble(candidate, result, rating, impact, index=index, now=now)

    def classify_and_assemble(
        self,
        candidates: list[RawCandidate],
        source: SourceDescriptor | None = None,
    ) -> list[ArticleRecord]:
        now = self._now_provider()
        prepared: list[RawCandidate] = []
        for candidate in candidates:
            item = dict(candidate)
            if source:
                item.setdefault("sourceName", source.get("name", ""))
                item.setdefault("baseUrl", source.get("baseUrl", ""))
            prepared.append(item)  # type: ignore[arg-type]

        if self._max_workers > 1 and len(prepared) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = [
                    executor.submit(self.process_candidate, c, index=i, now=now)
                    for i, c in enumerate(prepared)
                ]
                results = [f.result() for f in futures]
        else:
            results = [self.process_candidate(c, index=i, now=now) for i, c in enumerate(prepared)]

        records = [r for r in results if r is not None]
        source_name = (source or {}).get("name") or "batch"
        self._log(f"분류 완료: {source_name} (후보 {len(prepared)}개, 채택 {len(records)}개)")
        for record in records:
            self._log(f"✅ {record['title'][:60]} (confidence: {record['confidence'] * 100:.1f}%)")
        return records

    def select_batch(
        self,
        new_records: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        return self._aggregator.select_batch(new_records, persisted_records)

    def merge(
        self,
        batch: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        return self._aggregator.merge(batch, persisted_records)

    def aggregate(
        self,
        new_records: list[ArticleRecord],
        persisted_records: list[ArticleRecord] | None = None,
    ) -> list[ArticleRecord]:
        return self._aggregator.aggregate(new_records, persisted_records)


def build_default_classifier(keyword_index: KeywordIndex | None = None) -> TextClassifier:
    return TextClassifier(
        keyword_index=keyword_index or build_keyword_index(),
        min_word_count=MIN_WORD_COUNT,
        min_confidence=MIN_CONFIDENCE,
        max_sdgs=MAX_SDGS,
        fallback_sdg_count=FALLBACK_SDG_COUNT,
        pillar_default_sdgs=PILLAR_DEFAULT_SDGS,
    )


def build_default_aggregator(*, logger: LogFunc) -> ArticleAggregator:
    return ArticleAggregator(
        accept_confidence=ACCEPT_CONFIDENCE,
        tie_window=CONFIDENCE_TIE_WINDOW,
        top_limit=TOP_LIMIT,
        history_limit=HISTORY_LIMIT,
        max_age_days=MAX_AGE_DAYS,
        logger=logger,
    )


def build_default_pipeline(
    *,
    logger: LogFunc,
    governance_func: GovernanceFunc | None = None,
) -> ClassificationPipeline:
    return ClassificationPipeline(
        classifier=build_default_classifier(),
        synthesizer=RatingSynthesizer(governance_func=governance_func, max_sdgs=MAX_SDGS),
        assembler=ArticleAssembler(min_confidence=MIN_CONFIDENCE),
        aggregator=build_default_aggregator(logger=logger),
        logger=logger,
        max_workers=CLASSIFY_MAX_WORKERS,
    )
