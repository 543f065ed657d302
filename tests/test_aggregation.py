from __future__ import annotations

import datetime

from sustainability_news.processing.aggregation import ArticleAggregator, sort_by_published_desc

NOW = datetime.datetime(2024, 1, 10, tzinfo=datetime.timezone.utc)


def _record(url: str, confidence: float, published: str = "2024-01-05T00:00:00.000Z") -> dict:
    return {"sourceUrl": url, "confidence": confidence, "publishedAt": published, "title": url}


def _aggregator(**overrides) -> ArticleAggregator:
    params = dict(
        accept_confidence=0.01,
        tie_window=0.01,
        top_limit=100,
        history_limit=1000,
        max_age_days=0,
        logger=lambda _msg: None,
        now_provider=lambda: NOW,
    )
    params.update(overrides)
    return ArticleAggregator(**params)


def test_select_batch_filters_low_confidence() -> None:
    batch = _aggregator().select_batch([_record("a", 0.005), _record("b", 0.01), _record("c", 0.2)])
    assert [r["sourceUrl"] for r in batch] == ["c", "b"]


def test_select_batch_dedups_against_history_and_within_batch() -> None:
    persisted = [_record("a", 0.3)]
    new = [_record("a", 0.4), _record("b", 0.2), _record("b", 0.9), _record("", 0.5)]
    batch = _aggregator().select_batch(new, persisted)
    assert len(batch) == 1
    assert batch[0]["sourceUrl"] == "b"
    assert batch[0]["confidence"] == 0.2


def test_rank_uses_publish_time_inside_tie_window() -> None:
    older = _record("old", 0.105, "2024-01-01T00:00:00.000Z")
    newer = _record("new", 0.100, "2024-01-08T00:00:00.000Z")
    clear = _record("clear", 0.3, "2023-12-01T00:00:00.000Z")
    ranked = _aggregator().rank([older, newer, clear])
    assert [r["sourceUrl"] for r in ranked] == ["clear", "new", "old"]


def test_select_batch_truncates_to_top_limit() -> None:
    records = [_record(f"u{i}", 0.1 + i * 0.05) for i in range(5)]
    batch = _aggregator(top_limit=2).select_batch(records)
    assert [r["sourceUrl"] for r in batch] == ["u4", "u3"]


def test_recency_filter_is_optional() -> None:
    stale = _record("stale", 0.5, "2023-12-01T00:00:00.000Z")
    fresh = _record("fresh", 0.5, "2024-01-09T00:00:00.000Z")
    assert len(_aggregator().select_batch([stale, fresh])) == 2
    batch = _aggregator(max_age_days=3).select_batch([stale, fresh])
    assert [r["sourceUrl"] for r in batch] == ["fresh"]


def test_merge_sorts_by_publish_time_and_caps_history() -> None:
    persisted = [_record("p1", 0.2, "2024-01-01T00:00:00.000Z"), _record("p2", 0.2, "2024-01-03T00:00:00.000Z")]
    batch = [_record("n1", 0.5, "2024-01-02T00:00:00.000Z"), _record("p1", 0.9, "2024-01-09T00:00:00.000Z")]
    merged = _aggregator(history_limit=2).merge(batch, persisted)
    assert [r["sourceUrl"] for r in merged] == ["p2", "n1"]


def test_aggregate_empty_inputs() -> None:
    assert _aggregator().aggregate([], []) == []
    assert _aggregator().aggregate([], None) == []


def test_sort_by_published_desc_puts_missing_dates_last() -> None:
    records = [_record("x", 0.1, ""), _record("y", 0.1, "2024-01-01T00:00:00.000Z")]
    assert [r["sourceUrl"] for r in sort_by_published_desc(records)] == ["y", "x"]
