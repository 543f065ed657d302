from __future__ import annotations

import datetime

from sustainability_news.processing.aggregation import ArticleAggregator
from sustainability_news.processing.assembler import ArticleAssembler
from sustainability_news.processing.classifier import TextClassifier
from sustainability_news.processing.keywords import build_keyword_index
from sustainability_news.processing.pipeline import ClassificationPipeline, build_default_pipeline
from sustainability_news.processing.rating import RatingSynthesizer

NOW = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
SOURCE = {"name": "UN News", "baseUrl": "https://news.un.org", "searchUrl": "https://news.un.org/feed"}


def _build_pipeline(*, max_workers: int = 1, logs: list[str] | None = None) -> ClassificationPipeline:
    log = logs.append if logs is not None else (lambda _msg: None)
    return ClassificationPipeline(
        classifier=TextClassifier(keyword_index=build_keyword_index()),
        synthesizer=RatingSynthesizer(governance_func=lambda: 5),
        assembler=ArticleAssembler(min_confidence=0.02, now_provider=lambda: NOW),
        aggregator=ArticleAggregator(logger=log, now_provider=lambda: NOW),
        logger=log,
        max_workers=max_workers,
        now_provider=lambda: NOW,
    )


def _candidates() -> list[dict]:
    return [
        {
            "title": "Retailer rolls out eco-friendly packaging",
            "link": "/en/story/packaging",
            "summary": "the company launched an eco-friendly packaging line for its stores this month",
        },
        {
            "title": "Short one",
            "link": "/en/story/short",
            "summary": "renewable energy and climate change dominate the summit agenda this week",
        },
        {
            "title": "Local bakery celebrates its tenth anniversary",
            "link": "/en/story/bakery",
            "summary": "the owners thanked their loyal customers with free bread and coffee all day",
        },
        {
            "title": "Solar power and renewable energy investment drives growth",
            "link": "https://news.un.org/en/story/solar",
            "summary": "green finance and economic growth follow new solar power auctions across the world",
        },
    ]


def test_classify_and_assemble_keeps_only_classifiable_candidates() -> None:
    logs: list[str] = []
    records = _build_pipeline(logs=logs).classify_and_assemble(_candidates(), SOURCE)
    assert [r["sourceUrl"] for r in records] == [
        "https://news.un.org/en/story/packaging",
        "https://news.un.org/en/story/solar",
    ]
    first = records[0]
    assert first["pillar"] == "environmental"
    assert [s["id"] for s in first["sdgs"]] == [13, 14]
    assert first["e2sgRating"]["governance"] == 5
    assert first["source"] == "UN News"
    assert first["id"] == "un-news-1704067200000-0"
    assert records[1]["id"].endswith("-3")
    assert any("채택 2개" in line for line in logs)


def test_parallel_run_matches_sequential_order() -> None:
    sequential = _build_pipeline().classify_and_assemble(_candidates(), SOURCE)
    parallel = _build_pipeline(max_workers=4).classify_and_assemble(_candidates(), SOURCE)
    assert parallel == sequential


def test_aggregate_combines_batch_with_history() -> None:
    pipeline = _build_pipeline()
    records = pipeline.classify_and_assemble(_candidates(), SOURCE)
    history = pipeline.aggregate(records, records[:1])
    assert [r["sourceUrl"] for r in history].count(records[0]["sourceUrl"]) == 1
    assert len(history) == 2


def test_broken_link_does_not_drop_rest_of_batch() -> None:
    good, broken = _candidates()[0], dict(_candidates()[0], link="http://[broken/story")
    records = _build_pipeline().classify_and_assemble([good, broken], SOURCE)
    assert [r["sourceUrl"] for r in records] == ["https://news.un.org/en/story/packaging"]


def test_classify_and_assemble_empty_input() -> None:
    assert _build_pipeline().classify_and_assemble([], SOURCE) == []


def test_build_default_pipeline() -> None:
    pipeline = build_default_pipeline(logger=lambda _msg: None, governance_func=lambda: 7)
    records = pipeline.classify_and_assemble(_candidates()[:1], SOURCE)
    assert len(records) == 1
    assert records[0]["e2sgRating"]["governance"] == 7
