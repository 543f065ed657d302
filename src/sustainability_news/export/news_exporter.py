from __future__ import annotations

import datetime
import logging
import os
from typing import Iterable

from sustainability_news.core.config import DATABASE_JSON, LATEST_JSON, SOURCE_DELAY_SEC, SOURCES
from sustainability_news.export.report import BatchSummary, format_report, summarize_batch
from sustainability_news.export.store import JsonArticleStore, StoreError, write_batch
from sustainability_news.models import ArticleRecord
from sustainability_news.processing.pipeline import ClassificationPipeline, build_default_pipeline
from sustainability_news.processing.types import LogFunc, SourceDescriptor
from sustainability_news.scrapers.source_fetcher import SourceFetcher
from sustainability_news.utils import utc_now


def _log(message: str) -> None:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}")


def run(
    sources: Iterable[SourceDescriptor] | None = None,
    *,
    store: JsonArticleStore | None = None,
    fetcher: SourceFetcher | None = None,
    pipeline: ClassificationPipeline | None = None,
    latest_path: str | os.PathLike[str] = LATEST_JSON,
    logger: LogFunc = _log,
    now: datetime.datetime | None = None,
) -> BatchSummary:
    """수집 -> 분류 -> 집계 -> 저장 한 사이클."""
    store = store or JsonArticleStore(DATABASE_JSON)
    fetcher = fetcher or SourceFetcher(delay_sec=SOURCE_DELAY_SEC)
    pipeline = pipeline or build_default_pipeline(logger=logger)
    now = now or utc_now()

    store_ok = True
    try:
        persisted = store.load_articles()
        logger(f"기존 DB 로드: {len(persisted)}개 ({store.path})")
    except StoreError as exc:
        # 읽지 못한 DB를 덮어쓰지 않도록 이번 실행은 저장을 건너뛴다
        store_ok = False
        persisted = []
        logger(f"⚠️ 기존 DB를 읽지 못해 빈 이력으로 진행: {exc}")

    collected: list[ArticleRecord] = []
    for source, candidates in fetcher.iter_sources(sources if sources is not None else SOURCES):
        try:
            collected.extend(pipeline.classify_and_assemble(candidates, source))
        except Exception as exc:
            logger(f"❌ 소스 처리 실패: {source.get('name')} ({exc})")
            continue

    batch = pipeline.select_batch(collected, persisted)
    history = pipeline.merge(batch, persisted)
    history_urls = {r.get("sourceUrl") for r in history}
    new_count = sum(1 for r in batch if r.get("sourceUrl") in history_urls)

    write_batch(latest_path, batch)
    logger(f"최신 배치 저장: {latest_path} ({len(batch)}개)")
    if store_ok:
        store.save(history, new_count=new_count, now=now)
        logger(f"DB 저장: {store.path} (신규 {new_count}개, 전체 {len(history)}개)")

    summary = summarize_batch(batch, total_found=len(collected), new_articles=new_count if store_ok else 0)
    for line in format_report(summary):
        logger(line)
    return summary


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        _log("프로그램 시작")
        run()
        _log("완료!")
    except Exception as e:
        print("❌ 오류 발생:", e)


if __name__ == "__main__":
    main()
