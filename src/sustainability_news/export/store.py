from __future__ import annotations

import datetime
import json
import os
from pathlib import Path
from typing import Any

from sustainability_news.core.constants import CONFIDENCE_HIGH, CONFIDENCE_MEDIUM, PILLARS
from sustainability_news.models import ArticleDatabase, ArticleRecord, DatabaseMetadata
from sustainability_news.utils import to_iso_utc, utc_now


class StoreError(RuntimeError):
    """기사 DB 파일을 읽거나 쓸 수 없을 때."""


def empty_database() -> ArticleDatabase:
    return {"articles": [], "lastUpdated": None, "metadata": {}}


def _atomic_write_json(path: Path, payload: Any) -> None:
    """임시 파일로 저장 후 원자적 교체."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def build_metadata(
    articles: list[ArticleRecord],
    *,
    new_count: int | None = None,
    now: datetime.datetime | None = None,
) -> DatabaseMetadata:
    """보관 중인 기사 기준 통계. 빈 목록이면 averageConfidence는 0."""
    confidences = [float(a.get("confidence") or 0.0) for a in articles]
    pillar_distribution = {pillar: 0 for pillar in PILLARS}
    for article in articles:
        pillar = article.get("pillar") or ""
        pillar_distribution[pillar] = pillar_distribution.get(pillar, 0) + 1

    sources: list[str] = []
    for article in articles:
        source = article.get("source") or ""
        if source and source not in sources:
            sources.append(source)

    metadata: DatabaseMetadata = {
        "totalArticles": len(articles),
        "sources": sources,
        "pillarDistribution": pillar_distribution,
        "averageConfidence": (sum(confidences) / len(confidences)) if confidences else 0.0,
        "confidenceDistribution": {
            "high": sum(1 for c in confidences if c > CONFIDENCE_HIGH),
            "medium": sum(1 for c in confidences if CONFIDENCE_MEDIUM < c <= CONFIDENCE_HIGH),
            "low": sum(1 for c in confidences if c <= CONFIDENCE_MEDIUM),
        },
    }
    if now is not None:
        metadata["lastScrapingRun"] = to_iso_utc(now)
    if new_count is not None:
        metadata["newArticlesAdded"] = new_count
    return metadata


class JsonArticleStore:
    """`{articles, lastUpdated, metadata}` 형태의 JSON 문서 하나에 기사 이력을 보관."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ArticleDatabase:
        if not self._path.exists():
            return empty_database()
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"cannot read article database {self._path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("articles", []), list):
            raise StoreError(f"malformed article database {self._path}")
        if not all(isinstance(a, dict) for a in data.get("articles") or []):
            raise StoreError(f"malformed article entry in {self._path}")
        return {
            "articles": list(data.get("articles") or []),
            "lastUpdated": data.get("lastUpdated"),
            "metadata": data.get("metadata") or {},
        }

    def load_articles(self) -> list[ArticleRecord]:
        return self.load()["articles"]

    def save(
        self,
        articles: list[ArticleRecord],
        *,
        new_count: int = 0,
        now: datetime.datetime | None = None,
    ) -> ArticleDatabase:
        now = now or utc_now()
        database: ArticleDatabase = {
            "articles": list(articles),
            "lastUpdated": to_iso_utc(now),
            "metadata": build_metadata(articles, new_count=new_count, now=now),
        }
        try:
            _atomic_write_json(self._path, database)
        except OSError as exc:
            raise StoreError(f"cannot write article database {self._path}: {exc}") from exc
        return database


def write_batch(path: str | os.PathLike[str], articles: list[ArticleRecord]) -> None:
    """이번 실행의 게시 목록(최신 배치)을 그대로 덮어쓴다."""
    try:
        _atomic_write_json(Path(path), list(articles))
    except OSError as exc:
        raise StoreError(f"cannot write batch file {path}: {exc}") from exc
