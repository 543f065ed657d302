from __future__ import annotations

import datetime
import re
import zlib
from typing import Callable, Mapping, Sequence
from urllib.parse import urljoin, urlparse

from sustainability_news.core.constants import (
    DEFAULT_REGION,
    MAX_TAGS,
    PILLAR_IMAGES,
    REGION_KEYWORDS,
    SDG_METADATA,
    SDG_TAG_LIMIT,
    SUMMARY_MAX_CHARS,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
    WORDS_PER_MINUTE,
)
from sustainability_news.models import ArticleRecord, SdgRef
from sustainability_news.processing.classifier import ClassificationResult
from sustainability_news.processing.rating import RatingVector
from sustainability_news.processing.types import RawCandidate
from sustainability_news.utils import (
    clean_text,
    estimate_read_time_minutes,
    parse_datetime_utc,
    slugify_source,
    to_iso_utc,
    truncate,
    utc_now,
)


def resolve_link(link: str, base_url: str) -> str | None:
    """상대 링크를 baseUrl 기준으로 절대 URL로 만들고, http(s) 절대 URL이 아니면 None."""
    link = (link or "").strip()
    if not link:
        return None
    try:
        full = urljoin(base_url.rstrip("/") + "/", link) if base_url else link
        parsed = urlparse(full)
    except ValueError:
        return None
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        return None
    return full


def build_tags(pillar: str, sdgs: Sequence[int]) -> list[str]:
    tags = [pillar, "sustainability"]
    tags += [f"sdg-{sdg_id}" for sdg_id in list(sdgs)[:SDG_TAG_LIMIT]]
    tags.append("news")
    return tags[:MAX_TAGS]


def build_sdg_refs(sdgs: Sequence[int]) -> list[SdgRef]:
    refs: list[SdgRef] = []
    for sdg_id in sdgs:
        meta = SDG_METADATA.get(sdg_id, {})
        refs.append({
            "id": sdg_id,
            "title": meta.get("title") or f"SDG {sdg_id}",
            "description": meta.get("description", ""),
            "color": meta.get("color", "#3B82F6"),
            "icon": meta.get("icon", "Target"),
        })
    return refs


def pick_image(pillar: str, source_url: str) -> str:
    images = PILLAR_IMAGES.get(pillar) or PILLAR_IMAGES["environmental"]
    return images[zlib.crc32(source_url.encode("utf-8")) % len(images)]


class RegionInferrer:
    """제목+요약에서 지역 키워드를 찾아 지역을 추정. 정의 순서상 첫 매칭이 우선."""

    def __init__(
        self,
        region_keywords: Mapping[str, Sequence[str]] | None = None,
        default_region: str = DEFAULT_REGION,
    ) -> None:
        self._default = default_region
        self._patterns: list[tuple[str, re.Pattern[str]]] = []
        for region, keywords in (region_keywords or REGION_KEYWORDS).items():
            alternatives = "|".join(
                r"\s+".join(re.escape(w) for w in kw.lower().split())
                for kw in keywords
                if kw.strip()
            )
            if alternatives:
                self._patterns.append((region, re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)))

    def infer(self, title: str, summary: str) -> str:
        text = f"{title} {summary}".lower()
        for region, pattern in self._patterns:
            if pattern.search(text):
                return region
        return self._default


class ArticleAssembler:
    def __init__(
        self,
        *,
        min_confidence: float = 0.02,
        region_inferrer: RegionInferrer | None = None,
        now_provider: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        self._min_confidence = min_confidence
        self._region = region_inferrer or RegionInferrer()
        self._now_provider = now_provider or utc_now

    def prepare_title(self, candidate: RawCandidate) -> str | None:
        title = clean_text(candidate.get("title") or "")
        if len(title) < TITLE_MIN_CHARS:
            return None
        return title

    def prepare_summary(self, candidate: RawCandidate, title: str) -> str:
        return clean_text(candidate.get("summary") or "") or title

    def is_acceptable(self, candidate: RawCandidate) -> bool:
        """분류 전에 걸러낼 수 있는 형식 오류(제목/링크) 검사."""
        if self.prepare_title(candidate) is None:
            return False
        return resolve_link(candidate.get("link") or "", candidate.get("baseUrl") or "") is not None

    def analysis_text(self, candidate: RawCandidate) -> str:
        title = clean_text(candidate.get("title") or "")
        summary = self.prepare_summary(candidate, title)
        return f"{title} {summary} {summary}"

    def assemble(
        self,
        candidate: RawCandidate,
        result: ClassificationResult | None,
        rating: RatingVector,
        impact_score: int,
        *,
        index: int = 0,
        now: datetime.datetime | None = None,
    ) -> ArticleRecord | None:
        if result is None or result.total_matches < 1 or result.confidence < self._min_confidence:
            return None
        title = self.prepare_title(candidate)
        if title is None:
            return None
        source_url = resolve_link(candidate.get("link") or "", candidate.get("baseUrl") or "")
        if source_url is None:
            return None

        now = now or self._now_provider()
        source_name = clean_text(candidate.get("sourceName") or "") or "Unknown"
        summary_full = self.prepare_summary(candidate, title)
        summary = truncate(summary_full, SUMMARY_MAX_CHARS)
        published_dt = parse_datetime_utc(candidate.get("publishedAt") or "")
        sdgs = list(result.top_sdgs)

        return {
            "id": f"{slugify_source(source_name)}-{int(now.timestamp() * 1000)}-{index}",
            "title": truncate(title, TITLE_MAX_CHARS),
            "summary": summary,
            "content": summary,
            "author": source_name,
            "source": source_name,
            "sourceUrl": source_url,
            "publishedAt": to_iso_utc(published_dt or now),
            "scrapedAt": to_iso_utc(now),
            "imageUrl": pick_image(result.dominant_pillar, source_url),
            "pillar": result.dominant_pillar,
            "sdgs": build_sdg_refs(sdgs),
            "tags": build_tags(result.dominant_pillar, sdgs),
            "readTime": estimate_read_time_minutes(summary_full, WORDS_PER_MINUTE),
            "impactScore": int(impact_score),
            "e2sgRating": rating.to_dict(),
            "region": self._region.infer(title, summary),
            "confidence": result.confidence,
        }
