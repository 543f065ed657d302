from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from sustainability_news.core.constants import CONFIDENCE_HIGH, CONFIDENCE_MEDIUM, SDG_METADATA
from sustainability_news.models import ArticleRecord

_DIMENSIONS = ("environmental", "economic", "social", "governance")


@dataclass
class BatchSummary:
    total_found: int = 0
    published: int = 0
    new_articles: int = 0
    pillar_counts: dict[str, int] = field(default_factory=dict)
    average_e2sg: dict[str, float] = field(default_factory=dict)
    average_confidence: float = 0.0
    high_confidence: int = 0
    medium_confidence: int = 0
    top_sdgs: list[tuple[int, int]] = field(default_factory=list)


def summarize_batch(
    batch: list[ArticleRecord],
    *,
    total_found: int = 0,
    new_articles: int = 0,
    top_sdg_count: int = 5,
) -> BatchSummary:
    summary = BatchSummary(total_found=total_found, published=len(batch), new_articles=new_articles)
    if not batch:
        return summary

    summary.pillar_counts = dict(Counter(a.get("pillar", "") for a in batch))
    summary.average_e2sg = {
        dim: sum(float(a["e2sgRating"][dim]) for a in batch) / len(batch) for dim in _DIMENSIONS
    }
    confidences = [float(a.get("confidence") or 0.0) for a in batch]
    summary.average_confidence = sum(confidences) / len(confidences)
    summary.high_confidence = sum(1 for c in confidences if c > CONFIDENCE_HIGH)
    summary.medium_confidence = sum(1 for c in confidences if CONFIDENCE_MEDIUM < c <= CONFIDENCE_HIGH)

    sdg_counter: Counter[int] = Counter()
    for article in batch:
        for ref in article.get("sdgs") or []:
            sdg_counter[int(ref["id"])] += 1
    # 빈도 내림차순, 같으면 SDG 번호 오름차순
    summary.top_sdgs = sorted(sdg_counter.items(), key=lambda kv: (-kv[1], kv[0]))[:top_sdg_count]
    return summary


def format_report(summary: BatchSummary) -> list[str]:
    lines = [
        "📊 수집 요약",
        f"  전체 후보 기사: {summary.total_found}",
        f"  게시 기사: {summary.published}",
        f"  신규 저장: {summary.new_articles}",
    ]
    if not summary.published:
        return lines

    lines.append("📈 pillar 분포")
    for pillar, count in sorted(summary.pillar_counts.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"  {pillar}: {count}")

    lines.append("🎯 평균 E2SG")
    for dim in _DIMENSIONS:
        lines.append(f"  {dim.capitalize()}: {summary.average_e2sg.get(dim, 0.0):.1f}/10")

    lines.append("🔍 신뢰도")
    lines.append(f"  평균: {summary.average_confidence * 100:.1f}%")
    lines.append(f"  높음(>{CONFIDENCE_HIGH * 100:.0f}%): {summary.high_confidence}")
    lines.append(
        f"  보통({CONFIDENCE_MEDIUM * 100:.0f}-{CONFIDENCE_HIGH * 100:.0f}%): {summary.medium_confidence}"
    )

    if summary.top_sdgs:
        lines.append("🌍 상위 SDG")
        for sdg_id, count in summary.top_sdgs:
            title = SDG_METADATA.get(sdg_id, {}).get("title") or f"SDG {sdg_id}"
            lines.append(f"  SDG {sdg_id} ({title}): {count}")
    return lines
