from __future__ import annotations

import random
from dataclasses import asdict, dataclass

from sustainability_news.core.constants import (
    GOVERNANCE_RANGE,
    RATING_MAX,
    RATING_MIN,
    RATING_ZERO_FALLBACK,
)
from sustainability_news.models import E2SGRating
from sustainability_news.processing.classifier import ClassificationResult
from sustainability_news.processing.types import GovernanceFunc
from sustainability_news.utils import clamp, round_half_up


@dataclass(frozen=True)
class RatingVector:
    environmental: int
    economic: int
    social: int
    governance: int
    overall: float

    def to_dict(self) -> E2SGRating:
        return asdict(self)  # type: ignore[return-value]


def random_governance(low: int = GOVERNANCE_RANGE[0], high: int = GOVERNANCE_RANGE[1]) -> int:
    return random.randint(low, high)


class RatingSynthesizer:
    def __init__(
        self,
        *,
        governance_func: GovernanceFunc | None = None,
        max_sdgs: int = 3,
    ) -> None:
        # 거버넌스는 텍스트 신호가 없는 임시 휴리스틱. 테스트에서는 고정값을 주입한다.
        self._governance = governance_func or random_governance
        self._max_sdgs = max_sdgs

    def dimension_rating(self, score: int, total: int) -> int:
        value = int(round_half_up(score / total * 10)) if total else 0
        if not value:
            value = RATING_ZERO_FALLBACK
        return int(clamp(value, RATING_MIN, RATING_MAX))

    def rate(self, result: ClassificationResult) -> RatingVector:
        total = result.total_pillar_score
        scores = result.pillar_scores
        environmental = self.dimension_rating(scores.get("environmental", 0), total)
        economic = self.dimension_rating(scores.get("economic", 0), total)
        social = self.dimension_rating(scores.get("social", 0), total)
        governance = int(clamp(int(self._governance()), RATING_MIN, RATING_MAX))
        overall = round_half_up((environmental + economic + social + governance) / 4, 1)
        return RatingVector(
            environmental=environmental,
            economic=economic,
            social=social,
            governance=governance,
            overall=float(clamp(overall, RATING_MIN, RATING_MAX)),
        )

    def impact_score(self, result: ClassificationResult) -> int:
        sdg_count = min(self._max_sdgs, len(result.top_sdgs))
        raw = (
            result.confidence * 30
            + sdg_count * 2
            + result.top_sdg_score_sum() / 20
            + 2
        )
        return int(clamp(int(round_half_up(raw)), RATING_MIN, RATING_MAX))
