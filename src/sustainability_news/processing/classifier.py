from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from sustainability_news.core.constants import PILLAR_DEFAULT_SDGS, PILLARS
from sustainability_news.processing.keywords import KeywordIndex
from sustainability_news.utils import normalize_for_matching, word_count

_DENSITY_BONUS_DIVISOR = 50  # 절대 매칭 수 보너스: total / 50


@dataclass(frozen=True)
class ClassificationResult:
    dominant_pillar: str
    pillar_scores: Mapping[str, int]
    sdg_scores: Mapping[int, int]
    top_sdgs: tuple[int, ...]
    confidence: float
    total_matches: int
    word_count: int = 0
    used_fallback_sdgs: bool = field(default=False)

    def __post_init__(self) -> None:
        # 점수 맵은 읽기 전용
        object.__setattr__(self, "pillar_scores", MappingProxyType(dict(self.pillar_scores)))
        object.__setattr__(self, "sdg_scores", MappingProxyType(dict(self.sdg_scores)))
        object.__setattr__(self, "top_sdgs", tuple(self.top_sdgs))

    @property
    def total_pillar_score(self) -> int:
        return sum(self.pillar_scores.values())

    def top_sdg_score_sum(self) -> int:
        return sum(self.sdg_scores.get(sdg_id, 0) for sdg_id in self.top_sdgs)


class TextClassifier:
    """키워드 테이블로 텍스트를 pillar/SDG에 매핑한다.

    분류할 신호가 부족하면 예외 대신 None을 반환하며, 호출 측은 해당 후보를 건너뛴다.
    """

    def __init__(
        self,
        *,
        keyword_index: KeywordIndex,
        min_word_count: int = 10,
        min_confidence: float = 0.02,
        max_sdgs: int = 3,
        fallback_sdg_count: int = 2,
        pillar_default_sdgs: Mapping[str, Sequence[int]] | None = None,
    ) -> None:
        self._index = keyword_index
        self._min_word_count = min_word_count
        self._min_confidence = min_confidence
        self._max_sdgs = max(1, max_sdgs)
        self._fallback_sdg_count = max(1, fallback_sdg_count)
        self._pillar_default_sdgs = {
            k: tuple(v) for k, v in (pillar_default_sdgs or PILLAR_DEFAULT_SDGS).items()
        }

    def compute_confidence(self, total_matches: int, words: int) -> float:
        if words <= 0:
            return 0.0
        density = total_matches / words
        return min(1.0, density + total_matches / _DENSITY_BONUS_DIVISOR)

    def pick_dominant_pillar(self, pillar_scores: Mapping[str, int]) -> str:
        dominant = None
        best = -1
        for pillar, score in pillar_scores.items():
            # 동점이면 먼저 나온 pillar 유지
            if score > best:
                dominant, best = pillar, score
        return dominant or PILLARS[0]

    def rank_sdgs(self, sdg_scores: Mapping[int, int]) -> list[int]:
        scored = [(sdg_id, score) for sdg_id, score in sdg_scores.items() if score > 0]
        scored.sort(key=lambda x: (-x[1], x[0]))
        return [sdg_id for sdg_id, _ in scored[: self._max_sdgs]]

    def fallback_sdgs(self, pillar: str) -> list[int]:
        defaults = self._pillar_default_sdgs.get(pillar, ())
        return list(defaults[: min(self._fallback_sdg_count, self._max_sdgs)])

    def classify(self, text: str) -> ClassificationResult | None:
        normalized = normalize_for_matching(text)
        words = word_count(normalized)
        if words < self._min_word_count:
            return None

        pillar_scores, total_matches = self._index.pillars.score(normalized)
        confidence = self.compute_confidence(total_matches, words)
        if confidence < self._min_confidence or total_matches < 1:
            return None
        if sum(pillar_scores.values()) == 0:
            return None

        dominant = self.pick_dominant_pillar(pillar_scores)

        raw_sdg_scores, _ = self._index.sdgs.score(normalized)
        sdg_scores = {int(k): v for k, v in raw_sdg_scores.items() if v > 0}
        top_sdgs = self.rank_sdgs(sdg_scores)
        used_fallback = False
        if not top_sdgs:
            top_sdgs = self.fallback_sdgs(dominant)
            used_fallback = True

        return ClassificationResult(
            dominant_pillar=dominant,
            pillar_scores={str(k): v for k, v in pillar_scores.items()},
            sdg_scores=sdg_scores,
            top_sdgs=tuple(top_sdgs),
            confidence=confidence,
            total_matches=total_matches,
            word_count=words,
            used_fallback_sdgs=used_fallback,
        )
