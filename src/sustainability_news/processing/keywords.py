from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Hashable, Mapping, Sequence

from sustainability_news.core.constants import PILLAR_KEYWORDS, PILLARS, SDG_KEYWORDS


@dataclass(frozen=True)
class CompiledPhrase:
    phrase: str
    weight: int
    pattern: re.Pattern[str]

    def count(self, text: str) -> int:
        return len(self.pattern.findall(text))


def compile_phrase(phrase: str) -> CompiledPhrase:
    # 단어 사이 공백 개수는 무시하고, 단어 경계 안에서만 매칭
    words = phrase.lower().split()
    body = r"\s+".join(re.escape(w) for w in words)
    return CompiledPhrase(
        phrase=phrase.lower(),
        weight=max(1, len(words)),
        pattern=re.compile(rf"\b{body}\b", re.IGNORECASE),
    )


@dataclass(frozen=True)
class KeywordTable:
    """라벨 -> 컴파일된 구문 목록. 로드 후 변경하지 않는다."""

    entries: tuple[tuple[Hashable, tuple[CompiledPhrase, ...]], ...]

    @classmethod
    def build(cls, table: Mapping[Hashable, Sequence[str]]) -> "KeywordTable":
        entries = []
        for label, phrases in table.items():
            seen: set[str] = set()
            compiled: list[CompiledPhrase] = []
            for phrase in phrases:
                key = " ".join(phrase.lower().split())
                if not key or key in seen:
                    continue
                seen.add(key)
                compiled.append(compile_phrase(key))
            entries.append((label, tuple(compiled)))
        return cls(entries=tuple(entries))

    def score(self, text: str) -> tuple[dict[Hashable, int], int]:
        """라벨별 가중 점수와 전체 매칭 횟수를 반환.

        점수는 매칭 횟수 x 구문 단어 수, 매칭 횟수는 가중치 없이 합산한다.
        """
        scores: dict[Hashable, int] = {}
        total_matches = 0
        for label, phrases in self.entries:
            label_score = 0
            for phrase in phrases:
                matches = phrase.count(text)
                if matches:
                    label_score += matches * phrase.weight
                    total_matches += matches
            scores[label] = label_score
        return scores, total_matches


@dataclass(frozen=True)
class KeywordIndex:
    """분류에 쓰는 두 키워드 테이블 묶음. 모든 분류 작업이 공유한다."""

    pillars: KeywordTable
    sdgs: KeywordTable


def build_keyword_index(
    pillar_keywords: Mapping[str, Sequence[str]] | None = None,
    sdg_keywords: Mapping[int, Sequence[str]] | None = None,
) -> KeywordIndex:
    pillar_keywords = pillar_keywords if pillar_keywords is not None else PILLAR_KEYWORDS
    sdg_keywords = sdg_keywords if sdg_keywords is not None else SDG_KEYWORDS
    # 동점 처리 순서를 고정하기 위해 PILLARS 순서로 정렬
    ordered = {p: pillar_keywords.get(p, []) for p in PILLARS}
    for p, phrases in pillar_keywords.items():
        ordered.setdefault(p, phrases)
    return KeywordIndex(
        pillars=KeywordTable.build(ordered),
        sdgs=KeywordTable.build(dict(sorted(sdg_keywords.items()))),
    )
