from __future__ import annotations

import pytest

from sustainability_news.processing.classifier import TextClassifier
from sustainability_news.processing.keywords import KeywordTable, build_keyword_index, compile_phrase

MIXED_TEXT = "Solar power and renewable energy investment drives sustainable economic growth in green finance"
FALLBACK_TEXT = "the company launched an eco-friendly packaging line for its stores this month"
TIE_TEXT = "the report links climate change with human rights across many regions today"


def _build_classifier(**overrides) -> TextClassifier:
    params = dict(
        keyword_index=build_keyword_index(),
        min_word_count=10,
        min_confidence=0.02,
        max_sdgs=3,
        fallback_sdg_count=2,
    )
    params.update(overrides)
    return TextClassifier(**params)


def test_compile_phrase_weight_and_word_boundaries() -> None:
    phrase = compile_phrase("Renewable Energy")
    assert phrase.weight == 2
    assert phrase.count("renewable\n  energy and renewable energy") == 2
    assert compile_phrase("power").count("a powerful plant") == 0
    assert compile_phrase("power").count("solar power") == 1


def test_keyword_table_weights_by_phrase_length() -> None:
    table = KeywordTable.build({"a": ["green finance", "investment", "investment"], "b": ["poverty"]})
    scores, total = table.score("green finance and investment plus more investment")
    assert scores == {"a": 4, "b": 0}
    assert total == 3


def test_classify_mixed_energy_finance_text() -> None:
    result = _build_classifier().classify(MIXED_TEXT)
    assert result is not None
    assert dict(result.pillar_scores) == {"environmental": 4, "social": 0, "economic": 5}
    assert result.dominant_pillar == "economic"
    assert result.total_matches == 5
    assert result.word_count == 13
    assert result.confidence == pytest.approx(5 / 13 + 5 / 50)
    assert dict(result.sdg_scores) == {7: 5, 8: 2}
    assert result.top_sdgs == (7, 8)
    assert result.used_fallback_sdgs is False


def test_classify_rejects_short_text() -> None:
    assert _build_classifier().classify("renewable energy climate change") is None


def test_classify_rejects_text_without_keywords() -> None:
    text = "the cat sat on the mat and looked out of the window for a while"
    assert _build_classifier().classify(text) is None


def test_classify_rejects_low_confidence() -> None:
    classifier = _build_classifier(min_confidence=0.5)
    assert classifier.classify(FALLBACK_TEXT) is None


def test_fallback_sdgs_when_no_sdg_keyword_matches() -> None:
    result = _build_classifier().classify(FALLBACK_TEXT)
    assert result is not None
    assert result.dominant_pillar == "environmental"
    assert dict(result.sdg_scores) == {}
    assert result.top_sdgs == (13, 14)
    assert result.used_fallback_sdgs is True
    assert result.confidence == pytest.approx(1 / 12 + 1 / 50)


def test_fallback_table_is_configurable() -> None:
    classifier = _build_classifier(pillar_default_sdgs={"environmental": (15,)}, fallback_sdg_count=3)
    result = classifier.classify(FALLBACK_TEXT)
    assert result is not None
    assert result.top_sdgs == (15,)


def test_pillar_tie_keeps_first_in_order() -> None:
    result = _build_classifier().classify(TIE_TEXT)
    assert result is not None
    assert result.pillar_scores["environmental"] == result.pillar_scores["social"] == 2
    assert result.dominant_pillar == "environmental"
    assert result.top_sdgs == (13,)


def test_top_sdgs_capped_and_ordered_by_score_then_id() -> None:
    classifier = _build_classifier(max_sdgs=3)
    assert classifier.rank_sdgs({4: 1, 2: 3, 9: 3, 1: 0, 6: 2}) == [2, 9, 6]


def test_confidence_is_capped_at_one() -> None:
    assert _build_classifier().compute_confidence(60, 10) == 1.0
    assert _build_classifier().compute_confidence(0, 0) == 0.0


def test_result_scores_are_read_only() -> None:
    result = _build_classifier().classify(MIXED_TEXT)
    assert result is not None
    with pytest.raises(TypeError):
        result.pillar_scores["social"] = 99
    with pytest.raises(TypeError):
        result.sdg_scores[1] = 5
    assert result.pillar_scores["social"] == 0


def test_short_keywords_do_not_match_inside_longer_words() -> None:
    index = build_keyword_index()
    scores, _ = index.sdgs.score("new research on coastal erosion")
    assert scores[14] == 0
    scores, _ = index.sdgs.score("the sea level keeps rising")
    assert scores[14] == 1
