"""Tests for resynth.scoring.filters module."""

from __future__ import annotations

import pytest

from resynth.config import ScoreFilterOptions
from resynth.models import ScoredLabel
from resynth.scoring.filters import (
    dominant_label,
    filter_line_scores,
    normalize_label_text,
    round_score,
)


def scored(*pairs: tuple[str, float]) -> list[ScoredLabel]:
    return [ScoredLabel(label=label, score=score) for label, score in pairs]


def as_pairs(scores: list[ScoredLabel]) -> list[tuple[str, float]]:
    return [(s.label, s.score) for s in scores]


class TestRoundScore:
    def test_rounds_to_decimals(self) -> None:
        assert round_score(0.8443, 2) == 0.84

    def test_half_rounds_away_from_zero(self) -> None:
        assert round_score(0.125, 2) == 0.13
        assert round_score(-0.125, 2) == -0.13

    def test_half_at_zero_decimals(self) -> None:
        assert round_score(2.5, 0) == 3.0
        assert round_score(0.5, 0) == 1.0

    def test_zero(self) -> None:
        assert round_score(0.0, 2) == 0.0

    def test_largest_allowed_decimals(self) -> None:
        assert round_score(0.5, 15) == 0.5


class TestFilterLineScores:
    def test_worked_example(self, emotion_scores: list[ScoredLabel]) -> None:
        options = ScoreFilterOptions(threshold=0.1, max_count=2, normalize=True, round_decimals=2)

        result = filter_line_scores(emotion_scores, options)

        assert as_pairs(result) == [("joy", 0.85), ("sadness", 0.15)]
        assert sum(s.score for s in result) == pytest.approx(1.0)

    def test_without_normalization(self, emotion_scores: list[ScoredLabel]) -> None:
        options = ScoreFilterOptions(threshold=0.1, max_count=3, normalize=False, round_decimals=2)

        result = filter_line_scores(emotion_scores, options)

        assert as_pairs(result) == [("joy", 0.82), ("sadness", 0.15), ("fear", 0.12)]

    def test_threshold_is_inclusive(self) -> None:
        options = ScoreFilterOptions(threshold=0.1, max_count=5)

        result = filter_line_scores(scored(("a", 0.1), ("b", 0.09999)), options)

        assert as_pairs(result) == [("a", 0.1)]

    def test_every_score_meets_threshold(self, emotion_scores: list[ScoredLabel]) -> None:
        for threshold in (0.0, 0.05, 0.12, 0.5, 0.9):
            options = ScoreFilterOptions(threshold=threshold, max_count=10, round_decimals=4)
            result = filter_line_scores(emotion_scores, options)
            assert all(s.score >= threshold for s in result)

    def test_truncates_to_max_count(self, emotion_scores: list[ScoredLabel]) -> None:
        for max_count in range(0, 6):
            options = ScoreFilterOptions(threshold=0.0, max_count=max_count)
            assert len(filter_line_scores(emotion_scores, options)) <= max_count

    @pytest.mark.parametrize("max_count", [0, -1, -10])
    def test_non_positive_max_count_is_empty(
        self, emotion_scores: list[ScoredLabel], max_count: int
    ) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=max_count, normalize=True)
        assert filter_line_scores(emotion_scores, options) == []

    def test_larger_max_count_does_not_readmit_low_scores(
        self, emotion_scores: list[ScoredLabel]
    ) -> None:
        options = ScoreFilterOptions(threshold=0.1, max_count=100)

        result = filter_line_scores(emotion_scores, options)

        assert "anger" not in [s.label for s in result]
        assert len(result) == 3

    def test_sorted_descending(self) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=10, round_decimals=3)

        result = filter_line_scores(scored(("a", 0.1), ("b", 0.7), ("c", 0.2)), options)

        assert [s.label for s in result] == ["b", "c", "a"]

    def test_ties_keep_source_order(self) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=10)

        result = filter_line_scores(
            scored(("b", 0.3), ("a", 0.5), ("c", 0.3), ("d", 0.5)), options
        )

        assert [s.label for s in result] == ["a", "d", "b", "c"]

    def test_normalizes_after_truncation(self) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=2, normalize=True, round_decimals=3)

        result = filter_line_scores(scored(("a", 0.5), ("b", 0.3), ("c", 0.2)), options)

        assert as_pairs(result) == [("a", pytest.approx(0.625)), ("b", pytest.approx(0.375))]

    def test_normalized_sum_within_rounding_tolerance(self) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=3, normalize=True, round_decimals=2)

        result = filter_line_scores(scored(("a", 0.4), ("b", 0.4), ("c", 0.4)), options)

        assert [s.score for s in result] == [0.33, 0.33, 0.33]
        assert sum(s.score for s in result) == pytest.approx(1.0, abs=0.02)

    def test_normalize_with_zero_sum_keeps_scores(self) -> None:
        options = ScoreFilterOptions(threshold=0.0, max_count=3, normalize=True)

        result = filter_line_scores(scored(("a", 0.0), ("b", 0.0)), options)

        assert as_pairs(result) == [("a", 0.0), ("b", 0.0)]

    def test_empty_input(self) -> None:
        options = ScoreFilterOptions(normalize=True)
        assert filter_line_scores([], options) == []

    def test_all_filtered_out(self, emotion_scores: list[ScoredLabel]) -> None:
        options = ScoreFilterOptions(threshold=0.95, normalize=True)
        assert filter_line_scores(emotion_scores, options) == []

    def test_is_pure(self, emotion_scores: list[ScoredLabel]) -> None:
        original = list(emotion_scores)
        options = ScoreFilterOptions(threshold=0.1, max_count=2, normalize=True)

        first = filter_line_scores(emotion_scores, options)
        second = filter_line_scores(emotion_scores, options)

        assert first == second
        assert emotion_scores == original


class TestDominantLabel:
    def test_returns_maximum(self, sentiment_scores: list[ScoredLabel]) -> None:
        assert dominant_label(sentiment_scores) == ScoredLabel(label="Very Positive", score=0.44)

    def test_ties_return_first(self) -> None:
        result = dominant_label(scored(("A", 0.5), ("B", 0.5)))
        assert result.label == "A"

    def test_tie_after_lower_entries(self) -> None:
        result = dominant_label(scored(("low", 0.1), ("first", 0.6), ("second", 0.6)))
        assert result.label == "first"

    def test_empty_returns_zero_value(self) -> None:
        assert dominant_label([]) == ScoredLabel(label="", score=0.0)


class TestNormalizeLabelText:
    def test_lowercases_and_replaces_spaces(self) -> None:
        assert normalize_label_text("Very Positive") == "very_positive"

    def test_single_word(self) -> None:
        assert normalize_label_text("Neutral") == "neutral"

    def test_keeps_other_whitespace(self) -> None:
        assert normalize_label_text("Very\tPositive") == "very\tpositive"

    def test_keeps_punctuation(self) -> None:
        assert normalize_label_text("Not Sure?") == "not_sure?"

    def test_every_space_replaced(self) -> None:
        assert normalize_label_text("A  B") == "a__b"
