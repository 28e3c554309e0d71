"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from resynth.exceptions import ProviderError
from resynth.models import ScoredLabel


class FakeProvider:
    """In-memory scoring provider that records every call."""

    def __init__(
        self,
        line_scores: dict[str, list[ScoredLabel]] | None = None,
        text_scores: list[ScoredLabel] | None = None,
        fail_on: str | None = None,
    ) -> None:
        self.line_scores = line_scores or {}
        self.text_scores = text_scores if text_scores is not None else []
        self.fail_on = fail_on
        self.calls: list[tuple[str, str]] = []

    def score_line(self, text: str) -> list[ScoredLabel]:
        self.calls.append(("line", text))
        if text == self.fail_on:
            raise ProviderError("API returned status 503: model loading")
        return self.line_scores.get(text, [ScoredLabel(label="neutral", score=0.9)])

    def score_text(self, text: str) -> list[ScoredLabel]:
        self.calls.append(("text", text))
        if self.fail_on == "<sentiment>":
            raise ProviderError("API returned status 401: unauthorized")
        return self.text_scores


def labels(pairs: list[tuple[str, float]]) -> list[ScoredLabel]:
    return [ScoredLabel(label=label, score=score) for label, score in pairs]


@pytest.fixture
def emotion_scores() -> list[ScoredLabel]:
    """Raw per-line emotion distribution from the classifier."""
    return labels([("joy", 0.82), ("anger", 0.05), ("sadness", 0.15), ("fear", 0.12)])


@pytest.fixture
def sentiment_scores() -> list[ScoredLabel]:
    """Raw whole-speech sentiment distribution."""
    return labels(
        [
            ("Very Negative", 0.02),
            ("Negative", 0.05),
            ("Neutral", 0.18),
            ("Positive", 0.31),
            ("Very Positive", 0.44),
        ]
    )


@pytest.fixture
def fake_provider(
    emotion_scores: list[ScoredLabel], sentiment_scores: list[ScoredLabel]
) -> FakeProvider:
    return FakeProvider(
        line_scores={"We are free at last.": emotion_scores},
        text_scores=sentiment_scores,
    )


@pytest.fixture
def speech_file(tmp_path: Path) -> Path:
    """Create a speech file named with speaker, event and date."""
    path = tmp_path / "Kwame Nkrumah-Ghana Independence Day-06.03.1957.txt"
    path.write_text(
        "At long last, the battle has ended.\n"
        "\n"
        "   We are free at last.   \n"
        "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_emotion_record() -> dict:
    """Return a sample emotion collection record."""
    return {
        "speaker": "Kwame Nkrumah",
        "event": "Ghana Independence Day",
        "date": "06.03.1957",
        "lines": [
            {
                "text": "We are free at last.",
                "emotionScores": [
                    {"label": "joy", "score": 0.82},
                    {"label": "sadness", "score": 0.15},
                ],
            }
        ],
    }


@pytest.fixture
def provider_factory() -> type[FakeProvider]:
    """Return the fake provider class for tests that need custom responses."""
    return FakeProvider
