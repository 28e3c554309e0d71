"""
resynth.models - Speech record data model and output projections.

Records are frozen once built. The two on-disk collections (per-line
emotions and whole-speech sentiment) are projections of one SpeechRecord.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class ScoredLabel(BaseModel):
    """A (label, confidence score) pair returned by a text classifier."""

    model_config = ConfigDict(frozen=True)

    label: str
    score: float


class LineResult(BaseModel):
    """Filtered emotion scores for one line of a speech."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    scores: tuple[ScoredLabel, ...] = Field(default=(), alias="emotionScores")


class SentimentResult(BaseModel):
    """Dominant sentiment of a whole speech."""

    model_config = ConfigDict(frozen=True)

    label: str = ""
    score: float = 0.0


class SpeechMetadata(BaseModel):
    """Speaker, event and date attached to a speech verbatim."""

    model_config = ConfigDict(frozen=True)

    speaker: str = ""
    event: str = ""
    date: str = ""


class SpeechRecord(BaseModel):
    """Everything extracted from one speech file."""

    model_config = ConfigDict(frozen=True)

    metadata: SpeechMetadata = Field(default_factory=SpeechMetadata)
    lines: tuple[LineResult, ...] = ()
    sentiment: SentimentResult = Field(default_factory=SentimentResult)


def emotion_projection(record: SpeechRecord) -> dict[str, Any]:
    """Project a record onto the per-line emotion collection schema."""
    return {
        **record.metadata.model_dump(),
        "lines": [line.model_dump(mode="json", by_alias=True) for line in record.lines],
    }


def sentiment_projection(record: SpeechRecord) -> dict[str, Any]:
    """Project a record onto the sentiment collection schema."""
    return {
        **record.metadata.model_dump(),
        "sentiment": record.sentiment.label,
        "sentimentScore": record.sentiment.score,
    }


Projection = Callable[[SpeechRecord], dict[str, Any]]

PROJECTIONS: dict[str, Projection] = {
    "emotion": emotion_projection,
    "sentiment": sentiment_projection,
}
