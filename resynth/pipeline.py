"""
resynth.pipeline - Speech extraction pipeline.

Splits a transcript into lines, scores each line and the whole speech with a
ScoringProvider, filters the scores and appends the projected record to a
JSON collection. Calls are strictly sequential and the first provider
failure aborts the run before anything is written.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from resynth.config import ScoreFilterOptions
from resynth.exceptions import InputError, ProviderError
from resynth.io import read_text
from resynth.logging import logger
from resynth.metadata import parse_metadata_from_filename
from resynth.models import (
    LineResult,
    Projection,
    SentimentResult,
    SpeechMetadata,
    SpeechRecord,
)
from resynth.provider.base import ScoringProvider
from resynth.scoring.filters import (
    dominant_label,
    filter_line_scores,
    normalize_label_text,
    round_score,
)
from resynth.store import AppendingJSONStore, Record


class SpeechAnalysis(BaseModel):
    """Scored lines and overall sentiment of one speech."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[LineResult, ...]
    sentiment: SentimentResult


class ExtractionResult(BaseModel):
    """Outcome of extracting one speech into a collection."""

    model_config = ConfigDict(frozen=True)

    record: SpeechRecord
    projected: Record
    collection_size: int


def parse_lines(content: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in content.split("\n") if line.strip()]


def process_speech(
    lines: list[str],
    provider: ScoringProvider,
    options: ScoreFilterOptions,
    score_lines: bool = True,
) -> SpeechAnalysis:
    """Score every line and the whole speech.

    Args:
        lines: Speech lines; blank ones are skipped
        provider: Scoring provider
        options: Per-line filter options; round_decimals also rounds the
            sentiment score
        score_lines: If False, skip per-line emotion calls

    Returns:
        SpeechAnalysis with filtered line scores and the dominant sentiment

    Raises:
        ProviderError: If any provider call fails
    """
    results: list[LineResult] = []

    if score_lines:
        for line in lines:
            if not line.strip():
                continue
            try:
                scores = provider.score_line(line)
            except ProviderError as e:
                raise ProviderError(f"Failed to get emotions for line '{line}': {e}") from e
            results.append(LineResult(text=line, scores=filter_line_scores(scores, options)))
            logger.debug("Scored line %d/%d", len(results), len(lines))

    try:
        sentiment_scores = provider.score_text(" ".join(lines))
    except ProviderError as e:
        raise ProviderError(f"Failed to get sentiment: {e}") from e

    sentiment = SentimentResult()
    if sentiment_scores:
        dominant = dominant_label(sentiment_scores)
        sentiment = SentimentResult(
            label=normalize_label_text(dominant.label),
            score=round_score(dominant.score, options.round_decimals),
        )

    return SpeechAnalysis(lines=tuple(results), sentiment=sentiment)


def build_record(analysis: SpeechAnalysis, metadata: SpeechMetadata) -> SpeechRecord:
    """Attach metadata to an analysis."""
    return SpeechRecord(metadata=metadata, lines=analysis.lines, sentiment=analysis.sentiment)


def extract_speech(
    input_path: Path,
    provider: ScoringProvider,
    options: ScoreFilterOptions,
    store: AppendingJSONStore,
    projection: Projection,
    score_lines: bool = True,
) -> ExtractionResult:
    """Run the full pipeline for one speech file.

    Args:
        input_path: Speech transcript; its name carries the metadata
        provider: Scoring provider
        options: Per-line filter options
        store: Collection to append to
        projection: Maps the record onto the collection's schema
        score_lines: If False, skip per-line emotion calls

    Returns:
        ExtractionResult with the record and the new collection size

    Raises:
        InputError: If the file cannot be read or has no content
        ProviderError: If scoring fails (nothing is written)
    """
    try:
        content = read_text(input_path)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Error reading input file {input_path}: {e}") from e

    lines = parse_lines(content)
    if not lines:
        raise InputError(f"No content found in input file {input_path}")

    logger.info("Processing speech from %s (%d lines)", input_path, len(lines))
    analysis = process_speech(lines, provider, options, score_lines=score_lines)

    record = build_record(analysis, parse_metadata_from_filename(input_path))
    projected = projection(record)
    collection = store.append(projected)

    return ExtractionResult(record=record, projected=projected, collection_size=len(collection))
