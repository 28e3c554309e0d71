"""
resynth.scoring.filters - Score post-processing.

Pure functions over lists of ScoredLabel: threshold filter, stable
descending sort, top-K truncation, optional renormalization and rounding.
No I/O.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from resynth.config import ScoreFilterOptions
from resynth.models import ScoredLabel


def round_score(score: float, decimals: int) -> float:
    """Round half away from zero to a fixed number of decimal places.

    Args:
        score: Value to round
        decimals: Number of decimal places

    Returns:
        Rounded value (0.125 -> 0.13, -0.125 -> -0.13 at 2 places)
    """
    multiplier = 10**decimals
    scaled = score * multiplier
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / multiplier


def filter_line_scores(
    scores: Sequence[ScoredLabel],
    options: ScoreFilterOptions,
) -> list[ScoredLabel]:
    """Clean, rank and round one line's score distribution.

    Order of operations is fixed: the threshold is applied before truncation,
    and normalization divides by the sum of the truncated set, so the
    normalized values depend on max_count. Rounding happens last and the
    rounded values may not sum to exactly 1.0.

    Args:
        scores: Raw scores from the provider
        options: Threshold, max count, normalize flag and decimals

    Returns:
        New list sorted by descending score; ties keep their source order
    """
    if options.max_count <= 0:
        return []

    kept = [s for s in scores if s.score >= options.threshold]
    kept = sorted(kept, key=lambda s: s.score, reverse=True)[: options.max_count]

    values = [s.score for s in kept]
    if options.normalize and values:
        total = sum(values)
        if total > 0:
            values = [v / total for v in values]

    return [
        ScoredLabel(label=s.label, score=round_score(v, options.round_decimals))
        for s, v in zip(kept, values)
    ]


def dominant_label(scores: Sequence[ScoredLabel]) -> ScoredLabel:
    """Return the highest-scoring entry, the first one on ties.

    An empty input yields ScoredLabel(label="", score=0.0).
    """
    if not scores:
        return ScoredLabel(label="", score=0.0)

    dominant = scores[0]
    for candidate in scores[1:]:
        if candidate.score > dominant.score:
            dominant = candidate
    return dominant


def normalize_label_text(label: str) -> str:
    """Lowercase a label and replace spaces with underscores.

    "Very Positive" -> "very_positive". Tabs and punctuation are untouched.
    """
    return label.lower().replace(" ", "_")
