"""
resynth.provider.base - Scoring provider interface.
"""

from __future__ import annotations

from typing import Protocol

from resynth.models import ScoredLabel


class ScoringProvider(Protocol):
    """Anything that can classify text into (label, score) pairs.

    Both methods return a non-empty list or raise ProviderError.
    """

    def score_line(self, text: str) -> list[ScoredLabel]:
        """Per-line emotion classification."""
        ...

    def score_text(self, text: str) -> list[ScoredLabel]:
        """Whole-text sentiment classification."""
        ...
