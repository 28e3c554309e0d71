"""
resynth.scoring - Score distribution post-processing.

Filters, ranks, normalizes and rounds classifier outputs before they are
attached to a speech record.
"""

from __future__ import annotations
