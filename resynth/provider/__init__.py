"""
resynth.provider - Text classification scoring providers.

Defines the ScoringProvider interface the pipeline depends on and the
Hugging Face inference API client that implements it.
"""

from __future__ import annotations
