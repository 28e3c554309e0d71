"""
Resynth - speech emotion and sentiment extractor.

Takes plain-text speech transcripts and produces JSON collections through a
short pipeline: line splitting → per-line emotion scoring → whole-speech
sentiment scoring → score filtering → append to a JSON array on disk.
"""

__version__ = "0.1.0"
