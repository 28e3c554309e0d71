"""
resynth.store - Append-only JSON array collections.

Each output file holds a JSON array of records grown by read-modify-write.
There is no deduplication and no record key: running the same speech twice
stores it twice. A single writer is assumed; no file locking is done.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from resynth.exceptions import SerializationError
from resynth.io import read_json, write_json
from resynth.logging import logger

Record = dict[str, Any]


def load_collection(path: Path) -> list[Record]:
    """Load a persisted collection, recovering from a missing or bad file.

    A missing file yields an empty list. A file that is not a JSON array is
    reported with a warning and also yields an empty list; its content is
    lost on the next save.

    Args:
        path: Collection file

    Returns:
        Previously written records in insertion order
    """
    if not path.exists():
        logger.info("No existing file found, creating new %s", path)
        return []

    try:
        data = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Could not parse existing JSON file %s, starting fresh: %s", path, e)
        return []

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        logger.warning(
            "Existing file %s does not contain a JSON array of records, starting fresh", path
        )
        return []

    logger.info("Found %d existing record(s) in %s", len(data), path)
    return data


def append_and_save(path: Path, existing: Sequence[Record], record: Record) -> list[Record]:
    """Append a record to a collection and rewrite the whole file.

    Args:
        path: Collection file to overwrite
        existing: Records loaded from the file
        record: New record, appended last

    Returns:
        The full collection as written

    Raises:
        SerializationError: If the collection cannot be encoded as JSON
        OSError: If the file cannot be written
    """
    collection = [*existing, record]
    try:
        write_json(path, collection, indent=2)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode collection for {path}: {e}") from e
    logger.info("Appended record to %s (now contains %d record(s))", path, len(collection))
    return collection


class AppendingJSONStore:
    """One JSON array collection on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Record]:
        return load_collection(self.path)

    def append(self, record: Record) -> list[Record]:
        """Load the current collection, append the record and save it."""
        return append_and_save(self.path, self.load(), record)
