"""
resynth.io - JSON read/write helpers, atomic file writes.

Centralized I/O utilities for the speech input and the JSON collections.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Read JSON file with UTF-8 encoding.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON file with pretty formatting, replacing any existing file.

    The data is encoded before anything touches the disk, then written to a
    temp file in the destination directory and renamed over the target.

    Args:
        path: Destination path for JSON file
        data: Data to write
        indent: Indentation level for pretty printing (default: 2)

    Raises:
        TypeError: If data contains values JSON cannot encode
        ValueError: If data contains circular references
        OSError: If the file cannot be written
    """
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(content)
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def read_text(path: Path) -> str:
    """Read text file with UTF-8 encoding.

    Args:
        path: Path to text file

    Returns:
        File contents as string
    """
    with open(path, encoding="utf-8") as f:
        return f.read()
