"""
resynth.metadata - Speech metadata from file names.

Input files are named "Speaker Name-Event Name-DD.MM.YYYY.txt", e.g.
"Kwame Nkrumah-Ghana Independence Day-06.03.1957.txt". Events may contain
hyphens; the first part is always the speaker and the last the date.
"""

from __future__ import annotations

from pathlib import Path

from resynth.models import SpeechMetadata


def parse_metadata_from_filename(path: Path | str) -> SpeechMetadata:
    """Extract speaker, event and date from a speech file name.

    Args:
        path: Path or bare file name of the speech

    Returns:
        SpeechMetadata; fields the name does not carry are empty strings
    """
    base = Path(path).name
    base = base.removesuffix(".txt")
    parts = base.split("-")

    if len(parts) >= 3:
        return SpeechMetadata(
            speaker=parts[0].strip(),
            event="-".join(parts[1:-1]).strip(),
            date=parts[-1].strip(),
        )
    if len(parts) == 2:
        return SpeechMetadata(speaker=parts[0].strip(), event=parts[1].strip())
    return SpeechMetadata(event=parts[0].strip())
