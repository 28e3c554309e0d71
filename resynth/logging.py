"""
resynth.logging - Centralized logging configuration.

Routes the package logger through rich so warnings render alongside the
CLI's console output. Verbose mode adds per-call provider details.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("resynth")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the resynth package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
