"""
resynth.exceptions - Custom exception classes.

All Resynth-specific exceptions inherit from ResynthError.
"""


class ResynthError(Exception):
    """Base exception for all Resynth errors."""

    pass


class ConfigError(ResynthError):
    """Configuration loading or validation error."""

    pass


class InputError(ResynthError):
    """Speech input file is unreadable or has no content."""

    pass


class ProviderError(ResynthError):
    """Scoring provider failed (network, auth, bad response, empty result)."""

    pass


class SerializationError(ResynthError):
    """Record could not be encoded as JSON."""

    pass
