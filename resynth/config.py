"""
resynth.config - YAML config loading, provider settings, validation.

Handles loading resynth.yaml from the working directory, reading the
inference API token from the environment (or a .env file), and validating
all parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resynth.exceptions import ConfigError

CONFIG_FILENAME = "resynth.yaml"

HF_API_BASE_URL = "https://router.huggingface.co/hf-inference/models"
TEXT_EMOTION_MODEL = "j-hartmann/emotion-english-distilroberta-base"
SENTIMENT_MODEL = "tabularisai/multilingual-sentiment-analysis"


class ScoreFilterOptions(BaseModel):
    """Immutable options for per-line score post-processing."""

    model_config = ConfigDict(frozen=True)

    threshold: float = 0.1
    max_count: int = 3
    normalize: bool = False
    round_decimals: int = Field(default=2, ge=0, le=15)


class ProviderConfig(BaseModel):
    """Inference endpoint and request limits."""

    base_url: str = HF_API_BASE_URL
    emotion_model: str = TEXT_EMOTION_MODEL
    sentiment_model: str = SENTIMENT_MODEL
    timeout: float = 30.0
    max_chars: int = 2000

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("max_chars")
    @classmethod
    def validate_max_chars(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_chars must be positive")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v.rstrip("/")


class ExtractorConfig(BaseModel):
    """Resolved configuration for an extraction run."""

    emotion_output: Path = Path("speeches.json")
    sentiment_output: Path = Path("sentiments.json")

    filters: ScoreFilterOptions = Field(default_factory=ScoreFilterOptions)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)


class ProviderSettings(BaseSettings):
    """Secrets read from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    hf_token: str = ""


def load_api_token() -> str:
    """Return the inference API token, failing if it is not set."""
    token = ProviderSettings().hf_token
    if not token:
        raise ConfigError("HF_TOKEN environment variable is required")
    return token


def load_config(config_dir: Path | None = None) -> ExtractorConfig:
    """Load and validate resynth.yaml, falling back to defaults if absent."""
    config_file = (config_dir or Path.cwd()) / CONFIG_FILENAME
    if not config_file.exists():
        return ExtractorConfig()

    try:
        with open(config_file, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_file}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    try:
        return ExtractorConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e


def merge_filter_options(
    base: ScoreFilterOptions,
    threshold: float | None = None,
    max_count: int | None = None,
    normalize: bool | None = None,
    round_decimals: int | None = None,
) -> ScoreFilterOptions:
    """Apply command-line overrides on top of configured filter options."""
    overrides = {
        "threshold": threshold,
        "max_count": max_count,
        "normalize": normalize,
        "round_decimals": round_decimals,
    }
    merged = base.model_dump()
    merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ScoreFilterOptions(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid filter options: {e}") from e


def create_default_config() -> dict[str, Any]:
    """Create a default config mapping suitable for resynth.yaml."""
    return ExtractorConfig().model_dump(mode="json")


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
