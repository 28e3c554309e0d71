"""
resynth.provider.huggingface - Hugging Face inference API client.

Calls hosted text-classification models over HTTPS: one model scores
per-line emotions, another scores whole-speech sentiment. Requests are
sent one at a time with no retries; failures raise ProviderError.
"""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from typing import Any

from resynth.config import (
    HF_API_BASE_URL,
    SENTIMENT_MODEL,
    TEXT_EMOTION_MODEL,
    ProviderConfig,
)
from resynth.exceptions import ProviderError
from resynth.logging import logger
from resynth.models import ScoredLabel

# models accept ~512 tokens, roughly 2000 characters
DEFAULT_MAX_CHARS = 2000
DEFAULT_TIMEOUT = 30.0


class HuggingFaceClient:
    """Scoring provider backed by the Hugging Face inference router."""

    def __init__(
        self,
        api_token: str,
        base_url: str = HF_API_BASE_URL,
        emotion_model: str = TEXT_EMOTION_MODEL,
        sentiment_model: str = SENTIMENT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        max_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.emotion_model = emotion_model
        self.sentiment_model = sentiment_model
        self.timeout = timeout
        self.max_chars = max_chars

    def _build_request(self, model: str, text: str) -> urllib.request.Request:
        """Build the POST request for one model call."""
        body = {
            "inputs": text[: self.max_chars],
            "options": {"wait_for_model": True},
            "parameters": {"truncation": True, "max_length": 512},
        }
        return urllib.request.Request(
            f"{self.base_url}/{model}",
            data=json.dumps(body).encode("utf-8"),
            headers={
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/json",
            },
            method="POST",
        )

    def _call_api(self, model: str, text: str) -> Any:
        """Send text to a model and return the decoded JSON response.

        Raises:
            ProviderError: On transport failure, non-200 status or bad JSON
        """
        request = self._build_request(model, text)
        logger.debug("POST %s (%d chars)", request.full_url, min(len(text), self.max_chars))

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = response.status
                body = response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            detail = e.read().decode("utf-8", errors="replace")
            raise ProviderError(f"API returned status {e.code}: {detail}") from e
        except urllib.error.URLError as e:
            raise ProviderError(f"Failed to make request: {e.reason}") from e
        except TimeoutError as e:
            raise ProviderError(f"Request timed out after {self.timeout}s") from e
        except http.client.HTTPException as e:
            raise ProviderError(f"Failed to read response: {e!r}") from e

        if status != 200:
            raise ProviderError(f"API returned status {status}: {body}")

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ProviderError(f"Failed to decode response: {e}") from e

    def _classify(self, model: str, text: str, kind: str) -> list[ScoredLabel]:
        """Call a classification model and parse its first score list."""
        try:
            result = self._call_api(model, text)
        except ProviderError as e:
            raise ProviderError(f"{kind} API call failed: {e}") from e

        scores = parse_scores(result)
        if not scores:
            raise ProviderError(f"Empty response from {kind} API")
        return scores

    def score_line(self, text: str) -> list[ScoredLabel]:
        """Classify one line with the emotion model."""
        return self._classify(self.emotion_model, text, "text emotion")

    def score_text(self, text: str) -> list[ScoredLabel]:
        """Classify a whole speech with the sentiment model."""
        return self._classify(self.sentiment_model, text, "sentiment")


def parse_scores(result: Any) -> list[ScoredLabel]:
    """Parse a classification response into ScoredLabel entries.

    The API answers with a list of score lists (one per input); the first
    list is used. A flat list of {label, score} objects is also accepted.

    Raises:
        ProviderError: If the response does not have either shape
    """
    if not isinstance(result, list) or not result:
        if isinstance(result, dict) and "error" in result:
            raise ProviderError(f"API error: {result['error']}")
        return []

    entries = result[0] if isinstance(result[0], list) else result

    try:
        return [ScoredLabel(label=e["label"], score=float(e["score"])) for e in entries]
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"Unexpected response shape: {e}") from e


def create_client_from_config(config: ProviderConfig, api_token: str) -> HuggingFaceClient:
    """Create a HuggingFaceClient from provider configuration.

    Args:
        config: ProviderConfig instance
        api_token: Inference API token

    Returns:
        Configured HuggingFaceClient
    """
    return HuggingFaceClient(
        api_token=api_token,
        base_url=config.base_url,
        emotion_model=config.emotion_model,
        sentiment_model=config.sentiment_model,
        timeout=config.timeout,
        max_chars=config.max_chars,
    )
