# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Gemini generateContent backend."""

from __future__ import annotations

import logging
from typing import Any

from ..config import AnalyzerSettings, load_analyzer_settings
from ..errors import BackendError, ConfigurationError, ErrorCategory, error_category_to_reason
from ..http import HttpClient, HttpRequest, create_default_http_client

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key not configured. Please set your Gemini API key in settings."

SAFETY_SETTINGS: list[dict[str, str]] = [
    {
        "category": "HARM_CATEGORY_DANGEROUS_CONTENT",
        "threshold": "BLOCK_MEDIUM_AND_ABOVE",
    }
]


def extract_candidate_text(data: Any) -> str:
    """Return candidates[0].content.parts[0].text or raise BackendError."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise BackendError("Malformed response from analysis service", cause=exc) from exc
    if not isinstance(text, str):
        raise BackendError("Malformed response from analysis service", cause=f"text is {type(text).__name__}")
    return text


class GeminiBackend:
    """Issues one generateContent call per prompt. No retries."""

    def __init__(self, http_client: HttpClient | None = None, settings: AnalyzerSettings | None = None):
        self.settings = settings or load_analyzer_settings()
        self.http_client = http_client or create_default_http_client()

    def has_credential(self) -> bool:
        return self.settings.has_credential()

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "safetySettings": SAFETY_SETTINGS,
            "generationConfig": {
                "temperature": self.settings.temperature,
                "topP": self.settings.top_p,
                "topK": self.settings.top_k,
                "maxOutputTokens": self.settings.max_output_tokens,
            },
        }

    def generate(self, prompt: str) -> str:
        if not self.has_credential():
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        request = HttpRequest.post_json(
            self.settings.url,
            self.build_payload(prompt),
            headers={"x-goog-api-key": str(self.settings.api_key)},
            timeout=self.settings.timeout,
        )
        response = self.http_client.request(request)

        if not response.ok:
            category = response.meta.get("error_category") or ErrorCategory.UNKNOWN_ERROR
            logger.warning("Analysis request failed: %s (%s)", response.error_message, response.error_type)
            raise BackendError(
                error_category_to_reason(category) or "Analysis request failed",
                category=category,
                cause=response.error_message,
            )

        if not response.is_success:
            logger.warning("Analysis service returned HTTP %s", response.status_code)
            category = ErrorCategory.RATE_LIMITED if response.status_code == 429 else ErrorCategory.NONE
            raise BackendError(
                f"Gemini API Error: {response.status_code}",
                status_code=response.status_code,
                category=category,
                cause=response.text[:500],
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise BackendError(
                "Malformed response from analysis service",
                status_code=response.status_code,
                cause=exc,
            ) from exc
        return extract_candidate_text(data)
