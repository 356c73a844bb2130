# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Prompt construction for the analysis backend."""

from __future__ import annotations

from ..config import PROMPT_MAX_CHARS

DEFAULT_LANGUAGE = "en"

LANGUAGE_INSTRUCTIONS: dict[str, str] = {
    "en": "Provide the response in English.",
    "hi": "Provide the response in Hindi (हिन्दी).",
    "ta": "Provide the response in Tamil (தமிழ்).",
}

SUPPORTED_LANGUAGES = tuple(LANGUAGE_INSTRUCTIONS)

RESPONSE_SCHEMA = """{
  "summary": "Clear summary in simple language",
  "riskLevel": "low|medium|high",
  "keyPoints": ["Point 1", "Point 2", "Point 3"],
  "redFlags": ["Red flag 1", "Red flag 2"]
}"""

FOCUS_AREAS: tuple[str, ...] = (
    "user obligations",
    "company rights",
    "data privacy",
    "account termination",
    "dispute resolution",
    "liability",
)


def language_instruction(language: str | None) -> str:
    return LANGUAGE_INSTRUCTIONS.get(language or "", LANGUAGE_INSTRUCTIONS[DEFAULT_LANGUAGE])


def build_prompt(text: str, language: str | None, max_chars: int = PROMPT_MAX_CHARS) -> str:
    """Embed at most `max_chars` characters of `text` in the analysis prompt."""
    return f"""
Analyze the following Terms and Conditions and provide a structured summary in JSON format.

{language_instruction(language)}

Format your response as JSON:
{RESPONSE_SCHEMA}

Focus on: {", ".join(FOCUS_AREAS)}.

Terms to analyze:
{text[:max_chars]}
"""


__all__ = [
    "FOCUS_AREAS",
    "LANGUAGE_INSTRUCTIONS",
    "RESPONSE_SCHEMA",
    "SUPPORTED_LANGUAGES",
    "build_prompt",
    "language_instruction",
]
