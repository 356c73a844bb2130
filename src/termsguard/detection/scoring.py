# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Confidence scoring for terms-like text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import (
    ACCEPT_THRESHOLD,
    INDICATOR_WEIGHT,
    LEGAL_PATTERN_WEIGHT,
    LEGAL_PATTERNS,
    LONG_TEXT_BONUS,
    LONG_TEXT_CHARS,
    MIN_CANDIDATE_CHARS,
    SHORT_TEXT_CHARS,
    SHORT_TEXT_PENALTY,
    TERMS_INDICATORS,
    VERY_LONG_TEXT_BONUS,
    VERY_LONG_TEXT_CHARS,
)


@dataclass(frozen=True)
class ScoreResult:
    score: float
    accepted: bool
    breakdown: dict[str, Any] = field(default_factory=dict)


def contains_terms_indicator(text: str) -> bool:
    lowered = text.lower()
    return any(indicator in lowered for indicator in TERMS_INDICATORS)


def score_confidence(text: str) -> tuple[float, dict[str, Any]]:
    """
    Weighted phrase/length score clamped to [0, 1].

    The additions happen in a fixed order so float results stay reproducible
    (three indicators give 0.6000000000000001, which clears the threshold).
    """
    lowered = text.lower()
    length = len(text)

    indicator_hits = [indicator for indicator in TERMS_INDICATORS if indicator in lowered]
    legal_hits = [pattern for pattern in LEGAL_PATTERNS if pattern in lowered]

    score = 0.0
    score += len(indicator_hits) * INDICATOR_WEIGHT
    score += len(legal_hits) * LEGAL_PATTERN_WEIGHT

    length_adjustments: list[str] = []
    if length > LONG_TEXT_CHARS:
        score += LONG_TEXT_BONUS
        length_adjustments.append("long_text")
    if length > VERY_LONG_TEXT_CHARS:
        score += VERY_LONG_TEXT_BONUS
        length_adjustments.append("very_long_text")
    if length < SHORT_TEXT_CHARS:
        score -= SHORT_TEXT_PENALTY
        length_adjustments.append("short_text_penalty")

    score = max(0.0, min(score, 1.0))
    breakdown = {
        "indicator_hits": indicator_hits,
        "legal_hits": legal_hits,
        "length": length,
        "length_adjustments": length_adjustments,
    }
    return score, breakdown


def score_text(text: str | None) -> ScoreResult:
    """Gate a candidate: too-short text is rejected before scoring."""
    if not text or len(text) < MIN_CANDIDATE_CHARS:
        return ScoreResult(score=0.0, accepted=False, breakdown={"rejected": "too_short", "length": len(text or "")})
    score, breakdown = score_confidence(text)
    return ScoreResult(score=score, accepted=score > ACCEPT_THRESHOLD, breakdown=breakdown)


__all__ = ["ScoreResult", "contains_terms_indicator", "score_confidence", "score_text"]
