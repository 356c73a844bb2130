# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cached analysis entry."""

from __future__ import annotations

from dataclasses import dataclass

from .analysis import AnalysisResult


@dataclass(frozen=True)
class CacheEntry:
    page_key: str
    language: str
    content: str
    result: AnalysisResult
    timestamp: float

    def age(self, now: float) -> float:
        return now - self.timestamp

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return self.age(now) > ttl_seconds
