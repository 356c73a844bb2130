# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Analysis result models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MAX_KEY_POINTS = 8
MAX_RED_FLAGS = 5


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def coerce(cls, value: Any) -> RiskLevel:
        """Exact token match; anything else is medium."""
        if isinstance(value, RiskLevel):
            return value
        if isinstance(value, str):
            for level in cls:
                if level.value == value:
                    return level
        return cls.MEDIUM


@dataclass(frozen=True)
class ParsedAnalysis:
    """Normalized model output before it is stamped with a timestamp."""

    summary: str
    risk_level: RiskLevel = RiskLevel.MEDIUM
    key_points: tuple[str, ...] = field(default_factory=tuple)
    red_flags: tuple[str, ...] = field(default_factory=tuple)

    def stamp(self, timestamp: float) -> AnalysisResult:
        return AnalysisResult(
            summary=self.summary,
            risk_level=self.risk_level,
            key_points=self.key_points,
            red_flags=self.red_flags,
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class AnalysisResult:
    summary: str
    risk_level: RiskLevel
    key_points: tuple[str, ...]
    red_flags: tuple[str, ...]
    timestamp: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "riskLevel": self.risk_level.value,
            "keyPoints": list(self.key_points),
            "redFlags": list(self.red_flags),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AnalysisResult:
        key_points = data.get("keyPoints") or []
        red_flags = data.get("redFlags") or []
        return cls(
            summary=str(data.get("summary") or ""),
            risk_level=RiskLevel.coerce(data.get("riskLevel")),
            key_points=tuple(str(item) for item in key_points)[:MAX_KEY_POINTS],
            red_flags=tuple(str(item) for item in red_flags)[:MAX_RED_FLAGS],
            timestamp=float(data.get("timestamp") or 0.0),
        )
