# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terms detection request/result models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

MAX_CONTENT_CHARS = 50_000


class DetectionLocation(str, Enum):
    MODAL = "modal"
    PAGE = "page"
    MAIN_CONTENT = "main-content"
    NONE = "none"


@dataclass(frozen=True)
class PageSnapshot:
    """
    A captured page: raw HTML plus the address it was loaded from.

    `title` overrides the document's <title> element when the caller already knows it
    (e.g. a browser tab title that scripts changed after load).
    """

    html: str
    url: str = ""
    title: str | None = None


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one detection pass. `strategy` names the strategy that matched."""

    found: bool
    content: str | None = None
    location: DetectionLocation = DetectionLocation.NONE
    title: str | None = None
    strategy: str | None = None
    confidence: float | None = None

    @classmethod
    def not_found(cls) -> DetectionResult:
        return cls(found=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"found": self.found}
        if not self.found:
            return data
        data["content"] = self.content
        data["location"] = self.location.value
        if self.title is not None:
            data["title"] = self.title
        if self.strategy is not None:
            data["strategy"] = self.strategy
        if self.confidence is not None:
            data["confidence"] = self.confidence
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DetectionResult:
        if not data.get("found"):
            return cls.not_found()
        try:
            location = DetectionLocation(data.get("location") or DetectionLocation.NONE)
        except ValueError:
            location = DetectionLocation.NONE
        content = data.get("content")
        confidence = data.get("confidence")
        return cls(
            found=True,
            content=str(content)[:MAX_CONTENT_CHARS] if content is not None else None,
            location=location,
            title=data.get("title"),
            strategy=data.get("strategy"),
            confidence=float(confidence) if confidence is not None else None,
        )
