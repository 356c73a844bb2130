# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection base classes and context."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from ..models import DetectionLocation, DetectionResult, PageSnapshot
from .scoring import score_text
from .style import StyleResolver
from .text import document_title, extract_text

logger = logging.getLogger(__name__)


@dataclass
class DetectionContext:
    """Parsed view of one page snapshot shared by all strategies."""

    page: PageSnapshot
    soup: BeautifulSoup
    _styles: StyleResolver | None = field(default=None, repr=False)

    @property
    def url(self) -> str:
        return self.page.url or ""

    @property
    def title(self) -> str:
        if self.page.title is not None:
            return self.page.title
        return document_title(self.soup)

    @property
    def styles(self) -> StyleResolver:
        if self._styles is None:
            self._styles = StyleResolver(self.soup)
        return self._styles


class DetectionStrategy(ABC):
    name: str = "base"
    location: DetectionLocation = DetectionLocation.NONE
    priority: int = 50

    @abstractmethod
    def detect(self, context: DetectionContext) -> DetectionResult: ...

    def analyze_element(self, element: Tag) -> DetectionResult:
        """Score one candidate element; found results are tagged with this strategy."""
        text = extract_text(element)
        score = score_text(text)
        logger.debug(
            "%s candidate <%s>: %d chars, score %.2f",
            self.name,
            element.name,
            len(text),
            score.score,
        )
        if not score.accepted:
            return DetectionResult.not_found()
        return DetectionResult(
            found=True,
            content=text,
            location=self.location,
            strategy=self.name,
            confidence=score.score,
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(priority={self.priority})"
