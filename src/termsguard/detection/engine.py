# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terms detection orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models import DetectionResult, PageSnapshot
from .base import DetectionContext, DetectionStrategy
from .registry import STRATEGIES
from .text import make_soup

logger = logging.getLogger(__name__)


class TermsDetectionEngine:
    """Runs strategies in priority order and returns the first acceptance."""

    def __init__(self, strategies: Sequence[DetectionStrategy] | None = None):
        self.strategies = list(strategies) if strategies is not None else list(STRATEGIES)

    def detect(self, page: PageSnapshot) -> DetectionResult:
        try:
            context = DetectionContext(page=page, soup=make_soup(page.html or ""))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Could not parse page %s: %s", page.url, exc)
            return DetectionResult.not_found()

        for strategy in self.strategies:
            try:
                result = strategy.detect(context)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Strategy %s failed on %s: %s", strategy.name, page.url, exc)
                return DetectionResult.not_found()
            if result.found:
                logger.debug("Strategy %s matched on %s", strategy.name, page.url)
                return result

        logger.debug("No terms content found on %s", page.url)
        return DetectionResult.not_found()

    def detect_html(self, html: str, url: str = "", title: str | None = None) -> DetectionResult:
        return self.detect(PageSnapshot(html=html, url=url, title=title))
