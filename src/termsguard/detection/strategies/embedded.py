# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Main-content region strategy."""

from ...models import DetectionLocation, DetectionResult
from ..base import DetectionContext, DetectionStrategy
from ..constants import MAIN_CONTENT_SELECTORS


class EmbeddedContentStrategy(DetectionStrategy):
    name = "embedded"
    location = DetectionLocation.MAIN_CONTENT
    priority = 30

    def detect(self, context: DetectionContext) -> DetectionResult:
        # Only the first match per selector is considered.
        for selector in MAIN_CONTENT_SELECTORS:
            element = context.soup.select_one(selector)
            if element is None:
                continue
            result = self.analyze_element(element)
            if result.found:
                return result
        return DetectionResult.not_found()
