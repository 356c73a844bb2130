# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Visible dialog/overlay strategy."""

from ...models import DetectionLocation, DetectionResult
from ..base import DetectionContext, DetectionStrategy
from ..constants import MODAL_SELECTORS


class ModalStrategy(DetectionStrategy):
    name = "modal"
    location = DetectionLocation.MODAL
    priority = 10

    def detect(self, context: DetectionContext) -> DetectionResult:
        for selector in MODAL_SELECTORS:
            for element in context.soup.select(selector):
                if not context.styles.is_visible(element):
                    continue
                result = self.analyze_element(element)
                if result.found:
                    return result
        return DetectionResult.not_found()
