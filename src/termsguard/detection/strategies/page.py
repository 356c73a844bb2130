# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dedicated terms page strategy."""

from ...models import DetectionLocation, DetectionResult
from ..base import DetectionContext, DetectionStrategy
from ..constants import MIN_PAGE_CHARS, PAGE_EXCLUDE_SELECTORS
from ..scoring import contains_terms_indicator
from ..text import extract_text


class PageStrategy(DetectionStrategy):
    """
    Accepts the whole document when the title or URL names it as terms.

    Navigation chrome is stripped first; the remaining text is not scored, only
    required to be longer than MIN_PAGE_CHARS.
    """

    name = "page"
    location = DetectionLocation.PAGE
    priority = 20

    def detect(self, context: DetectionContext) -> DetectionResult:
        title = context.title
        if not (contains_terms_indicator(title) or contains_terms_indicator(context.url)):
            return DetectionResult.not_found()

        root = context.soup.body or context.soup
        content = extract_text(root, exclude=PAGE_EXCLUDE_SELECTORS)
        if len(content) <= MIN_PAGE_CHARS:
            return DetectionResult.not_found()

        return DetectionResult(
            found=True,
            content=content,
            location=self.location,
            title=title,
            strategy=self.name,
        )
