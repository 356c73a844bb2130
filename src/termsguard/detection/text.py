# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTML parsing and text extraction helpers."""

from __future__ import annotations

import copy
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, FeatureNotFound, Tag

from .constants import MAX_TEXT_CHARS, NON_TEXT_TAGS

_WHITESPACE_RE = re.compile(r"\s+")


def make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def clone_without(element: Tag, selectors: Iterable[str] = ()) -> Tag:
    """Deep-copy `element` and drop non-text tags plus anything matching `selectors`."""
    clone = copy.copy(element)
    for node in clone.find_all(list(NON_TEXT_TAGS)):
        node.extract()
    for selector in selectors:
        for node in clone.select(selector):
            node.extract()
    return clone


def extract_text(element: Tag, *, exclude: Iterable[str] = (), max_chars: int = MAX_TEXT_CHARS) -> str:
    """
    Return the cleaned text content of `element`.

    Text nodes are concatenated without separators (like DOM textContent), whitespace runs
    collapse to a single space, and the result is truncated to `max_chars`.
    """
    clone = clone_without(element, exclude)
    return collapse_whitespace(clone.get_text())[:max_chars]


def document_title(soup: BeautifulSoup) -> str:
    if soup.title is None:
        return ""
    return collapse_whitespace(soup.title.get_text())


__all__ = ["clone_without", "collapse_whitespace", "document_title", "extract_text", "make_soup"]
