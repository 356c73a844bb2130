# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Visibility resolution for static HTML snapshots.

A snapshot has no layout engine, so computed style is approximated from what the
markup itself declares, lowest precedence first:

1. the `hidden` attribute (display: none),
2. top-level rules in the page's <style> blocks, in document order,
3. the inline `style` attribute.

Only `display`, `visibility` and `opacity` are tracked. `visibility` is inherited
from the nearest ancestor that declares it. Specificity, `!important` and
at-rule blocks (e.g. `@media`) are ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)

TRACKED_PROPERTIES = frozenset({"display", "visibility", "opacity"})
_CSS_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def parse_declarations(block: str) -> dict[str, str]:
    """Parse `name: value; ...` keeping only tracked properties."""
    declarations: dict[str, str] = {}
    for item in block.split(";"):
        name, sep, value = item.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        if name not in TRACKED_PROPERTIES:
            continue
        declarations[name] = value.replace("!important", "").strip().lower()
    return declarations


def iter_css_rules(css: str) -> Iterator[tuple[str, str]]:
    """Yield (selector list, declaration block) for top-level style rules."""
    css = _CSS_COMMENT_RE.sub("", css)
    depth = 0
    start = 0
    prelude = ""
    body_start = 0
    for index, char in enumerate(css):
        if char == "{":
            if depth == 0:
                prelude = css[start:index].strip()
                body_start = index + 1
            depth += 1
        elif char == "}":
            if depth == 0:
                start = index + 1
                continue
            depth -= 1
            if depth == 0:
                if prelude and not prelude.startswith("@"):
                    yield prelude, css[body_start:index]
                start = index + 1
        elif char == ";" and depth == 0:
            # statement at-rules such as @import
            start = index + 1


def is_zero_opacity(value: str | None) -> bool:
    if not value:
        return False
    raw = value.strip()
    try:
        if raw.endswith("%"):
            return float(raw[:-1]) == 0
        return float(raw) == 0
    except ValueError:
        return False


class StyleResolver:
    """Resolves display/visibility/opacity for elements of one parsed document."""

    def __init__(self, soup: BeautifulSoup):
        self._sheet: dict[int, dict[str, str]] = {}
        self._load_stylesheets(soup)

    def _load_stylesheets(self, soup: BeautifulSoup) -> None:
        for style_tag in soup.find_all("style"):
            for selector_list, block in iter_css_rules(style_tag.get_text()):
                declarations = parse_declarations(block)
                if not declarations:
                    continue
                for selector in selector_list.split(","):
                    selector = selector.strip()
                    if not selector:
                        continue
                    try:
                        matched = soup.select(selector)
                    except (SelectorSyntaxError, NotImplementedError, ValueError) as exc:
                        logger.debug("Skipping unsupported selector %r: %s", selector, exc)
                        continue
                    for element in matched:
                        self._sheet.setdefault(id(element), {}).update(declarations)

    def declared(self, element: Tag) -> dict[str, str]:
        """Properties the markup declares directly on `element`, cascade applied."""
        props: dict[str, str] = {}
        if element.has_attr("hidden"):
            props["display"] = "none"
        props.update(self._sheet.get(id(element), {}))
        inline = element.get("style")
        if isinstance(inline, str) and inline:
            props.update(parse_declarations(inline))
        return props

    def computed(self, element: Tag) -> dict[str, str]:
        props = self.declared(element)
        visibility = props.get("visibility")
        if visibility in (None, "inherit"):
            visibility = "visible"
            for parent in element.parents:
                if not isinstance(parent, Tag) or isinstance(parent, BeautifulSoup):
                    break
                declared = self.declared(parent).get("visibility")
                if declared and declared != "inherit":
                    visibility = declared
                    break
        props["visibility"] = visibility
        props.setdefault("display", "block")
        props.setdefault("opacity", "1")
        return props

    def is_visible(self, element: Tag) -> bool:
        style = self.computed(element)
        return (
            style["display"] != "none"
            and style["visibility"] != "hidden"
            and not is_zero_opacity(style["opacity"])
        )


__all__ = ["StyleResolver", "is_zero_opacity", "iter_css_rules", "parse_declarations"]
