# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Heuristics for interpreting fetched pages."""

from __future__ import annotations

from collections.abc import Mapping

from .headers import header_value


def looks_like_html(headers: Mapping[object, object] | None, body: str | None) -> bool:
    """
    Return True when a response likely contains HTML.

    Uses both content-type and body sniffing; many servers omit or mislabel the type.
    """
    content_type = header_value(headers, "content-type").lower()
    if "text/html" in content_type or "application/xhtml" in content_type:
        return True

    lowered = str(body or "").lstrip()[:256].lower()
    return lowered.startswith("<!doctype") or lowered.startswith("<html") or "<html" in lowered or "<body" in lowered


__all__ = ["looks_like_html"]
