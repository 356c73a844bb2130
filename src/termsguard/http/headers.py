# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

Header names are case-insensitive; responses from different clients arrive with
mixed casing, so lookups go through a lowercase copy.
"""

from __future__ import annotations

from collections.abc import Mapping


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    if not headers:
        return {}
    out: dict[str, str] = {}
    for key, value in headers.items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str) -> str:
    """Case-insensitive header lookup returning an empty string when absent."""
    return normalize_headers(headers).get(name.lower(), "")


__all__ = ["header_value", "normalize_headers"]
