# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Tolerant decoding of free-text model responses.

Two phases, each usable on its own:

- `extract_json_block` pulls the greedy first-``{`` to last-``}`` span out of the text;
- `decode_payload` + `normalize_payload` turn that span into a `ParsedAnalysis`,
  defaulting each field independently.

`parse_response` chains them and falls back to `degraded_result` on any failure.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from ..models import MAX_KEY_POINTS, MAX_RED_FLAGS, ParsedAnalysis, RiskLevel

logger = logging.getLogger(__name__)

_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

DEFAULT_SUMMARY = "Analysis completed"
DEFAULT_KEY_POINT = "Analysis completed"
DEGRADED_KEY_POINT = "Analysis completed - see summary for details"
DEGRADED_SUMMARY_CHARS = 1000


def extract_json_block(raw: str | None) -> str | None:
    if not raw:
        return None
    match = _JSON_BLOCK_RE.search(raw)
    return match.group(0) if match else None


def decode_payload(block: str) -> dict[str, Any] | None:
    try:
        payload = json.loads(block)
    except (TypeError, ValueError) as exc:
        logger.debug("Model response JSON did not decode: %s", exc)
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def _string_list(value: Any, limit: int) -> tuple[str, ...]:
    return tuple(item if isinstance(item, str) else str(item) for item in value[:limit])


def normalize_payload(payload: Mapping[str, Any]) -> ParsedAnalysis:
    summary = payload.get("summary")
    if not summary:
        summary = DEFAULT_SUMMARY
    elif not isinstance(summary, str):
        summary = str(summary)

    key_points = payload.get("keyPoints")
    red_flags = payload.get("redFlags")

    return ParsedAnalysis(
        summary=summary,
        risk_level=RiskLevel.coerce(payload.get("riskLevel")),
        key_points=_string_list(key_points, MAX_KEY_POINTS) if isinstance(key_points, list) else (DEFAULT_KEY_POINT,),
        red_flags=_string_list(red_flags, MAX_RED_FLAGS) if isinstance(red_flags, list) else (),
    )


def degraded_result(raw: str | None) -> ParsedAnalysis:
    return ParsedAnalysis(
        summary=(raw or "")[:DEGRADED_SUMMARY_CHARS],
        risk_level=RiskLevel.MEDIUM,
        key_points=(DEGRADED_KEY_POINT,),
        red_flags=(),
    )


def parse_response(raw: str | None) -> ParsedAnalysis:
    """Best-effort structured result; never raises."""
    if raw is not None and not isinstance(raw, str):
        raw = str(raw)
    try:
        block = extract_json_block(raw)
        if block is not None:
            payload = decode_payload(block)
            if payload is not None:
                return normalize_payload(payload)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to parse model response: %s", exc)
    logger.info("Model response was not structured; returning degraded result")
    return degraded_result(raw)


__all__ = [
    "DEFAULT_KEY_POINT",
    "DEFAULT_SUMMARY",
    "DEGRADED_KEY_POINT",
    "decode_payload",
    "degraded_result",
    "extract_json_block",
    "normalize_payload",
    "parse_response",
]
