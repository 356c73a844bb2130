# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Action-message handlers for embedding hosts (browser bridge, worker queue).

Handlers return a JSON-serializable mapping, or None when the action is not
theirs. Nothing raises past these functions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .analysis.orchestrator import TOO_SHORT_MESSAGE, AnalysisOrchestrator
from .detection import TermsDetectionEngine
from .errors import TermsGuardError
from .models import PageSnapshot

logger = logging.getLogger(__name__)

ACTION_DETECT = "detectTerms"
ACTION_ANALYZE = "analyzeTerms"
ACTION_GET_CACHED = "getCachedAnalysis"


def handle_content_message(
    message: Mapping[str, Any],
    page: PageSnapshot,
    detector: TermsDetectionEngine | None = None,
) -> dict[str, Any] | None:
    if message.get("action") != ACTION_DETECT:
        return None
    try:
        return (detector or TermsDetectionEngine()).detect(page).to_dict()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Terms detection failed: %s", exc)
        return {"found": False, "error": "Detection failed"}


def handle_background_message(message: Mapping[str, Any], orchestrator: AnalysisOrchestrator) -> dict[str, Any] | None:
    action = message.get("action")
    if action == ACTION_ANALYZE:
        return _handle_analyze(message, orchestrator)
    if action == ACTION_GET_CACHED:
        return _handle_get_cached(message, orchestrator)
    return None


def _handle_analyze(message: Mapping[str, Any], orchestrator: AnalysisOrchestrator) -> dict[str, Any]:
    content = message.get("content")
    if not isinstance(content, str) or len(content) < orchestrator.settings.min_content_chars:
        return {"success": False, "error": TOO_SHORT_MESSAGE}
    try:
        result = orchestrator.analyze(content, message.get("language"))
    except TermsGuardError as exc:
        logger.warning("Analysis failed: %s (%s)", exc.message, exc.cause)
        return exc.to_dict()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Analysis failed: %s", exc)
        return {"success": False, "error": "Analysis failed"}
    return {"success": True, "result": result.to_dict()}


def _handle_get_cached(message: Mapping[str, Any], orchestrator: AnalysisOrchestrator) -> dict[str, Any]:
    url = message.get("url")
    if not url:
        return {"success": False}
    try:
        result = orchestrator.cached_analysis(str(url), message.get("language"))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Cache lookup failed for %s: %s", url, exc)
        return {"success": False}
    if result is None:
        return {"success": False}
    return {"success": True, "result": result.to_dict()}


__all__ = ["handle_background_message", "handle_content_message"]
