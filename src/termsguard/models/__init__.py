# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for TermsGuard."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .analysis import MAX_KEY_POINTS, MAX_RED_FLAGS, AnalysisResult, ParsedAnalysis, RiskLevel
from .cache import CacheEntry
from .detection import MAX_CONTENT_CHARS, DetectionLocation, DetectionResult, PageSnapshot

__all__ = [
    "AnalysisResult",
    "CacheEntry",
    "DetectionLocation",
    "DetectionResult",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "MAX_CONTENT_CHARS",
    "MAX_KEY_POINTS",
    "MAX_RED_FLAGS",
    "PageSnapshot",
    "ParsedAnalysis",
    "RiskLevel",
]
