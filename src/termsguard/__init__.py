# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TermsGuard package entrypoint.

Finds terms-of-service text inside arbitrary HTML pages, asks a generative-text
backend for a structured risk summary, and caches the result per page. HTTP is
abstracted behind an injectable client interface and domain objects are typed
dataclasses.
"""

from .analysis import AnalysisOrchestrator, GeminiBackend, PageAnalysis, build_prompt, parse_response
from .cache import ResultCache
from .config import (
    AnalyzerSettings,
    CacheSettings,
    HttpSettings,
    load_analyzer_settings,
    load_cache_settings,
    load_http_settings,
)
from .detection import TermsDetectionEngine
from .errors import BackendError, ConfigurationError, OfflineError, TermsGuardError, ValidationError
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient, create_default_http_client
from .log import setup_logging
from .messages import handle_background_message, handle_content_message
from .models import AnalysisResult, CacheEntry, DetectionLocation, DetectionResult, PageSnapshot, RiskLevel
from .network import NetworkMonitor
from .runtime import TermsGuard
from .version import __version__

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisResult",
    "AnalyzerSettings",
    "BackendError",
    "CacheEntry",
    "CacheSettings",
    "ConfigurationError",
    "DetectionLocation",
    "DetectionResult",
    "GeminiBackend",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "NetworkMonitor",
    "OfflineError",
    "PageAnalysis",
    "PageSnapshot",
    "ResultCache",
    "RiskLevel",
    "StubHttpClient",
    "TermsDetectionEngine",
    "TermsGuard",
    "TermsGuardError",
    "ValidationError",
    "__version__",
    "build_prompt",
    "create_default_http_client",
    "handle_background_message",
    "handle_content_message",
    "load_analyzer_settings",
    "load_cache_settings",
    "load_http_settings",
    "parse_response",
    "setup_logging",
]
