# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sequencing of detection, cache lookup, remote analysis and cache write."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ..cache import ResultCache
from ..config import AnalyzerSettings, load_analyzer_settings
from ..detection import TermsDetectionEngine
from ..errors import BackendError, ConfigurationError, OfflineError, TermsGuardError, ValidationError
from ..models import AnalysisResult, DetectionResult, PageSnapshot
from ..network import NetworkMonitor
from .gemini import MISSING_KEY_MESSAGE
from .parser import parse_response
from .prompt import build_prompt

logger = logging.getLogger(__name__)

TOO_SHORT_MESSAGE = "Terms content is too short or empty"
OFFLINE_MESSAGE = "No network connection. Connect to the internet and try again."


class AnalysisBackend(Protocol):
    def has_credential(self) -> bool: ...

    def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class PageAnalysis:
    """Detection outcome plus the analysis, when terms were found."""

    detection: DetectionResult
    result: AnalysisResult | None = None
    cached: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "detection": self.detection.to_dict(),
            "result": self.result.to_dict() if self.result else None,
            "cached": self.cached,
        }


class AnalysisOrchestrator:
    """
    Runs one analysis request end to end.

    Concurrent requests for the same page are not coalesced: each reaches the
    backend and the last cache write wins.
    """

    def __init__(
        self,
        backend: AnalysisBackend,
        *,
        monitor: NetworkMonitor,
        cache: ResultCache | None = None,
        detector: TermsDetectionEngine | None = None,
        settings: AnalyzerSettings | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.backend = backend
        self.monitor = monitor
        self.cache = cache
        self.detector = detector or TermsDetectionEngine()
        self.settings = settings or load_analyzer_settings()
        self.clock = clock

    def analyze(self, content: str, language: str | None = None) -> AnalysisResult:
        language = language or self.settings.default_language
        if not content or len(content) < self.settings.min_content_chars:
            raise ValidationError(TOO_SHORT_MESSAGE, cause=f"{len(content or '')} chars")
        if not self.backend.has_credential():
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        if not self.monitor.is_online():
            raise OfflineError(OFFLINE_MESSAGE)

        prompt = build_prompt(content, language, self.settings.prompt_max_chars)
        try:
            raw = self.backend.generate(prompt)
        except TermsGuardError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.warning("Analysis backend raised %s: %s", type(exc).__name__, exc)
            raise BackendError("Analysis failed", cause=exc) from exc

        parsed = parse_response(raw)
        return parsed.stamp(self.clock())

    def analyze_page(self, page: PageSnapshot, language: str | None = None, *, use_cache: bool = True) -> PageAnalysis:
        language = language or self.settings.default_language
        detection = self.detector.detect(page)
        if not detection.found or not detection.content:
            return PageAnalysis(detection=detection)

        page_key = page.url
        if use_cache and self.cache is not None and page_key:
            cached = self.cache.get(page_key, language)
            if cached is not None:
                logger.debug("Cache hit for %s (%s)", page_key, language)
                return PageAnalysis(detection=detection, result=cached, cached=True)

        result = self.analyze(detection.content, language)
        if self.cache is not None and page_key:
            self.cache.put(page_key, detection.content, result, language)
        return PageAnalysis(detection=detection, result=result)

    def cached_analysis(self, page_key: str, language: str | None = None) -> AnalysisResult | None:
        if self.cache is None:
            return None
        return self.cache.get(page_key, language or self.settings.default_language)

    def evict_expired(self) -> int:
        if self.cache is None:
            return 0
        return self.cache.evict_expired()
