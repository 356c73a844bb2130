# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level TermsGuard facade wiring detection, analysis and caching."""

from __future__ import annotations

import logging
from contextlib import suppress

from .analysis.gemini import GeminiBackend
from .analysis.orchestrator import AnalysisOrchestrator, PageAnalysis
from .cache import MEMORY_PATH, ResultCache
from .config import load_analyzer_settings, load_cache_settings, load_http_settings
from .detection import TermsDetectionEngine
from .errors import ErrorCategory, FetchError
from .http import HttpRequest, looks_like_html
from .http.client import HttpClient, create_default_http_client
from .models import AnalysisResult, DetectionResult, PageSnapshot
from .network import NetworkMonitor, http_probe

logger = logging.getLogger(__name__)

_CONNECTIVITY_CATEGORIES = frozenset({ErrorCategory.CONNECTION_ERROR, ErrorCategory.DNS_ERROR, ErrorCategory.TIMEOUT})


class TermsGuard:
    """
    Convenience wrapper sharing one cache and network monitor.

    Pages are fetched with `http_client`; analysis requests go through
    `backend_client`, which defaults to the same client. Callers that relax TLS
    for page fetches pass a separate, verifying client for the backend.

    The default monitor starts online and re-probes the analysis host when a page
    fetch fails at the connection level. Expired cache entries are swept once at
    construction.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        backend_client: HttpClient | None = None,
        cache: ResultCache | None = None,
        monitor: NetworkMonitor | None = None,
        use_cache: bool | None = None,
    ):
        self.http_settings = load_http_settings()
        self.analyzer_settings = load_analyzer_settings()
        cache_settings = load_cache_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.backend_client = backend_client or self.http_client
        if cache is None:
            enabled = cache_settings.enabled if use_cache is None else use_cache
            cache = ResultCache.from_settings(cache_settings) if enabled else ResultCache(MEMORY_PATH)
        self.cache = cache
        self.monitor = monitor or NetworkMonitor(online=True, probe=http_probe(self.backend_client))
        self.detection_engine = TermsDetectionEngine()
        self.backend = GeminiBackend(self.backend_client, self.analyzer_settings)
        self.orchestrator = AnalysisOrchestrator(
            self.backend,
            monitor=self.monitor,
            cache=self.cache,
            detector=self.detection_engine,
            settings=self.analyzer_settings,
        )
        self.evict_expired()

    def fetch_page(self, url: str) -> PageSnapshot:
        """
        GET `url` and wrap the body as a snapshot.

        A successful fetch marks the monitor online. Connection-level failures
        re-run the monitor's probe; TLS and other host-specific errors leave it as is.
        """
        response = self.http_client.request(HttpRequest(url=url))
        if response.ok:
            self.monitor.record_probe_result(True)
        else:
            category = response.meta.get("error_category")
            if category in _CONNECTIVITY_CATEGORIES:
                self.monitor.refresh()
            raise FetchError(f"Could not fetch {url}", cause=response.error_message)
        if not looks_like_html(response.headers, response.text):
            logger.warning("%s does not look like HTML; detection may find nothing", url)
        return PageSnapshot(html=response.text, url=url)

    def detect(self, page: PageSnapshot) -> DetectionResult:
        return self.detection_engine.detect(page)

    def analyze(self, content: str, language: str | None = None) -> AnalysisResult:
        return self.orchestrator.analyze(content, language)

    def analyze_page(self, page: PageSnapshot, language: str | None = None, *, use_cache: bool = True) -> PageAnalysis:
        return self.orchestrator.analyze_page(page, language, use_cache=use_cache)

    def evict_expired(self) -> int:
        try:
            return self.orchestrator.evict_expired()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Cache sweep failed: %s", exc)
            return 0

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()
        if self.backend_client is not self.http_client:
            with suppress(Exception):
                if hasattr(self.backend_client, "close"):
                    self.backend_client.close()
        with suppress(Exception):
            self.cache.close()

    def __enter__(self) -> TermsGuard:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
