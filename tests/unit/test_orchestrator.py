# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from termsguard.analysis.gemini import MISSING_KEY_MESSAGE
from termsguard.analysis.orchestrator import OFFLINE_MESSAGE, TOO_SHORT_MESSAGE, AnalysisOrchestrator, PageAnalysis
from termsguard.cache import ResultCache
from termsguard.config import AnalyzerSettings
from termsguard.errors import BackendError, ConfigurationError, ErrorCategory, OfflineError, ValidationError
from termsguard.models import DetectionLocation, PageSnapshot, RiskLevel
from termsguard.network import NetworkMonitor

URL = "https://example.com/terms"


class FakeBackend:
    def __init__(self, reply="", *, credential=True, error=None):
        self.reply = reply
        self.credential = credential
        self.error = error
        self.prompts = []

    def has_credential(self):
        return self.credential

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def backend(model_payload):
    return FakeBackend(json.dumps(model_payload))


@pytest.fixture
def cache(clock):
    with ResultCache(clock=clock) as store:
        yield store


def _orchestrator(backend, clock, *, online=True, cache=None, settings=None):
    return AnalysisOrchestrator(
        backend,
        monitor=NetworkMonitor(online=online),
        cache=cache,
        settings=settings or AnalyzerSettings(api_key="k"),
        clock=clock,
    )


def _terms_page(text, url=URL):
    return PageSnapshot(html=f"<html><body><main>{text}</main></body></html>", url=url)


def test_analyze_stamps_parsed_result(backend, clock, terms_text):
    result = _orchestrator(backend, clock).analyze(terms_text, "en")
    assert result.summary == "You give up the right to sue."
    assert result.risk_level == RiskLevel.HIGH
    assert result.red_flags == ("Class action waiver",)
    assert result.timestamp == clock()
    assert len(backend.prompts) == 1
    assert "Provide the response in English." in backend.prompts[0]


def test_language_defaults_and_selects_instruction(backend, clock, terms_text):
    orchestrator = _orchestrator(backend, clock)
    orchestrator.analyze(terms_text)
    orchestrator.analyze(terms_text, "ta")
    assert "English" in backend.prompts[0]
    assert "Tamil" in backend.prompts[1]


def test_short_content_is_rejected_before_backend(backend, clock):
    orchestrator = _orchestrator(backend, clock)
    with pytest.raises(ValidationError) as excinfo:
        orchestrator.analyze("x" * 99)
    assert excinfo.value.message == TOO_SHORT_MESSAGE
    with pytest.raises(ValidationError):
        orchestrator.analyze("")
    assert backend.prompts == []

    orchestrator.analyze("x" * 100)
    assert len(backend.prompts) == 1


def test_missing_credential_is_reported(clock, terms_text):
    backend = FakeBackend(credential=False)
    with pytest.raises(ConfigurationError) as excinfo:
        _orchestrator(backend, clock).analyze(terms_text)
    assert excinfo.value.message == MISSING_KEY_MESSAGE
    assert backend.prompts == []


def test_offline_short_circuits(backend, clock, terms_text):
    orchestrator = _orchestrator(backend, clock, online=False)
    with pytest.raises(OfflineError) as excinfo:
        orchestrator.analyze(terms_text)
    assert excinfo.value.message == OFFLINE_MESSAGE
    assert backend.prompts == []

    orchestrator.monitor.set_online(True)
    orchestrator.analyze(terms_text)
    assert len(backend.prompts) == 1


def test_validation_precedes_credential_and_offline(clock):
    backend = FakeBackend(credential=False)
    with pytest.raises(ValidationError):
        _orchestrator(backend, clock, online=False).analyze("short")
    with pytest.raises(ConfigurationError):
        _orchestrator(backend, clock, online=False).analyze("y" * 200)


def test_backend_errors_propagate_unchanged(clock, terms_text):
    error = BackendError("Gemini API Error: 503", status_code=503)
    with pytest.raises(BackendError) as excinfo:
        _orchestrator(FakeBackend(error=error), clock).analyze(terms_text)
    assert excinfo.value is error


def test_unexpected_errors_are_wrapped(clock, terms_text):
    with pytest.raises(BackendError) as excinfo:
        _orchestrator(FakeBackend(error=KeyError("candidates")), clock).analyze(terms_text)
    assert excinfo.value.message == "Analysis failed"
    assert excinfo.value.category == ErrorCategory.NONE
    assert isinstance(excinfo.value.cause, KeyError)


def test_unstructured_reply_degrades(clock, terms_text):
    result = _orchestrator(FakeBackend("Looks fine to me."), clock).analyze(terms_text)
    assert result.summary == "Looks fine to me."
    assert result.risk_level == RiskLevel.MEDIUM


def test_prompt_uses_configured_ceiling(backend, clock, make_terms_text):
    settings = AnalyzerSettings(api_key="k", prompt_max_chars=3000)
    _orchestrator(backend, clock, settings=settings).analyze(make_terms_text(9000))
    assert make_terms_text(9000)[:3000] in backend.prompts[0]
    assert make_terms_text(9000)[:3001] not in backend.prompts[0]


def test_analyze_page_caches_by_url(backend, clock, cache, terms_text):
    orchestrator = _orchestrator(backend, clock, cache=cache)
    page = _terms_page(terms_text)

    first = orchestrator.analyze_page(page, "en")
    assert isinstance(first, PageAnalysis)
    assert first.detection.found is True
    assert first.detection.location == DetectionLocation.MAIN_CONTENT
    assert first.cached is False

    clock.advance(60)
    second = orchestrator.analyze_page(page, "en")
    assert second.cached is True
    assert second.result == first.result
    assert len(backend.prompts) == 1

    assert orchestrator.cached_analysis(URL, "en") == first.result
    assert orchestrator.cached_analysis(URL, "hi") is None


def test_analyze_page_bypasses_cache_on_request(backend, clock, cache, terms_text):
    orchestrator = _orchestrator(backend, clock, cache=cache)
    page = _terms_page(terms_text)
    orchestrator.analyze_page(page)
    clock.advance(5)
    fresh = orchestrator.analyze_page(page, use_cache=False)
    assert fresh.cached is False
    assert fresh.result.timestamp == clock()
    assert len(backend.prompts) == 2
    assert cache.get(URL, "en").timestamp == clock()


def test_analyze_page_without_terms_skips_backend(backend, clock, cache, blog_text):
    page = PageSnapshot(html=f"<html><body><p>{blog_text}</p></body></html>", url="https://example.com/blog")
    analysis = _orchestrator(backend, clock, cache=cache).analyze_page(page)
    assert analysis.detection.found is False
    assert analysis.result is None
    assert analysis.to_dict() == {"detection": {"found": False}, "result": None, "cached": False}
    assert backend.prompts == []
    assert len(cache) == 0


def test_failed_analysis_is_not_cached(clock, cache, terms_text):
    orchestrator = _orchestrator(FakeBackend(error=BackendError("Gemini API Error: 500")), clock, cache=cache)
    with pytest.raises(BackendError):
        orchestrator.analyze_page(_terms_page(terms_text))
    assert len(cache) == 0


def test_evict_expired_without_cache(backend, clock):
    assert _orchestrator(backend, clock).evict_expired() == 0
    assert _orchestrator(backend, clock).cached_analysis(URL) is None
