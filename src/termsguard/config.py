# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for TermsGuard."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"TermsGuard/{__version__} (+https://github.com/termsguard/termsguard)"
DEFAULT_GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_CACHE_PATH = os.path.join("~", ".cache", "termsguard", "analyses.sqlite3")

# Upstream revisions used both 8000 and 3000; 8000 keeps more clauses in view.
PROMPT_MAX_CHARS = 8000
MIN_CONTENT_CHARS = 100
CACHE_TTL_SECONDS = 24 * 60 * 60

PLACEHOLDER_API_KEYS = frozenset(
    {
        "your-api-key",
        "your_api_key",
        "your-api-key-here",
        "your_api_key_here",
        "your_gemini_api_key",
        "your-gemini-api-key",
        "changeme",
    }
)


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def is_placeholder_key(value: str | None) -> bool:
    if value is None:
        return True
    key = value.strip()
    return not key or key.lower() in PLACEHOLDER_API_KEYS


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("TERMSGUARD_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("TERMSGUARD_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("TERMSGUARD_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("TERMSGUARD_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("TERMSGUARD_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class AnalyzerSettings:
    """Remote analysis backend and prompt settings."""

    api_key: str | None = None
    model: str = "gemini-pro"
    endpoint: str = DEFAULT_GEMINI_ENDPOINT
    timeout: float = 60.0
    prompt_max_chars: int = PROMPT_MAX_CHARS
    min_content_chars: int = MIN_CONTENT_CHARS
    default_language: str = "en"
    temperature: float = 0.3
    top_p: float = 0.8
    top_k: int = 40
    max_output_tokens: int = 2048

    @property
    def url(self) -> str:
        return self.endpoint.format(model=self.model)

    def has_credential(self) -> bool:
        return not is_placeholder_key(self.api_key)

    @classmethod
    def from_env(cls) -> "AnalyzerSettings":
        prompt_max_chars = _int_env("TERMSGUARD_PROMPT_MAX_CHARS", cls.prompt_max_chars)
        if prompt_max_chars <= 0:
            prompt_max_chars = cls.prompt_max_chars
        min_content_chars = max(_int_env("TERMSGUARD_MIN_CONTENT_CHARS", cls.min_content_chars), MIN_CONTENT_CHARS)
        return cls(
            api_key=os.getenv("TERMSGUARD_API_KEY") or os.getenv("GEMINI_API_KEY"),
            model=os.getenv("TERMSGUARD_MODEL", cls.model),
            endpoint=os.getenv("TERMSGUARD_ENDPOINT", cls.endpoint),
            timeout=_float_env("TERMSGUARD_ANALYSIS_TIMEOUT", cls.timeout),
            prompt_max_chars=prompt_max_chars,
            min_content_chars=min_content_chars,
            default_language=os.getenv("TERMSGUARD_LANGUAGE", cls.default_language),
        )


@dataclass
class CacheSettings:
    """Result cache location and freshness window."""

    path: str = DEFAULT_CACHE_PATH
    ttl_seconds: float = CACHE_TTL_SECONDS
    enabled: bool = True

    @classmethod
    def from_env(cls) -> "CacheSettings":
        ttl = _float_env("TERMSGUARD_CACHE_TTL", cls.ttl_seconds)
        if ttl <= 0:
            ttl = cls.ttl_seconds
        return cls(
            path=os.getenv("TERMSGUARD_CACHE_PATH", cls.path),
            ttl_seconds=ttl,
            enabled=_bool_env("TERMSGUARD_CACHE_ENABLED", cls.enabled),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_analyzer_settings() -> AnalyzerSettings:
    return AnalyzerSettings.from_env()


def load_cache_settings() -> CacheSettings:
    return CacheSettings.from_env()
