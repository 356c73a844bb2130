# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    RATE_LIMITED = "RATE_LIMITED"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if getattr(exc, "response", None) is not None:
        status = getattr(exc.response, "status_code", None)
        if status == 429:
            return ErrorCategory.RATE_LIMITED

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "The analysis service did not respond in time",
        ErrorCategory.RATE_LIMITED: "The analysis service is rate limiting requests",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error while contacting the analysis service",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Network error while contacting the analysis service")


class TermsGuardError(Exception):
    """Base error: a short user-facing message plus an internal cause."""

    def __init__(self, message: str, *, cause: Any = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.message}


class ConfigurationError(TermsGuardError):
    """Missing or placeholder API credential."""


class ValidationError(TermsGuardError):
    """Input rejected locally before any remote call."""


class OfflineError(TermsGuardError):
    """The network monitor reports no connectivity."""


class FetchError(TermsGuardError):
    """The page to inspect could not be retrieved."""


class BackendError(TermsGuardError):
    """The analysis backend failed or returned an unusable response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        category: ErrorCategory = ErrorCategory.NONE,
        cause: Any = None,
    ):
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.category = category


__all__ = [
    "BackendError",
    "ConfigurationError",
    "ErrorCategory",
    "FetchError",
    "OfflineError",
    "TermsGuardError",
    "ValidationError",
    "categorize_exception",
    "error_category_to_reason",
]
