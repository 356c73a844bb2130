# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport seam shared by page fetches, connectivity probes and the analysis backend."""

from __future__ import annotations

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Issues one request per call and reports failures in the response.

    Implementations return `HttpResponse(ok=False, ...)` instead of raising for
    transport errors, and set `meta["error_category"]` when the cause is known.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """httpx-backed client; TLS verification follows `settings.verify_ssl`."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
