# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across TermsGuard."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None
    allow_redirects: bool = True

    @classmethod
    def post_json(cls, url: str, payload: Any, *, headers: Headers | None = None, timeout: float | None = None) -> HttpRequest:
        merged: Headers = {"Content-Type": "application/json"}
        merged.update(headers or {})
        return cls(
            url=url,
            method="POST",
            headers=merged,
            body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            timeout=timeout,
        )


@dataclass
class HttpResponse:
    """Normalized HTTP response: transport outcome, status and decoded body."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """True for a completed exchange with a 2xx status."""
        return self.ok and self.status_code is not None and 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)
