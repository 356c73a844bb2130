# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from termsguard.http.models import HttpResponse

TERMS_SENTENCES = (
    "These Terms of Service and Terms and Conditions form a binding User Agreement between you and Acme. "
    "By creating an account you hereby agree to these terms and to our Privacy Policy. "
    "Acme's liability is limited to the fees you paid in the last twelve months. "
    "The courts of Delaware have exclusive jurisdiction and the governing law is the law of Delaware. "
    "Any dispute resolution will take place through binding arbitration. "
    "Termination of your account may occur at any time without notice. "
)

FILLER = "The service is provided as is and may change from time to time. "


def build_terms_text(min_chars: int = 1500) -> str:
    text = TERMS_SENTENCES
    while len(text) < min_chars:
        text += FILLER
    return text


def gemini_response(payload) -> HttpResponse:
    raw = payload if isinstance(payload, str) else json.dumps(payload)
    body = {"candidates": [{"content": {"parts": [{"text": raw}]}}]}
    return HttpResponse(ok=True, status_code=200, text=json.dumps(body), headers={"content-type": "application/json"})


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def terms_text() -> str:
    return build_terms_text()


@pytest.fixture
def blog_text() -> str:
    return "Welcome to our cooking blog. Today we bake bread with flour, water and salt. " * 10


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def model_payload() -> dict:
    return {
        "summary": "You give up the right to sue.",
        "riskLevel": "high",
        "keyPoints": ["Arbitration is mandatory", "Accounts can be closed at any time"],
        "redFlags": ["Class action waiver"],
    }


@pytest.fixture
def gemini_reply():
    return gemini_response


@pytest.fixture
def make_terms_text():
    return build_terms_text
