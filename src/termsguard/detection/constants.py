# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared detection constants (phrases, selectors, thresholds)."""

TERMS_INDICATORS: tuple[str, ...] = (
    "terms of service",
    "terms and conditions",
    "user agreement",
    "terms of use",
    "service agreement",
    "legal terms",
)

LEGAL_PATTERNS: tuple[str, ...] = (
    "hereby agree",
    "privacy policy",
    "liability",
    "jurisdiction",
    "governing law",
    "dispute resolution",
    "termination",
)

MODAL_SELECTORS: tuple[str, ...] = (
    ".modal",
    ".popup",
    ".dialog",
    '[role="dialog"]',
    '[aria-modal="true"]',
)

MAIN_CONTENT_SELECTORS: tuple[str, ...] = (
    "main",
    '[role="main"]',
    ".main-content",
    ".content",
    ".terms-content",
    ".legal-content",
    ".agreement-content",
)

PAGE_EXCLUDE_SELECTORS: tuple[str, ...] = (
    "nav",
    "header",
    "footer",
    ".navigation",
    ".nav",
    ".sidebar",
    ".menu",
    ".breadcrumb",
)

NON_TEXT_TAGS: tuple[str, ...] = ("script", "style", "noscript")

MAX_TEXT_CHARS = 50_000
MIN_CANDIDATE_CHARS = 200
MIN_PAGE_CHARS = 500
ACCEPT_THRESHOLD = 0.6

INDICATOR_WEIGHT = 0.2
LEGAL_PATTERN_WEIGHT = 0.1
LONG_TEXT_CHARS = 1000
LONG_TEXT_BONUS = 0.1
VERY_LONG_TEXT_CHARS = 5000
VERY_LONG_TEXT_BONUS = 0.1
SHORT_TEXT_CHARS = 500
SHORT_TEXT_PENALTY = 0.3
