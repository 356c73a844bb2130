# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TermsGuard CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..analysis.orchestrator import PageAnalysis
from ..analysis.prompt import SUPPORTED_LANGUAGES
from ..cache import ResultCache
from ..config import load_cache_settings, load_http_settings
from ..errors import TermsGuardError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import PageSnapshot
from ..runtime import TermsGuard

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2
CLI_CONTENT_PREVIEW_CHARS = 400

_RISK_MARKERS = {"low": "[low]", "medium": "[MEDIUM]", "high": "[HIGH RISK]"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TermsGuard: find and summarize terms of service on a web page")
    parser.add_argument("url", help="Page URL (used as the cache key even with --html)")
    parser.add_argument("--html", metavar="FILE", help="Read page HTML from FILE instead of fetching the URL")
    parser.add_argument(
        "--language",
        default=None,
        help=f"Summary language ({', '.join(SUPPORTED_LANGUAGES)}); unknown codes fall back to English",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON instead of human-friendly summary")
    parser.add_argument("--detect-only", action="store_true", help="Run detection only, no remote analysis")
    parser.add_argument("--no-cache", action="store_true", help="Ignore cached analyses (results are still stored)")
    parser.add_argument("--cache-path", metavar="PATH", help="SQLite cache location")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification when fetching the page (analysis requests are always verified)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: TERMSGUARD_LOG_LEVEL or WARNING)")
    return parser


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True, ensure_ascii=False)
    sys.stdout.write("\n")


def _pretty_print(analysis: PageAnalysis) -> None:
    detection = analysis.detection
    if not detection.found:
        print("[TermsGuard] No terms content found")
        return

    print(f"[TermsGuard] Terms found ({detection.location.value})")
    if detection.title:
        print(f"Title: {detection.title}")
    if detection.confidence is not None:
        print(f"Confidence: {detection.confidence:.2f}")
    print(f"Extracted: {len(detection.content or '')} chars")

    result = analysis.result
    if result is None:
        preview = (detection.content or "")[:CLI_CONTENT_PREVIEW_CHARS]
        print(f"Preview: {preview}")
        return

    source = " (cached)" if analysis.cached else ""
    print(f"Risk: {_RISK_MARKERS.get(result.risk_level.value, result.risk_level.value)}{source}")
    print(f"Summary: {result.summary}")
    if result.key_points:
        print("Key points:")
        for point in result.key_points:
            print(f"- {point}")
    if result.red_flags:
        print("Red flags:")
        for flag in result.red_flags:
            print(f"! {flag}")


def _load_page(guard: TermsGuard, args: argparse.Namespace) -> PageSnapshot:
    if args.html:
        with open(args.html, encoding="utf-8", errors="replace") as handle:
            return PageSnapshot(html=handle.read(), url=args.url)
    return guard.fetch_page(args.url)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    http_settings = load_http_settings()
    backend_client = None
    if args.ignore_ssl_errors:
        http_settings.verify_ssl = False
        # The API key must never travel over an unverified connection.
        backend_settings = load_http_settings()
        backend_settings.verify_ssl = True
        backend_client = create_default_http_client(backend_settings)

    cache = None
    if args.cache_path:
        cache = ResultCache(args.cache_path, ttl_seconds=load_cache_settings().ttl_seconds)

    http_client = create_default_http_client(http_settings)

    with TermsGuard(http_client=http_client, backend_client=backend_client, cache=cache) as guard:
        try:
            page = _load_page(guard, args)
            if args.detect_only:
                analysis = PageAnalysis(detection=guard.detect(page))
            else:
                analysis = guard.analyze_page(page, args.language, use_cache=not args.no_cache)
        except (TermsGuardError, OSError) as exc:
            message = exc.message if isinstance(exc, TermsGuardError) else str(exc)
            logger.debug("Analysis failed", exc_info=True)
            if args.json:
                _print_json({"success": False, "error": message})
            else:
                print(f"[TermsGuard] Error: {message}", file=sys.stderr)
            return EXIT_ERROR

    if args.json:
        _print_json(analysis)
    else:
        _pretty_print(analysis)

    return EXIT_OK if analysis.detection.found else EXIT_NOT_FOUND


if __name__ == "__main__":
    raise SystemExit(main())
