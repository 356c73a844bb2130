# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from termsguard.analysis.parser import (
    DEFAULT_KEY_POINT,
    DEFAULT_SUMMARY,
    DEGRADED_KEY_POINT,
    decode_payload,
    extract_json_block,
    normalize_payload,
    parse_response,
)
from termsguard.models import ParsedAnalysis, RiskLevel


def test_noisy_response_parses_to_structured_result():
    raw = 'noise {"summary":"ok","riskLevel":"high","keyPoints":["a","b"],"redFlags":[]} trailing'
    parsed = parse_response(raw)
    assert parsed == ParsedAnalysis(summary="ok", risk_level=RiskLevel.HIGH, key_points=("a", "b"), red_flags=())


def test_markdown_fenced_json_is_accepted(model_payload):
    raw = "Here is the analysis:\n```json\n" + json.dumps(model_payload, indent=2) + "\n```"
    parsed = parse_response(raw)
    assert parsed.summary == model_payload["summary"]
    assert parsed.risk_level == RiskLevel.HIGH
    assert parsed.red_flags == ("Class action waiver",)


def test_parsing_is_idempotent(model_payload):
    raw = json.dumps(model_payload)
    assert parse_response(raw) == parse_response(raw)


def test_extract_json_block_is_greedy():
    assert extract_json_block('a {"x": {"y": 1}} b {"z": 2} c') == '{"x": {"y": 1}} b {"z": 2}'
    assert extract_json_block("no braces here") is None
    assert extract_json_block("") is None
    assert extract_json_block(None) is None
    assert extract_json_block("} backwards {") is None


def test_decode_payload_rejects_malformed_json():
    assert decode_payload('{"summary": "x",}') is None
    assert decode_payload('{"a": 1}') == {"a": 1}


@pytest.mark.parametrize(
    "raw",
    [
        "The document looks fairly standard with no major issues.",
        "",
        '{"summary": "unterminated',
        '{"a": 1}, {"b": 2}',
        "{not json at all}",
    ],
)
def test_unparseable_responses_degrade(raw):
    parsed = parse_response(raw)
    assert parsed.summary == raw[:1000]
    assert parsed.risk_level == RiskLevel.MEDIUM
    assert parsed.key_points == (DEGRADED_KEY_POINT,)
    assert parsed.red_flags == ()


def test_degraded_summary_is_capped():
    raw = "x" * 5000
    assert len(parse_response(raw).summary) == 1000


def test_non_string_input_never_raises():
    assert parse_response(None).summary == ""
    assert parse_response(12345).summary == "12345"


def test_risk_level_must_match_exactly():
    for value in ("HIGH", "severe", None, 3, ["high"]):
        assert normalize_payload({"riskLevel": value}).risk_level == RiskLevel.MEDIUM
    assert normalize_payload({"riskLevel": "low"}).risk_level == RiskLevel.LOW


def test_missing_fields_get_defaults():
    parsed = normalize_payload({})
    assert parsed.summary == DEFAULT_SUMMARY
    assert parsed.key_points == (DEFAULT_KEY_POINT,)
    assert parsed.red_flags == ()
    assert normalize_payload({"summary": ""}).summary == DEFAULT_SUMMARY
    assert normalize_payload({"keyPoints": "not a list"}).key_points == (DEFAULT_KEY_POINT,)
    assert normalize_payload({"redFlags": {"a": 1}}).red_flags == ()


def test_lists_are_capped_after_parsing():
    payload = {
        "summary": "s",
        "keyPoints": [f"point {i}" for i in range(12)],
        "redFlags": [f"flag {i}" for i in range(9)],
    }
    parsed = parse_response(json.dumps(payload))
    assert parsed.key_points == tuple(f"point {i}" for i in range(8))
    assert parsed.red_flags == tuple(f"flag {i}" for i in range(5))


def test_empty_lists_are_kept():
    parsed = normalize_payload({"keyPoints": [], "redFlags": []})
    assert parsed.key_points == ()
    assert parsed.red_flags == ()


def test_non_string_list_items_are_stringified():
    parsed = normalize_payload({"keyPoints": [1, "two"], "summary": 42})
    assert parsed.key_points == ("1", "two")
    assert parsed.summary == "42"
