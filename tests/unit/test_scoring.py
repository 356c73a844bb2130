"""
Unit tests for terms confidence scoring.
"""

import unittest

from termsguard.detection.constants import LEGAL_PATTERNS, TERMS_INDICATORS
from termsguard.detection.scoring import contains_terms_indicator, score_confidence, score_text

PAD = "lorem ipsum dolor sit amet "


def _padded(text: str, length: int) -> str:
    while len(text) < length:
        text += PAD
    return text[:length]


class TestConfidenceScoring(unittest.TestCase):
    def test_short_text_is_rejected_before_scoring(self):
        for length in (0, 1, 50, 199):
            text = _padded("terms of service hereby agree ", length) if length else ""
            result = score_text(text)
            self.assertFalse(result.accepted)
            self.assertEqual(result.score, 0.0)

    def test_plain_text_scores_zero(self):
        score, breakdown = score_confidence(_padded("", 800))
        self.assertEqual(score, 0.0)
        self.assertEqual(breakdown["indicator_hits"], [])
        self.assertEqual(breakdown["legal_hits"], [])
        self.assertEqual(breakdown["length_adjustments"], [])

    def test_indicator_and_pattern_weights(self):
        text = _padded("terms of use. legal terms. liability. ", 700)
        score, breakdown = score_confidence(text)
        self.assertAlmostEqual(score, 0.5)
        self.assertEqual(breakdown["indicator_hits"], ["terms of use", "legal terms"])
        self.assertEqual(breakdown["legal_hits"], ["liability"])

    def test_repeated_phrases_count_once(self):
        score, _ = score_confidence(_padded("terms of use " * 20, 700))
        self.assertAlmostEqual(score, 0.2)

    def test_matching_is_case_insensitive(self):
        score, breakdown = score_confidence(_padded("TERMS OF SERVICE and Governing Law ", 700))
        self.assertAlmostEqual(score, 0.3)
        self.assertEqual(breakdown["legal_hits"], ["governing law"])

    def test_length_bonuses_and_penalty(self):
        self.assertAlmostEqual(score_confidence(_padded("terms of use ", 1001))[0], 0.3)
        self.assertAlmostEqual(score_confidence(_padded("terms of use ", 5001))[0], 0.4)
        self.assertAlmostEqual(score_confidence(_padded("terms of use liability ", 499))[0], 0.0)
        _, breakdown = score_confidence(_padded("", 300))
        self.assertEqual(breakdown["length_adjustments"], ["short_text_penalty"])

    def test_score_is_clamped(self):
        everything = " ".join(TERMS_INDICATORS + LEGAL_PATTERNS) + " "
        score, _ = score_confidence(_padded(everything, 6000))
        self.assertEqual(score, 1.0)
        score, _ = score_confidence(_padded("", 300))
        self.assertEqual(score, 0.0)

    def test_three_indicators_clear_threshold(self):
        text = _padded("terms of service, terms and conditions, user agreement ", 700)
        result = score_text(text)
        self.assertTrue(result.accepted)
        self.assertGreater(result.score, 0.6)

    def test_two_indicators_do_not_clear_threshold(self):
        result = score_text(_padded("terms of service, user agreement ", 700))
        self.assertFalse(result.accepted)

    def test_rich_long_text_always_clears_threshold(self):
        for indicators in (TERMS_INDICATORS[:4], TERMS_INDICATORS[2:], TERMS_INDICATORS):
            for patterns in (LEGAL_PATTERNS[:3], LEGAL_PATTERNS[4:], LEGAL_PATTERNS):
                text = _padded(" ".join(indicators + patterns) + " ", 5001)
                result = score_text(text)
                self.assertGreaterEqual(result.score, 0.6)
                self.assertTrue(result.accepted)

    def test_contains_terms_indicator(self):
        self.assertTrue(contains_terms_indicator("Acme | Terms Of Service"))
        self.assertFalse(contains_terms_indicator("https://acme.test/terms-of-service"))


if __name__ == "__main__":
    unittest.main()
