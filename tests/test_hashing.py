"""
Tests for Assessment Hashing
Covers volatile-field stripping, canonical JSON and digest format.
"""

from app.shared.hashing import (
    HASH_PREFIX,
    canonicalize,
    canonicalize_and_hash,
    strip_volatile,
)
from app.survey.classify import classify
from app.survey.models import ThresholdSnapshot
from app.survey.service import assessment_hash


class TestStripVolatile:
    """Tests for strip_volatile(obj)"""

    def test_top_level_fields_removed(self):
        record = {"percentage": 50.0, "createdAt": "2026-01-01", "assessmentHash": "sha256:x"}
        assert strip_volatile(record) == {"percentage": 50.0}

    def test_nested_fields_removed(self):
        body = {"record": {"updatedAt": "2026-01-01", "riskLevel": "Low Risk"}, "generated_at": "now"}
        assert strip_volatile(body) == {"record": {"riskLevel": "Low Risk"}}

    def test_dicts_inside_lists(self):
        assert strip_volatile([{"createdAt": 1, "a": 2}]) == [{"a": 2}]

    def test_input_not_mutated(self):
        record = {"percentage": 50.0, "createdAt": "2026-01-01"}
        strip_volatile(record)
        assert "createdAt" in record


class TestCanonicalize:
    """Tests for canonicalize(obj)"""

    def test_key_order_irrelevant(self):
        assert canonicalize({"b": 1, "a": 2}) == canonicalize({"a": 2, "b": 1})

    def test_compact_output(self):
        assert canonicalize({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_float_noise_ignored(self):
        assert canonicalize({"p": 0.1 + 0.2}) == canonicalize({"p": 0.3})

    def test_hindi_text_ascii_escaped(self):
        assert canonicalize({"s": "नोट"}).isascii()

    def test_volatile_fields_kept_on_request(self):
        stamped = {"percentage": 50.0, "updatedAt": "2026-01-01T00:00:00Z"}
        assert "updatedAt" in canonicalize(stamped, exclude_volatile=False)


class TestCanonicalizeAndHash:
    """Tests for canonicalize_and_hash(obj)"""

    def test_hash_format(self):
        digest = canonicalize_and_hash({"percentage": 48.8})

        assert digest.startswith(HASH_PREFIX)
        assert len(digest) == len(HASH_PREFIX) + 64

    def test_volatile_fields_do_not_change_hash(self):
        base = {"percentage": 50.0, "riskLevel": "Moderate Risk"}
        stamped = dict(base, createdAt="2026-01-01T00:00:00Z", assessmentHash="sha256:x")

        assert canonicalize_and_hash(base) == canonicalize_and_hash(stamped)

    def test_content_change_changes_hash(self):
        assert canonicalize_and_hash({"percentage": 48.8}) != canonicalize_and_hash({"percentage": 48.9})

    def test_same_assessment_same_hash(self):
        thresholds = ThresholdSnapshot(p33=30.0, p66=60.0)
        first = classify(48.8, thresholds, 70, total_score=440)
        second = classify(48.8, thresholds, 70, total_score=440)

        assert assessment_hash(first) == assessment_hash(second)

    def test_different_tier_different_hash(self):
        first = classify(48.8, ThresholdSnapshot(p33=30.0, p66=60.0), 70, total_score=440)
        second = classify(48.8, ThresholdSnapshot(p33=30.0, p66=40.0), 70, total_score=440)

        assert assessment_hash(first) != assessment_hash(second)
