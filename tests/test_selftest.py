"""
Tests for the known-answer self-test and the reference cross-check.
"""

import hashlib

import pytest
from sha2digest.core_crypto.sha256 import Variant, compute_digest
from sha2digest.core_crypto.reference import reference_digest, matches_reference
from sha2digest.core_crypto.selftest import (
    TEST_VECTORS, VectorResult, run_self_test, all_passed
)


class TestReference:
    """The `cryptography` reference agrees with hashlib."""

    @pytest.mark.parametrize("variant", list(Variant))
    def test_reference_matches_hashlib(self, variant):
        algo = hashlib.sha224 if variant is Variant.SHA224 else hashlib.sha256
        for msg in [b"", b"abc", b"z" * 200]:
            assert reference_digest(variant, msg) == algo(msg).digest()

    def test_matches_reference(self):
        digest = compute_digest(Variant.SHA224, b"abcde")
        assert matches_reference("224", b"abcde", digest)
        assert not matches_reference("224", b"abcdf", digest)


class TestVectorTable:
    """The vector table itself is sound."""

    def test_vectors_cover_both_variants(self):
        variants = {variant for _, _, variant, _, _ in TEST_VECTORS}
        assert variants == {Variant.SHA224, Variant.SHA256}

    def test_expected_lengths(self):
        for _, _, variant, expected, _ in TEST_VECTORS:
            assert len(expected) == variant.digest_size * 2

    def test_expected_values_match_hashlib(self):
        """Every hard-coded value agrees with hashlib."""
        for label, message, variant, expected, _ in TEST_VECTORS:
            algo = hashlib.sha224 if variant is Variant.SHA224 else hashlib.sha256
            assert algo(message).hexdigest() == expected, label


class TestRunSelfTest:
    """Running the self-test."""

    def test_quick_run_passes(self):
        results = run_self_test(include_long=False)
        assert results
        assert all_passed(results)
        assert all(r.reference_agrees for r in results)

    def test_quick_run_skips_long_vectors(self):
        results = run_self_test(include_long=False)
        assert "million-a" not in {r.label for r in results}

    @pytest.mark.slow
    def test_full_run_passes(self):
        results = run_self_test(include_long=True)
        assert len(results) == len(TEST_VECTORS)
        assert all_passed(results)

    def test_failed_result(self):
        """A mismatch or reference disagreement fails the vector."""
        ok = VectorResult("x", Variant.SHA256, "aa", "aa", True)
        wrong = VectorResult("x", Variant.SHA256, "aa", "bb", True)
        disputed = VectorResult("x", Variant.SHA256, "aa", "aa", False)
        assert ok.passed
        assert not wrong.passed
        assert not disputed.passed
        assert not all_passed([ok, wrong])


class TestSelfTestUsesReference:
    """The self-test consults the reference check for every vector."""

    def test_reference_disagreement_fails_vector(self, monkeypatch):
        """A reference mismatch marks the vector failed."""
        from sha2digest.core_crypto import selftest
        monkeypatch.setattr(selftest, "matches_reference", lambda variant, message, digest: False)
        results = selftest.run_self_test(include_long=False)
        assert results
        assert not any(r.passed for r in results)
