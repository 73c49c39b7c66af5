"""
Known-Answer Self-Test

Runs the from-scratch engine against the official FIPS 180-2 / NIST
example vectors for SHA-224 and SHA-256, plus a few extra spot checks,
and cross-checks every message against the `cryptography` reference.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .sha256 import Variant, compute_digest
from .reference import matches_reference


logger = logging.getLogger(__name__)

ONE_BLOCK_MSG = b"abc"
TWO_BLOCK_MSG = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
LONG_TWO_BLOCK_MSG = (
    b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
    b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu"
)
MILLION_A = b"a" * 1_000_000

# (label, message, variant, expected hex digest, long-running)
TEST_VECTORS: Tuple[Tuple[str, bytes, Variant, str, bool], ...] = (
    ("empty", b"", Variant.SHA256,
     "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855", False),
    ("abc", ONE_BLOCK_MSG, Variant.SHA256,
     "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad", False),
    ("abcde", b"abcde", Variant.SHA256,
     "36bbe50ed96841d10443bcb670d6554f0a34b761be67ec9c4a8ad2c0c44ca42c", False),
    ("448-bit", TWO_BLOCK_MSG, Variant.SHA256,
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1", False),
    ("alphanumeric", b"abcdefghijklmnopqrstuvwxyz12345678901234567890", Variant.SHA256,
     "a8143361b55756a30c4c4369726748e4ae193ca1d31e1f21f47bc7171cd56e9a", False),
    ("896-bit", LONG_TWO_BLOCK_MSG, Variant.SHA256,
     "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1", False),
    ("million-a", MILLION_A, Variant.SHA256,
     "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0", True),
    ("empty", b"", Variant.SHA224,
     "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f", False),
    ("abc", ONE_BLOCK_MSG, Variant.SHA224,
     "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7", False),
    ("abcde", b"abcde", Variant.SHA224,
     "bdd03d560993e675516ba5a50638b6531ac2ac3d5847c61916cfced6", False),
    ("448-bit", TWO_BLOCK_MSG, Variant.SHA224,
     "75388b16512776cc5dba5da1fd890150b0c6455cb4f58b1952522525", False),
    ("896-bit", LONG_TWO_BLOCK_MSG, Variant.SHA224,
     "c97ca9a559850ce97a04a96def6d99a9e0e0e2ab14e6b8df265fc0b3", False),
    ("million-a", MILLION_A, Variant.SHA224,
     "20794655980c91d8bbb4c1ea97618a4bf03f42581948b2ee4ee7ad67", True),
)


@dataclass
class VectorResult:
    """Outcome of one known-answer check."""
    label: str
    variant: Variant
    expected: str
    actual: str
    reference_agrees: bool

    @property
    def passed(self) -> bool:
        return self.actual == self.expected and self.reference_agrees


def run_self_test(include_long: bool = True) -> List[VectorResult]:
    """
    Run every known-answer vector.

    Args:
        include_long: Also run the one-million-byte vectors

    Returns:
        One VectorResult per vector run, in table order
    """
    results = []
    for label, message, variant, expected, is_long in TEST_VECTORS:
        if is_long and not include_long:
            continue

        digest = compute_digest(variant, message)
        result = VectorResult(
            label=label,
            variant=variant,
            expected=expected,
            actual=digest.hex(),
            reference_agrees=matches_reference(variant, message, digest),
        )
        if not result.passed:
            logger.warning("%s(%s) mismatch: got %s", variant.label, label, result.actual)
        results.append(result)
    return results


def all_passed(results: List[VectorResult]) -> bool:
    return all(r.passed for r in results)
