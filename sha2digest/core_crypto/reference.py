"""
Reference Digests via the `cryptography` Package

Computes SHA-224 / SHA-256 through OpenSSL (by way of `cryptography`)
so the from-scratch engine can be cross-checked against an independent
implementation.
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from .sha256 import Variant


_ALGORITHMS = {
    Variant.SHA224: hashes.SHA224,
    Variant.SHA256: hashes.SHA256,
}


def reference_digest(variant, data: bytes) -> bytes:
    """
    Compute a digest with the `cryptography` hash primitives.

    Args:
        variant: Variant or selector accepted by Variant.from_name
        data: Input bytes to hash

    Returns:
        Digest bytes of the variant's size
    """
    algorithm = _ALGORITHMS[Variant.from_name(variant)]
    ctx = hashes.Hash(algorithm(), backend=default_backend())
    ctx.update(bytes(data))
    return ctx.finalize()


def matches_reference(variant, data: bytes, digest: bytes) -> bool:
    """Check a digest against the `cryptography` result."""
    return reference_digest(variant, data) == digest
