# Core Cryptography Module
"""
Core hash implementations including:
- SHA-256 / SHA-224 block compression
- Streaming digest engine
- Known-answer self-test
"""

from .sha256 import (
    Variant, SHA2Hash, InvalidStateError, DEFAULT_VARIANT,
    new, create, feed, finish, compute_digest,
    sha224_hex, sha256_hex, sha256_string,
)

__all__ = [
    'Variant',
    'SHA2Hash',
    'InvalidStateError',
    'DEFAULT_VARIANT',
    'new',
    'create',
    'feed',
    'finish',
    'compute_digest',
    'sha224_hex',
    'sha256_hex',
    'sha256_string',
]
