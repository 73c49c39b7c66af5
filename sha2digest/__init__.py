"""
sha2digest - SHA-224 and SHA-256 implemented from scratch.

Modules:
- core_crypto: block compression, streaming digest engine, self-test
- files: streaming file digests
- main: command-line interface
"""

from .core_crypto.sha256 import (
    Variant, SHA2Hash, InvalidStateError,
    new, create, feed, finish, compute_digest, sha224, sha256,
)

__version__ = "0.1.0"
