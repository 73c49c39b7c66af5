# File Digest Module
"""
File hashing helpers:
- Streaming SHA-224 / SHA-256 digests of files and binary streams
- Constant memory regardless of file size
"""

from .file_hash import compute_file_digest, digest_stream, DEFAULT_CHUNK_SIZE

__all__ = [
    'compute_file_digest',
    'digest_stream',
    'DEFAULT_CHUNK_SIZE',
]
