"""
File Digest Module

Streams files from disk through the SHA-2 digest engine without
loading them into memory.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

from ..core_crypto.sha256 import SHA2Hash, DEFAULT_VARIANT


logger = logging.getLogger(__name__)

# Chunk size for streaming (1 MB default)
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MB


def digest_stream(stream: BinaryIO, variant=DEFAULT_VARIANT,
                  chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Compute the digest of a binary stream, read in chunks.

    Args:
        stream: Readable binary stream
        variant: SHA-224 or SHA-256 selector
        chunk_size: Read chunk size

    Returns:
        Digest bytes
    """
    if chunk_size <= 0:
        raise ValueError("Chunk size must be positive")

    engine = SHA2Hash(variant)
    while chunk := stream.read(chunk_size):
        engine.update(chunk)
    return engine.finalize()


def compute_file_digest(file_path: Union[str, Path], variant=DEFAULT_VARIANT,
                        chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Compute SHA-224 / SHA-256 hash of a file (streaming).

    Args:
        file_path: Path to file
        variant: SHA-224 or SHA-256 selector
        chunk_size: Read chunk size

    Returns:
        Digest bytes

    Raises:
        OSError: If the file cannot be opened or read
    """
    logger.debug("Hashing %s in %d-byte chunks", file_path, chunk_size)
    with open(file_path, 'rb') as f:
        return digest_stream(f, variant, chunk_size)
