"""
SHA-224 / SHA-256 Hash Implementation (From Scratch)

Implements the SHA-224 and SHA-256 cryptographic hash functions as defined
in FIPS 180-4. This implementation avoids using hashlib and builds the
algorithm from scratch on top of the block compressor.

Components:
- Variant: SHA-224 / SHA-256 selector (initial hash value + output size)
- Padding: Pads message to multiple of 512 bits
- SHA2Hash: Streaming digest engine with a hashlib-style interface
- Output: 224-bit (28-byte) or 256-bit (32-byte) digest
"""

import logging
from enum import Enum
from typing import Tuple, Union

from .compressor import BLOCK_SIZE, compress_block


logger = logging.getLogger(__name__)

# Size of the big-endian bit-length field appended during padding
LENGTH_FIELD_SIZE = 8

# The length field holds the bit length modulo 2^64
MAX_BIT_LENGTH_MASK = (1 << 64) - 1

BytesLike = Union[bytes, bytearray, memoryview]


class InvalidStateError(RuntimeError):
    """Raised when a finalized digest engine is asked to do more work."""
    pass


class Variant(Enum):
    """
    SHA-2 variants sharing the 32-bit word compression function.

    Each member carries its hashlib-style name, its digest size in bytes
    and its initial hash value (8 32-bit words).
    """

    # Initial hash values: second 32 bits of fractional parts of square roots
    # of the 9th through 16th primes
    SHA224 = ("sha224", 28, (
        0xc1059ed8, 0x367cd507, 0x3070dd17, 0xf70e5939,
        0xffc00b31, 0x68581511, 0x64f98fa7, 0xbefa4fa4,
    ))

    # Initial hash values: first 32 bits of fractional parts of square roots
    # of first 8 primes
    SHA256 = ("sha256", 32, (
        0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
        0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
    ))

    def __init__(self, label: str, digest_size: int, initial_state: Tuple[int, ...]):
        self.label = label
        self.digest_size = digest_size
        self.initial_state = initial_state

    @property
    def bits(self) -> int:
        """Digest size in bits (224 or 256)."""
        return self.digest_size * 8

    @classmethod
    def from_name(cls, value: Union['Variant', str, int]) -> 'Variant':
        """
        Resolve a variant from a loose selector.

        Accepts a Variant, the integers 224 / 256, or strings such as
        "224", "sha256", "SHA-224" and "sha_256".

        Raises:
            ValueError: If the selector names no known variant
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower().replace('-', '').replace('_', '')
        if key.startswith('sha'):
            key = key[3:]

        for variant in cls:
            if key == str(variant.bits):
                return variant
        raise ValueError(f"Unknown SHA-2 variant: {value!r}")


DEFAULT_VARIANT = Variant.SHA256


def pad_message(length: int) -> bytes:
    """
    Build the padding suffix for a message of `length` bytes.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    Args:
        length: Original message length in bytes

    Returns:
        Suffix that brings the message to a multiple of 64 bytes
    """
    bit_length = (length * 8) & MAX_BIT_LENGTH_MASK
    zeros = (BLOCK_SIZE - LENGTH_FIELD_SIZE - 1 - length) % BLOCK_SIZE
    return b'\x80' + b'\x00' * zeros + bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big')


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _serialize(state: Tuple[int, ...], variant: Variant) -> bytes:
    """Big-endian words of the state, truncated to the variant's digest size."""
    digest = b''.join(word.to_bytes(4, byteorder='big') for word in state)
    return digest[:variant.digest_size]


class SHA2Hash:
    """
    Streaming SHA-224 / SHA-256 digest engine.

    The concatenation of all `update` calls is the hashed message.
    `finalize` is the terminal transition: afterwards `update` and
    `finalize` raise InvalidStateError. `digest` and `hexdigest` do not
    consume the engine and may be called at any time.

    Example:
        >>> h = SHA2Hash(Variant.SHA224)
        >>> h.update(b"abc")
        >>> h.update(b"de")
        >>> h.hexdigest()
        'bdd03d560993e675516ba5a50638b6531ac2ac3d5847c61916cfced6'
    """

    block_size = BLOCK_SIZE

    def __init__(self, variant: Union[Variant, str, int] = DEFAULT_VARIANT,
                 data: BytesLike = b""):
        """
        Initialize a digest engine.

        Args:
            variant: Variant or selector accepted by Variant.from_name
            data: Optional initial message bytes
        """
        self._variant = Variant.from_name(variant)
        self._state: Tuple[int, ...] = self._variant.initial_state
        self._buffer = b""
        self._length = 0
        self._result = None
        self.update(data)

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def name(self) -> str:
        return self._variant.label

    @property
    def digest_size(self) -> int:
        return self._variant.digest_size

    @property
    def length(self) -> int:
        """Total number of message bytes consumed so far."""
        return self._length

    @property
    def finalized(self) -> bool:
        return self._result is not None

    def _check_open(self, operation: str):
        if self._result is not None:
            raise InvalidStateError(f"{operation}() called on a finalized {self.name} digest")

    def update(self, data: BytesLike) -> None:
        """
        Feed more message bytes.

        Complete 64-byte blocks are compressed immediately; the remainder
        (0-63 bytes) is kept in the pending buffer.

        Raises:
            TypeError: If data is not bytes-like
            InvalidStateError: If the engine has been finalized
        """
        self._check_open("update")
        data = _as_bytes(data)

        buf = self._buffer + data
        full = len(buf) - len(buf) % BLOCK_SIZE

        state = self._state
        for i in range(0, full, BLOCK_SIZE):
            state = compress_block(state, buf[i:i + BLOCK_SIZE])

        self._state = state
        self._buffer = buf[full:]
        self._length += len(data)

    def _final_state(self) -> Tuple[int, ...]:
        """Pad the pending buffer and compress the final one or two blocks."""
        tail = self._buffer + pad_message(self._length)
        state = self._state
        for i in range(0, len(tail), BLOCK_SIZE):
            state = compress_block(state, tail[i:i + BLOCK_SIZE])

        logger.debug(
            "%s: %d message bytes, %d blocks compressed",
            self.name, self._length, (self._length - len(self._buffer) + len(tail)) // BLOCK_SIZE,
        )
        return state

    def finalize(self) -> bytes:
        """
        Finish the computation and return the digest.

        Returns:
            28-byte (SHA-224) or 32-byte (SHA-256) digest

        Raises:
            InvalidStateError: If called more than once
        """
        self._check_open("finalize")
        self._result = _serialize(self._final_state(), self._variant)
        self._buffer = b""
        return self._result

    def digest(self) -> bytes:
        """Digest of the data fed so far, without finalizing the engine."""
        if self._result is not None:
            return self._result
        return _serialize(self._final_state(), self._variant)

    def hexdigest(self) -> str:
        """Digest as a lowercase hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> 'SHA2Hash':
        """
        Return an independent clone of this engine.

        Raises:
            InvalidStateError: If the engine has been finalized
        """
        self._check_open("copy")
        clone = self.__class__(self._variant)
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone

    def __repr__(self) -> str:
        status = "finalized" if self.finalized else "accumulating"
        return f"<SHA2Hash {self.name} {status} length={self._length}>"


# ============================================================================
# Functional Interface
# ============================================================================

def new(variant: Union[Variant, str, int] = DEFAULT_VARIANT, data: BytesLike = b"") -> SHA2Hash:
    """Create a digest engine, like hashlib.new."""
    return SHA2Hash(variant, data)


def create(variant: Union[Variant, str, int]) -> SHA2Hash:
    """Create an empty digest engine for the given variant."""
    return SHA2Hash(variant)


def feed(handle: SHA2Hash, data: BytesLike) -> None:
    """Feed a chunk of message bytes into an engine."""
    handle.update(data)


def finish(handle: SHA2Hash) -> bytes:
    """Finalize an engine and return its digest."""
    return handle.finalize()


def compute_digest(variant: Union[Variant, str, int], data: BytesLike) -> bytes:
    """
    Compute the digest of a complete message in one call.

    Args:
        variant: SHA-224 or SHA-256 selector
        data: Input bytes to hash (may be empty)

    Returns:
        28 or 32 byte digest
    """
    engine = SHA2Hash(variant)
    engine.update(data)
    return engine.finalize()


def digest(variant: Union[Variant, str, int], data: BytesLike) -> bytes:
    """Alias of compute_digest."""
    return compute_digest(variant, data)


def sha256(data: BytesLike) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return compute_digest(Variant.SHA256, data)


def sha224(data: BytesLike) -> bytes:
    """Compute the SHA-224 hash of the input data."""
    return compute_digest(Variant.SHA224, data)


def sha256_hex(data: BytesLike) -> str:
    """Compute SHA-256 hash and return as hexadecimal string."""
    return sha256(data).hex()


def sha224_hex(data: BytesLike) -> str:
    """Compute SHA-224 hash and return as hexadecimal string."""
    return sha224(data).hex()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
