"""
SHA-256 Block Compression

Implements the per-block compression step shared by SHA-224 and SHA-256
as defined in FIPS 180-4, section 6.2.2.

Components:
- Round constants: 64 fixed 32-bit words
- Message Schedule: Expands one 512-bit block into 64 words
- Compression: 64 rounds folded back into the chaining state
"""

from typing import List, Sequence, Tuple


# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

# Size of one message block in bytes (512 bits)
BLOCK_SIZE = 64

# Number of 32-bit words in the chaining state
STATE_WORDS = 8

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


def right_rotate(value: int, amount: int) -> int:
    """Rotate the 32-bit word `value` right by `amount` bits."""
    value &= MASK_32
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Ch(x, y, z): each bit of x picks the bit from y (set) or z (clear)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Maj(x, y, z): each result bit is the one held by at least two inputs."""
    return (x & y) ^ (x & z) ^ (y & z)


def small_sigma0(x: int) -> int:
    """σ0 for schedule words: ROTR 7, ROTR 18, SHR 3."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    """σ1 for schedule words: ROTR 17, ROTR 19, SHR 10."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def big_sigma0(x: int) -> int:
    """Σ0 applied to working variable a: ROTR 2, 13, 22."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def big_sigma1(x: int) -> int:
    """Σ1 applied to working variable e: ROTR 6, 11, 25."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


def message_schedule(block: bytes) -> List[int]:
    """
    Expand a 64-byte block into the 64-word message schedule.

    Words 0..15 are read big-endian from the block; for i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]

    Args:
        block: Exactly 64 bytes of (padded) message

    Returns:
        List of 64 32-bit words

    Raises:
        ValueError: If block is not 64 bytes long
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE}-byte block, got {len(block)}")

    w = [int.from_bytes(block[i:i + 4], byteorder='big') for i in range(0, BLOCK_SIZE, 4)]
    for i in range(16, 64):
        s0 = small_sigma0(w[i - 15])
        s1 = small_sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def compress_block(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    """
    Compress one message block into the chaining state.

    The input state is not modified; a new 8-word state is returned.

    Args:
        state: Current chaining state (8 32-bit words)
        block: 64-byte message block

    Returns:
        Updated chaining state as a tuple of 8 words
    """
    if len(state) != STATE_WORDS:
        raise ValueError(f"Expected {STATE_WORDS} state words, got {len(state)}")

    w = message_schedule(block)

    # Initialize working variables
    a, b, c, d, e, f, g, h = state

    for i in range(64):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    # Add compressed chunk to current hash value
    return tuple(
        (prev + cur) & MASK_32
        for prev, cur in zip(state, (a, b, c, d, e, f, g, h))
    )
