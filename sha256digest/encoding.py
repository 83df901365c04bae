"""
Hex rendering of SHA-256 digests.

A digest maps to exactly one hex string: two lowercase hex digits per
byte, most-significant nibble first, no prefix, no separators.
"""

from __future__ import annotations

DIGEST_SIZE = 32
HEX_DIGEST_LENGTH = DIGEST_SIZE * 2

# SHA-256 of the empty byte sequence.
EMPTY_DIGEST = (
    "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
)


def to_hex(digest: bytes) -> str:
    """Render a 32-byte digest as a 64-character lowercase hex string."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(
            f"SHA-256 digest must be {DIGEST_SIZE} bytes, got {len(digest)}"
        )
    return digest.hex()
