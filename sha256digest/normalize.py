"""
Input normalization for in-memory digesting.

Every accepted input shape is converted to the bytes the caller meant to
hash. Text is encoded as UTF-8; byte sequences pass through unchanged.
Nothing is case-folded, trimmed, or otherwise transformed.

Accepted shapes:
- ``str`` (any length; a single character hashes as its UTF-8 bytes,
  not its code point number)
- ``bytes``
- ``bytearray`` and ``memoryview``

Paths are not accepted here. Use the file API to hash file contents.
Strings that have no UTF-8 encoding (lone surrogates such as U+D800)
are rejected with ``UnsupportedInputError``.
"""

from __future__ import annotations

from functools import singledispatch

from sha256digest.errors import UnsupportedInputError


@singledispatch
def as_bytes(value: object) -> bytes:
    raise UnsupportedInputError(
        "digest expects str, bytes, bytearray or memoryview, "
        f"got {type(value).__name__}"
    )


@as_bytes.register
def _(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnsupportedInputError(
            "digest cannot encode str as UTF-8 (lone surrogate at "
            f"index {exc.start})"
        ) from exc


@as_bytes.register
def _(value: bytes) -> bytes:
    return value


@as_bytes.register
def _(value: bytearray) -> bytes:
    # Freeze the mutable buffer so it cannot change mid-hash.
    return bytes(value)


@as_bytes.register
def _(value: memoryview) -> bytes:
    return value.tobytes()
