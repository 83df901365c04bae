"""
Synchronous SHA-256 digest API.

In-memory digests are total over accepted input: any supported shape
yields a 64-character lowercase hex string, and only the
``SHA256DIGEST_BACKEND`` setting is consulted. File digests stream the
file through a fixed-size chunk buffer, so memory use stays constant
regardless of file size. File errors propagate as ``OSError``
subclasses; a partial hex string is never returned.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import BinaryIO, Optional, Union

from sha256digest.backends import BackendSelector, HashState, get_backend
from sha256digest.calculator import Calculator
from sha256digest.config import MAX_CHUNK_SIZE, get_config
from sha256digest.encoding import to_hex
from sha256digest.normalize import as_bytes

logger = logging.getLogger(__name__)

StrPath = Union[str, os.PathLike]


def resolve_chunk_size(chunk_size: Optional[int]) -> int:
    """
    Per-call chunk size, or the configured one when ``None``.

    Per-call values obey the same bounds as ``DigestConfig.CHUNK_SIZE``.
    """
    if chunk_size is None:
        return get_config().CHUNK_SIZE
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise TypeError(
            f"chunk_size must be an int, got {type(chunk_size).__name__}"
        )
    if not 1 <= chunk_size <= MAX_CHUNK_SIZE:
        raise ValueError(
            f"chunk_size must be between 1 and {MAX_CHUNK_SIZE}, "
            f"got {chunk_size}"
        )
    return chunk_size


# ------------------------------------------------------------------
# In-memory digests
# ------------------------------------------------------------------


def digest(value, *, backend: BackendSelector = None) -> str:
    """
    Compute the SHA-256 hex digest of in-memory data.

    Args:
        value:
            ``str`` (hashed as UTF-8), ``bytes``, ``bytearray`` or
            ``memoryview``.
        backend:
            Engine name or object. Defaults to the configured engine.

    Returns:
        64-character lowercase hex string.

    Raises:
        UnsupportedInputError: ``value`` is not an accepted shape, or is a
            ``str`` with no UTF-8 encoding.

    Example:
        >>> digest("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return to_hex(get_backend(backend).digest(as_bytes(value)))


def digest_bytes(data: bytes) -> str:
    """Deprecated: use ``digest()``."""
    warnings.warn(
        "digest_bytes() is deprecated, use digest() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return digest(data)


# ------------------------------------------------------------------
# File digests
# ------------------------------------------------------------------


def calc(reader: BinaryIO, state: HashState, chunk_size: int) -> str:
    """
    Stream ``reader`` into ``state`` until EOF and return the hex digest.

    One buffer of ``chunk_size`` bytes is allocated and reused for every
    read.
    """
    calculator = Calculator(state)
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    while True:
        n = reader.readinto(view)
        if not n:
            break
        calculator.update(view[:n])
    return calculator.hexdigest()


def try_digest(
    path: StrPath,
    *,
    backend: BackendSelector = None,
    chunk_size: Optional[int] = None,
) -> str:
    """
    Compute the SHA-256 hex digest of a file's contents.

    An empty file yields the digest of the empty byte sequence.

    Raises:
        FileNotFoundError: the path does not exist.
        PermissionError: the file exists but cannot be read.
        OSError: any other failure opening or reading the file.
    """
    engine = get_backend(backend)
    size = resolve_chunk_size(chunk_size)

    logger.debug(
        "try_digest: path=%s backend=%s chunk_size=%d",
        path,
        engine.name,
        size,
    )

    try:
        with open(path, "rb") as f:
            hex_digest = calc(f, engine.new(), size)
    except OSError as exc:
        logger.warning("try_digest: cannot read %s: %s", path, exc)
        raise

    logger.debug("try_digest: completed path=%s", path)
    return hex_digest


def digest_file(path: StrPath) -> str:
    """Deprecated: use ``try_digest()``."""
    warnings.warn(
        "digest_file() is deprecated, use try_digest() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return try_digest(path)
