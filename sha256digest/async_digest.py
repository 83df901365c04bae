"""
Asynchronous SHA-256 file digest API.

Mirrors ``try_digest`` but performs file I/O through anyio, so the event
loop is never blocked by disk reads. Chunk reads are awaited strictly in
file order against a single handle; every read is a suspension point and
hash updates never straddle one.

Resource handling:
    The file handle is closed on every exit path, including I/O errors
    and cancellation of the enclosing task. Closing happens inside a
    shielded cancel scope so a pending cancellation cannot skip it.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import anyio

from sha256digest.backends import BackendSelector, HashState, get_backend
from sha256digest.calculator import Calculator
from sha256digest.config import get_config
from sha256digest.sync_digest import StrPath, resolve_chunk_size
from sha256digest.errors import AsyncDigestDisabledError

logger = logging.getLogger(__name__)


class AsyncReader(Protocol):
    """Anything that can fill a buffer asynchronously (e.g. ``anyio.AsyncFile``)."""

    async def readinto(self, b) -> int:
        ...


async def async_calc(
    reader: AsyncReader,
    state: HashState,
    chunk_size: int,
) -> str:
    """
    Await ``reader`` chunk by chunk into ``state`` and return the hex digest.

    Same buffer discipline as the synchronous ``calc``: one buffer of
    ``chunk_size`` bytes, reused for every read.
    """
    calculator = Calculator(state)
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    while True:
        n = await reader.readinto(view)
        if not n:
            break
        calculator.update(view[:n])
    return calculator.hexdigest()


async def try_async_digest(
    path: StrPath,
    *,
    backend: BackendSelector = None,
    chunk_size: Optional[int] = None,
) -> str:
    """
    Compute the SHA-256 hex digest of a file without blocking the event loop.

    Raises:
        AsyncDigestDisabledError: ``ENABLE_ASYNC`` is off.
        FileNotFoundError: the path does not exist.
        PermissionError: the file exists but cannot be read.
        OSError: any other failure opening or reading the file.
    """
    if not get_config().ENABLE_ASYNC:
        raise AsyncDigestDisabledError(
            "Asynchronous digesting is disabled "
            "(SHA256DIGEST_ENABLE_ASYNC=false)"
        )

    engine = get_backend(backend)
    size = resolve_chunk_size(chunk_size)

    logger.debug(
        "try_async_digest: path=%s backend=%s chunk_size=%d",
        path,
        engine.name,
        size,
    )

    try:
        f = await anyio.open_file(path, "rb")
    except OSError as exc:
        logger.warning("try_async_digest: cannot open %s: %s", path, exc)
        raise

    try:
        hex_digest = await async_calc(f, engine.new(), size)
    except OSError as exc:
        logger.warning("try_async_digest: cannot read %s: %s", path, exc)
        raise
    finally:
        with anyio.CancelScope(shield=True):
            await f.aclose()

    logger.debug("try_async_digest: completed path=%s", path)
    return hex_digest


async def try_async_openssl_digest(
    path: StrPath,
    *,
    chunk_size: Optional[int] = None,
) -> str:
    """``try_async_digest`` pinned to the OpenSSL engine."""
    return await try_async_digest(
        path,
        backend="openssl",
        chunk_size=chunk_size,
    )
