import io

import anyio
import pytest

from sha256digest import (
    AsyncDigestDisabledError,
    EMPTY_DIGEST,
    async_calc,
    calc,
    digest,
    try_async_digest,
    try_async_openssl_digest,
    try_digest,
)
from sha256digest.backends import get_backend
from sha256digest.config import get_config

from sha256digest.tests.fixtures.file_factory import (
    HELLO_DIGEST,
    LARGE_FILE_DIGEST,
    RAMP_4K_DIGEST,
    large_file,
    ramp_bytes,
    write_file,
)

pytestmark = pytest.mark.anyio


# ------------------------------------------------------------------
# Test readers
# ------------------------------------------------------------------

class TricklingReader:
    """
    Serves at most ``piece`` bytes per read and yields to the scheduler
    before every read, forcing a suspension at each chunk boundary.
    """

    def __init__(self, data: bytes, piece: int = 64) -> None:
        self._data = data
        self._pos = 0
        self._piece = piece

    async def readinto(self, b) -> int:
        await anyio.sleep(0)
        n = min(len(b), self._piece, len(self._data) - self._pos)
        b[:n] = self._data[self._pos:self._pos + n]
        self._pos += n
        return n


class StallingFile:
    """Returns one chunk, then blocks forever on the next read."""

    def __init__(self) -> None:
        self.stalled = anyio.Event()
        self.closed = False
        self._served = False

    async def readinto(self, b) -> int:
        if not self._served:
            self._served = True
            b[:] = b"x" * len(b)
            return len(b)
        self.stalled.set()
        await anyio.sleep_forever()

    async def aclose(self) -> None:
        await anyio.sleep(0)
        self.closed = True


class FailingFile:
    def __init__(self) -> None:
        self.closed = False

    async def readinto(self, b) -> int:
        raise OSError("simulated read failure")

    async def aclose(self) -> None:
        self.closed = True


# ------------------------------------------------------------------
# Observable contract
# ------------------------------------------------------------------

async def test_async_digest_matches_sync_digest(tmp_path):
    path = write_file(tmp_path, "ramp.bin", ramp_bytes(0x1000))

    assert await try_async_digest(path) == try_digest(path) == RAMP_4K_DIGEST


async def test_async_digest_of_empty_file(tmp_path):
    path = write_file(tmp_path, "empty.bin", b"")

    assert await try_async_digest(path) == EMPTY_DIGEST


@pytest.mark.parametrize("backend", ["hashlib", "openssl"])
async def test_async_large_file(tmp_path, backend):
    path = large_file(tmp_path)

    assert await try_async_digest(path, backend=backend) == LARGE_FILE_DIGEST


async def test_async_openssl_entry_point(tmp_path):
    path = write_file(tmp_path, "hello.txt", b"hello")

    assert await try_async_openssl_digest(path) == HELLO_DIGEST


async def test_async_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        await try_async_digest(tmp_path / "does-not-exist.bin")


async def test_async_directory_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        await try_async_digest(tmp_path)


async def test_async_disabled_by_configuration(tmp_path, monkeypatch):
    monkeypatch.setenv("SHA256DIGEST_ENABLE_ASYNC", "false")
    get_config.cache_clear()
    path = write_file(tmp_path, "hello.txt", b"hello")

    with pytest.raises(AsyncDigestDisabledError):
        await try_async_digest(path)

    # The synchronous path is unaffected
    assert try_digest(path) == HELLO_DIGEST


# ------------------------------------------------------------------
# Parity under forced suspension
# ------------------------------------------------------------------

@pytest.mark.parametrize("backend", ["hashlib", "openssl"])
async def test_async_parity_with_suspension_at_every_read(backend):
    data = ramp_bytes(0x1000)
    engine = get_backend(backend)

    async_res = await async_calc(TricklingReader(data), engine.new(), 1024)

    sync_res = calc(io.BytesIO(data), engine.new(), 1024)

    assert digest(data) == async_res == sync_res == RAMP_4K_DIGEST


# ------------------------------------------------------------------
# Handle release
# ------------------------------------------------------------------

async def test_cancellation_releases_file_handle(tmp_path, monkeypatch):
    handle = StallingFile()

    async def fake_open_file(path, mode):
        return handle

    monkeypatch.setattr(anyio, "open_file", fake_open_file)

    async with anyio.create_task_group() as tg:
        tg.start_soon(try_async_digest, tmp_path / "stalls.bin")
        await handle.stalled.wait()
        tg.cancel_scope.cancel()

    assert handle.closed


async def test_read_error_releases_file_handle(tmp_path, monkeypatch):
    handle = FailingFile()

    async def fake_open_file(path, mode):
        return handle

    monkeypatch.setattr(anyio, "open_file", fake_open_file)

    with pytest.raises(OSError, match="simulated read failure"):
        await try_async_digest(tmp_path / "fails.bin")

    assert handle.closed
