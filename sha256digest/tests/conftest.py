import pytest

from sha256digest.config import get_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in (
        "SHA256DIGEST_BACKEND",
        "SHA256DIGEST_ENABLE_ASYNC",
        "SHA256DIGEST_CHUNK_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
