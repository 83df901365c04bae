"""
Native SHA-256 engine backed by OpenSSL through ``cryptography``.

``cryptography`` binds the OpenSSL library shipped in its wheels, so this
engine does not depend on how the interpreter's own ``hashlib`` was built.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes


class OpenSslState:
    def __init__(self) -> None:
        self._ctx = hashes.Hash(hashes.SHA256())

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def finalize(self) -> bytes:
        return self._ctx.finalize()


class OpenSslBackend:
    """OpenSSL SHA-256 via ``cryptography.hazmat.primitives.hashes``."""

    name = "openssl"

    def digest(self, data: bytes) -> bytes:
        ctx = hashes.Hash(hashes.SHA256())
        ctx.update(data)
        return ctx.finalize()

    def new(self) -> OpenSslState:
        return OpenSslState()
