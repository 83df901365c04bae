"""
Software SHA-256 engine backed by the standard library ``hashlib``.

This is the default engine. It needs nothing beyond the interpreter.
"""

from __future__ import annotations

import hashlib


class HashlibState:
    def __init__(self) -> None:
        self._hash = hashlib.sha256()

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def finalize(self) -> bytes:
        return self._hash.digest()


class HashlibBackend:
    """Default implementation: ``hashlib.sha256``."""

    name = "hashlib"

    def digest(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    def new(self) -> HashlibState:
        return HashlibState()
