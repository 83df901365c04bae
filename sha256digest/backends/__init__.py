"""
SHA-256 engine selection.

Exactly one engine serves each call. Callers pick it by name, pass an
engine object directly, or leave the choice to ``DigestConfig.BACKEND``.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from sha256digest.backends.base import HashBackend, HashState
from sha256digest.backends.hashlib_backend import HashlibBackend
from sha256digest.backends.openssl_backend import OpenSslBackend
from sha256digest.config import configured_backend
from sha256digest.errors import UnknownBackendError

BackendSelector = Union[str, HashBackend, None]

_BACKENDS: Dict[str, HashBackend] = {
    HashlibBackend.name: HashlibBackend(),
    OpenSslBackend.name: OpenSslBackend(),
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def get_backend(selector: BackendSelector = None) -> HashBackend:
    """
    Resolve a hash engine.

    Args:
        selector:
            ``None`` for the configured default, a registered engine
            name (``"hashlib"`` or ``"openssl"``), or an object that
            already implements ``HashBackend``.

    Raises:
        UnknownBackendError: if a name is not registered, or the
            selector is neither a name nor a ``HashBackend``.
    """
    if selector is None:
        selector = configured_backend()

    if not isinstance(selector, str):
        if isinstance(selector, HashBackend):
            return selector
        raise UnknownBackendError(
            "Backend must be a name or a HashBackend, "
            f"got {type(selector).__name__}"
        )

    backend: Optional[HashBackend] = _BACKENDS.get(selector.strip().lower())
    if backend is None:
        raise UnknownBackendError(
            f"Unknown hash backend '{selector}'. "
            f"Available backends: {available_backends()}"
        )
    return backend


__all__ = [
    "BackendSelector",
    "HashBackend",
    "HashState",
    "HashlibBackend",
    "OpenSslBackend",
    "available_backends",
    "get_backend",
]
