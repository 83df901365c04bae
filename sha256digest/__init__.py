"""
SHA-256 digests of strings, byte buffers and files as lowercase hex.

    >>> from sha256digest import digest
    >>> digest("hello")
    '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'

Files are streamed in fixed-size chunks, synchronously via ``try_digest``
or without blocking the event loop via ``try_async_digest``.
"""

from .async_digest import async_calc, try_async_digest, try_async_openssl_digest
from .backends import HashBackend, HashState, available_backends, get_backend
from .calculator import Calculator
from .config import DigestConfig, configured_backend, get_config
from .sync_digest import calc, digest, digest_bytes, digest_file, try_digest
from .encoding import DIGEST_SIZE, EMPTY_DIGEST, HEX_DIGEST_LENGTH, to_hex
from .errors import (
    AsyncDigestDisabledError,
    CalculatorFinalizedError,
    ConfigurationError,
    Sha256DigestError,
    UnknownBackendError,
    UnsupportedInputError,
)

__all__ = [
    "digest",
    "try_digest",
    "digest_file",
    "digest_bytes",
    "calc",
    "try_async_digest",
    "try_async_openssl_digest",
    "async_calc",
    "Calculator",
    "HashBackend",
    "HashState",
    "available_backends",
    "get_backend",
    "DigestConfig",
    "get_config",
    "configured_backend",
    "to_hex",
    "DIGEST_SIZE",
    "HEX_DIGEST_LENGTH",
    "EMPTY_DIGEST",
    "Sha256DigestError",
    "UnsupportedInputError",
    "UnknownBackendError",
    "CalculatorFinalizedError",
    "ConfigurationError",
    "AsyncDigestDisabledError",
]
