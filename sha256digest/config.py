"""
Runtime configuration for sha256digest.

This module centralizes the environment-driven switches of the library:
which hash engine is used when a call does not pick one, whether the
asynchronous file API is available, and the size of the chunk buffer used
when streaming files.

Configuration is read-only at runtime and must never influence digest
values. Every backend and every chunk size yields the same hex string for
the same bytes.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, field_validator

from sha256digest.errors import ConfigurationError

BACKEND_NAMES = frozenset({"hashlib", "openssl"})

MAX_CHUNK_SIZE = 16 * 1024 * 1024

ENV_VARS = {
    "BACKEND": "SHA256DIGEST_BACKEND",
    "ENABLE_ASYNC": "SHA256DIGEST_ENABLE_ASYNC",
    "CHUNK_SIZE": "SHA256DIGEST_CHUNK_SIZE",
}


class DigestConfig(BaseModel):
    """
    Runtime configuration for sha256digest.

    Parsed once, frozen afterwards.
    """

    # ------------------------------------------------------------------
    # Engine selection
    # ------------------------------------------------------------------

    BACKEND: str = Field(
        "hashlib",
        description=(
            "Default hash engine: 'hashlib' (software, default) or "
            "'openssl' (native library via cryptography)"
        ),
    )

    # ------------------------------------------------------------------
    # Capability gates
    # ------------------------------------------------------------------

    ENABLE_ASYNC: bool = Field(
        True,
        description="Enable the non-blocking file digest API",
    )

    # ------------------------------------------------------------------
    # Resource limits
    # ------------------------------------------------------------------

    CHUNK_SIZE: int = Field(
        1024,
        ge=1,
        le=MAX_CHUNK_SIZE,
        description="Bytes read per chunk when streaming a file",
    )

    # ------------------------------------------------------------------
    # Validators (Pydantic v2)
    # ------------------------------------------------------------------

    @field_validator("BACKEND")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in BACKEND_NAMES:
            raise ValueError(
                f"Unsupported BACKEND '{v}'. "
                f"Allowed values: {sorted(BACKEND_NAMES)}"
            )
        return v

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "DigestConfig":
        """
        Load configuration from environment variables.

        Unset variables fall back to the field defaults. Raw strings are
        handed to pydantic, so every malformed value is reported the same
        way.

        Raises:
            ConfigurationError: naming each offending variable.
        """

        def env_bool(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        try:
            return cls(
                BACKEND=os.getenv(ENV_VARS["BACKEND"], "hashlib"),
                ENABLE_ASYNC=env_bool(ENV_VARS["ENABLE_ASYNC"], True),
                CHUNK_SIZE=os.getenv(ENV_VARS["CHUNK_SIZE"], "1024"),
            )
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    model_config = {
        "frozen": True,
    }


def _configuration_error(exc: ValidationError) -> ConfigurationError:
    problems = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        name = ENV_VARS.get(field, field)
        problems.append(f"{name}={error.get('input')!r}: {error['msg']}")
    return ConfigurationError(
        "Invalid sha256digest configuration: " + "; ".join(problems)
    )


@lru_cache(maxsize=1)
def get_config() -> DigestConfig:
    """
    Process-wide configuration, read from the environment on first use.

    Call ``get_config.cache_clear()`` to force a re-read.
    """
    return DigestConfig.from_env()


def configured_backend() -> str:
    """
    Default engine name, read from ``SHA256DIGEST_BACKEND`` alone.

    In-memory digesting resolves its engine through this accessor so that
    file-only settings such as ``SHA256DIGEST_CHUNK_SIZE`` can never make
    it fail.
    """
    return _validated_backend(os.getenv(ENV_VARS["BACKEND"], "hashlib"))


@lru_cache(maxsize=8)
def _validated_backend(raw: str) -> str:
    try:
        return DigestConfig(BACKEND=raw).BACKEND
    except ValidationError as exc:
        raise _configuration_error(exc) from exc
