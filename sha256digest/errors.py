"""
Exception hierarchy for sha256digest.

File access failures are deliberately absent from this module: they are
raised as the interpreter's own ``OSError`` family (``FileNotFoundError``,
``PermissionError``, ...) and propagate to the caller unchanged.
"""


class Sha256DigestError(Exception):
    """Library base exception."""


class UnsupportedInputError(Sha256DigestError, TypeError):
    """Value cannot be viewed as bytes for in-memory digesting."""


class UnknownBackendError(Sha256DigestError, ValueError):
    """Backend selector does not name a registered hash engine."""


class CalculatorFinalizedError(Sha256DigestError, RuntimeError):
    """Hash state was updated or finalized after it was already finalized."""


class AsyncDigestDisabledError(Sha256DigestError, RuntimeError):
    """Asynchronous file digesting is switched off in configuration."""


class ConfigurationError(Sha256DigestError, ValueError):
    """An ``SHA256DIGEST_*`` environment variable holds an invalid value."""
