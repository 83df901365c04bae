from __future__ import annotations

from typing import Protocol, runtime_checkable


class HashState(Protocol):
    """
    Incremental SHA-256 state owned by a single digest operation.

    ``update`` may be called any number of times, in input order.
    ``finalize`` is called exactly once and returns the 32-byte digest.
    """

    def update(self, data: bytes) -> None:
        ...

    def finalize(self) -> bytes:
        ...


@runtime_checkable
class HashBackend(Protocol):
    """
    Interface implemented by every SHA-256 engine.

    Implementations must be:
    - bit-identical to every other engine for identical input
    - stateless across calls (each ``new()`` is independent)
    - invisible in returned values
    """

    name: str

    def digest(self, data: bytes) -> bytes:
        """One-shot digest of ``data``."""
        ...

    def new(self) -> HashState:
        ...
