"""
Streaming calculator shared by the synchronous and asynchronous file paths.

Both paths feed chunks through the same ``Calculator`` so that the
update/finalize sequence is identical regardless of how bytes arrive.
"""

from __future__ import annotations

from sha256digest.backends import BackendSelector, HashState, get_backend
from sha256digest.encoding import to_hex
from sha256digest.errors import CalculatorFinalizedError


class Calculator:
    """
    Single-owner incremental digest.

    States: updating -> finalized. Once ``hexdigest`` has been called the
    underlying hash state is released and further use raises
    ``CalculatorFinalizedError``.
    """

    def __init__(self, state: HashState) -> None:
        self._state: HashState | None = state
        self.bytes_processed = 0

    @classmethod
    def for_backend(cls, backend: BackendSelector = None) -> "Calculator":
        return cls(get_backend(backend).new())

    @property
    def finalized(self) -> bool:
        return self._state is None

    def update(self, chunk: bytes) -> None:
        if self._state is None:
            raise CalculatorFinalizedError(
                "Cannot update a calculator after it has been finalized"
            )
        self._state.update(chunk)
        self.bytes_processed += len(chunk)

    def hexdigest(self) -> str:
        if self._state is None:
            raise CalculatorFinalizedError("Calculator already finalized")
        state, self._state = self._state, None
        return to_hex(state.finalize())
