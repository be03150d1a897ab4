"""Port protocols for randkit - pure abstractions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EntropySource(Protocol):
    """
    Source of raw random bits.
    Owned by the caller and threaded through every run.
    Never stored inside a generator.
    """

    def next(self) -> int:
        """Return the next 64-bit unsigned integer."""
        ...
