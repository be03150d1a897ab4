"""Generator - core sampling primitive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from randkit.kernel.ports import EntropySource
from randkit.kernel.source import default_source

T = TypeVar("T")


# Extension registry - class-level storage for Generator operations
_extensions_registry: dict[str, Callable[..., Any]] = {}


class Generator(ABC, Generic[T]):
    """Immutable description of how to derive a value from an entropy source.

    Building a pipeline never executes it. `run` threads one mutable
    source depth-first, left-to-right through the composed structure.

    Combinator operations (map, filter, zip, ...) are registered by the
    modules that define them via register_op().
    """

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation on the Generator class.

        Args:
            name: The operation name (e.g., "map")
            fn: Function taking the generator as its first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered operations as methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            # Bind the function to this instance
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    @abstractmethod
    def _run(self, source: EntropySource) -> T:
        """Produce one value, drawing from source."""

    def run(self, source: EntropySource | None = None) -> T:
        """Sample one value.

        Args:
            source: Entropy source to draw from. A fresh system source
                is used when omitted.

        Returns:
            The sampled value
        """
        if source is None:
            source = default_source()
        return self._run(source)
