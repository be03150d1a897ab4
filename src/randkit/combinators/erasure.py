"""Type erasure - hide a composed generator behind a boxed closure."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource

T = TypeVar("T")


@dataclass(frozen=True)
class AnyGenerator(Generator[T], Generic[T]):
    """A generator reduced to a `(source) -> value` closure.

    Useful for storing generators of different composed shapes side by
    side, or returning one from a function without exposing its structure.

    Example:
        >>> doubled = AnyGenerator(lambda source: int_in(source, 1, 100) * 2)
    """

    box: Callable[[EntropySource], T]

    @classmethod
    def of(cls, generator: Generator[T]) -> AnyGenerator[T]:
        if isinstance(generator, AnyGenerator):
            return generator
        return cls(generator.run)

    def _run(self, source: EntropySource) -> T:
        return self.box(source)

    def erase(self) -> AnyGenerator[T]:
        return self


def erase(self: Generator[T]) -> AnyGenerator[T]:
    return AnyGenerator.of(self)


Generator.register_op("erase", erase)
