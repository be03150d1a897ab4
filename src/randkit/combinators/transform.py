"""Transformation combinators: map, flat_map, compact_map, try_map."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.result import Outcome

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Map(Generator[R], Generic[T, R]):
    """Sample upstream once and apply transform."""

    upstream: Generator[T]
    transform: Callable[[T], R]

    def _run(self, source: EntropySource) -> R:
        return self.transform(self.upstream.run(source))

    def map(self, transform: Callable[[R], T]) -> Map:
        """Compose with the existing transform instead of nesting another Map."""
        inner = self.transform
        return Map(self.upstream, lambda value: transform(inner(value)))


@dataclass(frozen=True)
class FlatMap(Generator[R], Generic[T, R]):
    """Sample upstream, build a new generator from the value, then sample that.

    The generator returned by transform is run with the same source,
    so dependent generation stays reproducible under a seeded source.
    """

    upstream: Generator[T]
    transform: Callable[[T], Generator[R]]

    def _run(self, source: EntropySource) -> R:
        return self.transform(self.upstream.run(source)).run(source)


@dataclass(frozen=True)
class CompactMap(Generator[R], Generic[T, R]):
    """Resample upstream until transform returns something other than None.

    Unbounded: a transform that always declines never terminates.
    Use retry_map for a capped variant.
    """

    upstream: Generator[T]
    transform: Callable[[T], R | None]

    def _run(self, source: EntropySource) -> R:
        while True:
            value = self.transform(self.upstream.run(source))
            if value is not None:
                return value


@dataclass(frozen=True)
class TryMap(Generator[Outcome[R]], Generic[T, R]):
    """Sample once and apply a transform that may raise.

    Exceptions are captured into Outcome.failure; nothing is retried.
    """

    upstream: Generator[T]
    transform: Callable[[T], R]

    def _run(self, source: EntropySource) -> Outcome[R]:
        value = self.upstream.run(source)
        try:
            return Outcome.success(self.transform(value))
        except Exception as exc:
            return Outcome.failure(exc)


def map_(self: Generator[T], transform: Callable[[T], R]) -> Generator[R]:
    """Transform every sampled value.

    Example:
        >>> integers(1, 6).map(lambda n: f"You rolled a {n}")
    """
    return Map(self, transform)


def flat_map(self: Generator[T], transform: Callable[[T], Generator[R]]) -> Generator[R]:
    """Choose the next generator based on a sampled value.

    Example:
        >>> integers(1, 5).flat_map(lambda n: letters.array(n))
    """
    return FlatMap(self, transform)


def compact_map(self: Generator[T], transform: Callable[[T], R | None]) -> Generator[R]:
    return CompactMap(self, transform)


def try_map(self: Generator[T], transform: Callable[[T], R]) -> Generator[Outcome[R]]:
    return TryMap(self, transform)


Generator.register_op("map", map_)
Generator.register_op("flat_map", flat_map)
Generator.register_op("compact_map", compact_map)
Generator.register_op("try_map", try_map)
