"""Collection combinators: arrays, variable-length lists, sets, dicts, selection, shuffling."""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from randkit.errors import GeneratorConfigError
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.source import next_below
from randkit.primitives import Always

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def as_count(count: int | Generator[int]) -> Generator[int]:
    """Accept a fixed count or a count generator."""
    if isinstance(count, Generator):
        return count
    if isinstance(count, int) and not isinstance(count, bool):
        return Always(count)
    raise GeneratorConfigError(
        f"Count must be an int or a Generator[int], got {type(count).__name__}", count
    )


def _stable_order(values: AbstractSet[Any]) -> list[Any]:
    try:
        return sorted(values)
    except TypeError:
        return sorted(values, key=repr)


@dataclass(frozen=True)
class ArrayOf(Generator[list[T]], Generic[T]):
    """Sample upstream exactly count times, preserving order."""

    upstream: Generator[T]
    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise GeneratorConfigError(
                f"Array length must be an int, got {type(self.count).__name__}", self.count
            )
        if self.count < 0:
            raise GeneratorConfigError(f"Array length must be >= 0, got {self.count}", self.count)

    def _run(self, source: EntropySource) -> list[T]:
        return [self.upstream.run(source) for _ in range(self.count)]


@dataclass(frozen=True)
class CollectionOf(Generator[list[T]], Generic[T]):
    """Sample a length from count, then sample upstream that many times.

    A length <= 0 yields an empty list.
    """

    upstream: Generator[T]
    count: Generator[int]

    def _run(self, source: EntropySource) -> list[T]:
        size = self.count.run(source)
        if size <= 0:
            return []
        return [self.upstream.run(source) for _ in range(size)]


@dataclass(frozen=True)
class SetOf(Generator[set[T]], Generic[T]):
    """Like CollectionOf but inserting into a set; duplicates collapse."""

    upstream: Generator[T]
    count: Generator[int]

    def _run(self, source: EntropySource) -> set[T]:
        size = self.count.run(source)
        result: set[T] = set()
        for _ in range(max(size, 0)):
            result.add(self.upstream.run(source))
        return result


@dataclass(frozen=True)
class DictOf(Generator[dict[K, V]], Generic[K, V]):
    """Build a dict from (key, value) samples; later keys overwrite earlier ones."""

    upstream: Generator[tuple[K, V]]
    count: Generator[int]

    def _run(self, source: EntropySource) -> dict[K, V]:
        size = self.count.run(source)
        result: dict[K, V] = {}
        for _ in range(max(size, 0)):
            key, value = self.upstream.run(source)
            result[key] = value
        return result


@dataclass(frozen=True)
class Element(Generator[Any]):
    """Pick one uniformly random element from a sampled collection.

    Returns None for an empty collection. Sets are sorted before
    indexing so a seeded source picks the same element in every process;
    sets of unorderable values are ordered by repr. Other non-sequence
    collections are indexed in iteration order.
    """

    upstream: Generator[Collection[Any]]

    def _run(self, source: EntropySource) -> Any:
        values = self.upstream.run(source)
        if isinstance(values, AbstractSet):
            values = _stable_order(values)
        elif not isinstance(values, Sequence):
            values = list(values)
        if not values:
            return None
        return values[next_below(source, len(values))]


@dataclass(frozen=True)
class Shuffled(Generator[Any]):
    """Fisher-Yates permutation of a sampled sequence.

    Lists, tuples and strings keep their type; other iterables become lists.
    """

    upstream: Generator[Iterable[Any]]

    def _run(self, source: EntropySource) -> Any:
        original = self.upstream.run(source)
        items = list(original)
        remaining = len(items)
        current = 0
        while remaining > 1:
            offset = next_below(source, remaining)
            remaining -= 1
            swap = current + offset
            items[current], items[swap] = items[swap], items[current]
            current += 1

        if isinstance(original, str):
            return "".join(items)
        if isinstance(original, tuple):
            return tuple(items)
        return items


def sampled_from(values: Iterable[T]) -> Generator[T]:
    """Uniformly pick one of a fixed, non-empty set of values."""
    pool = tuple(values)
    if not pool:
        raise GeneratorConfigError("sampled_from needs at least one value", values)
    return Element(Always(pool))


def array(self: Generator[T], count: int) -> ArrayOf[T]:
    """Fixed-length list of independent samples.

    Raises:
        GeneratorConfigError: If count is negative
    """
    return ArrayOf(self, count)


def collection(self: Generator[T], count: int | Generator[int]) -> CollectionOf[T]:
    """Variable-length list whose length is drawn from count before the elements.

    Example:
        >>> letters.collection(integers(0, 8)).map("".join)
    """
    return CollectionOf(self, as_count(count))


def set_of(self: Generator[T], count: int | Generator[int]) -> SetOf[T]:
    return SetOf(self, as_count(count))


def dictionary(self: Generator[tuple[K, V]], count: int | Generator[int]) -> DictOf[K, V]:
    """Dict built from count (key, value) samples, last write wins.

    Example:
        >>> sampled_from(["name", "age"]).zip(integers(1, 100)).dictionary(3)
    """
    return DictOf(self, as_count(count))


def element(self: Generator[Collection[T]]) -> Element:
    return Element(self)


def shuffled(self: Generator[Iterable[T]]) -> Shuffled:
    return Shuffled(self)


Generator.register_op("array", array)
Generator.register_op("collection", collection)
Generator.register_op("set_of", set_of)
Generator.register_op("dictionary", dictionary)
Generator.register_op("element", element)
Generator.register_op("shuffled", shuffled)
