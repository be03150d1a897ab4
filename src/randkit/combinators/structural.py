"""Structural combinators: zip, collect, concat and tuple."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from randkit.errors import GeneratorConfigError
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource

T = TypeVar("T")
R = TypeVar("R")


@runtime_checkable
class Concatenable(Protocol):
    """Values joined with binary +, e.g. str, bytes, list and tuple."""

    def __add__(self, other: Any) -> Any: ...


_NUMERIC = (int, float, complex)


@dataclass(frozen=True)
class Zip(Generator[Any]):
    """Sample each generator in order and return a tuple of the values.

    Generators are always sampled left to right: the first runs to
    completion before the second draws anything. With a transform, the
    values are passed as positional arguments and its result is returned.
    """

    generators: tuple[Generator[Any], ...]
    transform: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        if len(self.generators) < 2:
            raise GeneratorConfigError(
                f"Zip needs at least 2 generators, got {len(self.generators)}", self.generators
            )

    def _run(self, source: EntropySource) -> Any:
        values = tuple(generator.run(source) for generator in self.generators)
        if self.transform is None:
            return values
        return self.transform(*values)


@dataclass(frozen=True)
class ZipAll(Generator[Any], Generic[T]):
    """Homogeneous N-ary zip: run each generator in order into a list."""

    generators: tuple[Generator[T], ...]
    transform: Callable[[list[T]], Any] | None = None

    def _run(self, source: EntropySource) -> Any:
        values = [generator.run(source) for generator in self.generators]
        if self.transform is None:
            return values
        return self.transform(values)


@dataclass(frozen=True)
class Concat(Generator[T], Generic[T]):
    """first + separator + second, sampling first before second."""

    first: Generator[T]
    second: Generator[T]
    separator: T

    def __post_init__(self) -> None:
        if isinstance(self.separator, _NUMERIC) or not isinstance(self.separator, Concatenable):
            raise GeneratorConfigError(
                f"Separator of type {type(self.separator).__name__} does not support concatenation",
                self.separator,
            )

    def _run(self, source: EntropySource) -> T:
        head = self.first.run(source)
        tail = self.second.run(source)
        return head + self.separator + tail  # type: ignore[operator]


@dataclass(frozen=True)
class Pair(Generator[tuple[T, T]], Generic[T]):
    """Sample the same generator twice, independently."""

    upstream: Generator[T]

    def _run(self, source: EntropySource) -> tuple[T, T]:
        first = self.upstream.run(source)
        second = self.upstream.run(source)
        return (first, second)


def zipped(*generators: Generator[Any], transform: Callable[..., Any] | None = None) -> Zip:
    """Zip generators into tuples, optionally mapping each tuple with transform."""
    return Zip(tuple(generators), transform)


def collect(
    generators: Sequence[Generator[T]],
    transform: Callable[[list[T]], Any] | None = None,
) -> ZipAll[T]:
    """Run a list of generators in order, producing a list of their values."""
    return ZipAll(tuple(generators), transform)


def zip_(
    self: Generator[Any],
    *others: Generator[Any],
    transform: Callable[..., Any] | None = None,
) -> Zip:
    """Zip this generator with up to three others.

    Example:
        >>> integers(0, 100).zip(integers(0, 100), transform=lambda x, y: f"({x}, {y})")
    """
    if not 1 <= len(others) <= 3:
        raise GeneratorConfigError(f"zip takes 1 to 3 other generators, got {len(others)}", others)
    return Zip((self, *others), transform)


def concat(self: Generator[T], other: Generator[T], separator: T) -> Concat[T]:
    return Concat(self, other, separator)


def pair(self: Generator[T]) -> Pair[T]:
    return Pair(self)


Generator.register_op("zip", zip_)
Generator.register_op("concat", concat)
Generator.register_op("tuple", pair)
