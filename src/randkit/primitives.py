"""Primitive generators: constants, booleans, integers and floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from randkit.errors import GeneratorConfigError
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.source import UINT64_RANGE, bool_from, float_in, int_in

T = TypeVar("T")


@dataclass(frozen=True)
class Always(Generator[T], Generic[T]):
    """Produces the same value every run without drawing entropy."""

    value: T

    def _run(self, source: EntropySource) -> T:
        return self.value


@dataclass(frozen=True)
class BoolGenerator(Generator[bool]):
    """Fair coin: one draw per run."""

    def _run(self, source: EntropySource) -> bool:
        return bool_from(source)


@dataclass(frozen=True)
class IntGenerator(Generator[int]):
    """Uniform integers in the closed range [lower, upper].

    Attributes:
        lower: Smallest value produced
        upper: Largest value produced; the span may cover at most 2^64 values
    """

    lower: int
    upper: int

    def __post_init__(self) -> None:
        for bound in (self.lower, self.upper):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise GeneratorConfigError(
                    f"Integer bounds must be ints, got {type(bound).__name__}",
                    (self.lower, self.upper),
                )
        if self.lower > self.upper:
            raise GeneratorConfigError(
                f"Integer range is empty: {self.lower} > {self.upper}", (self.lower, self.upper)
            )
        if self.upper - self.lower + 1 > UINT64_RANGE:
            raise GeneratorConfigError(
                "Integer range spans more than 2^64 values", (self.lower, self.upper)
            )

    @classmethod
    def from_range(cls, values: range) -> IntGenerator:
        """Build from a half-open `range` with step 1, e.g. range(0, 10) -> [0, 9]."""
        if values.step != 1:
            raise GeneratorConfigError(f"Range step must be 1, got {values.step}", values)
        if len(values) == 0:
            raise GeneratorConfigError("Range is empty", values)
        return cls(values.start, values.stop - 1)

    def _run(self, source: EntropySource) -> int:
        return int_in(source, self.lower, self.upper)


@dataclass(frozen=True)
class FloatGenerator(Generator[float]):
    """Floats in the closed range [lower, upper]."""

    lower: float
    upper: float

    def __post_init__(self) -> None:
        bounds = (self.lower, self.upper)
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise GeneratorConfigError("Float range bounds must be finite", bounds)
        if self.lower > self.upper:
            raise GeneratorConfigError(
                f"Float range is empty: {self.lower} > {self.upper}", bounds
            )
        if not math.isfinite(self.upper - self.lower):
            raise GeneratorConfigError("Float range width overflows", bounds)

    def _run(self, source: EntropySource) -> float:
        return float_in(source, self.lower, self.upper)


def always(value: T) -> Always[T]:
    return Always(value)


def null() -> Always[None]:
    """Always produces None; a placeholder where a generator slot must stay empty."""
    return Always(None)


def booleans() -> BoolGenerator:
    return BoolGenerator()


def integers(lower: int, upper: int) -> IntGenerator:
    return IntGenerator(lower, upper)


def floats(lower: float = 0.0, upper: float = 1.0) -> FloatGenerator:
    return FloatGenerator(lower, upper)
