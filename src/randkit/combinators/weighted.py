"""Weighted choice among generators."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Generic, TypeVar

from randkit.errors import GeneratorConfigError
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.source import next_below

T = TypeVar("T")


@dataclass(frozen=True)
class Frequency(Generator[T], Generic[T]):
    """Pick a generator with probability weight / total weight, then run it.

    Equivalent to expanding each (weight, generator) entry into weight
    copies and drawing one index from the flat pool with a single integer
    sample. Zero-weight entries are never chosen.

    Attributes:
        distribution: (weight, generator) entries
    """

    distribution: tuple[tuple[int, Generator[T]], ...]
    _cumulative: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.distribution:
            raise GeneratorConfigError("Frequency needs at least one entry", self.distribution)
        for weight, _ in self.distribution:
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise GeneratorConfigError(
                    f"Weights must be non-negative integers, got {weight!r}", weight
                )
        cumulative = tuple(accumulate(weight for weight, _ in self.distribution))
        if cumulative[-1] == 0:
            raise GeneratorConfigError("At least one weight must be positive", self.distribution)
        object.__setattr__(self, "_cumulative", cumulative)

    @property
    def total_weight(self) -> int:
        return self._cumulative[-1]

    def _run(self, source: EntropySource) -> T:
        index = next_below(source, self.total_weight)
        entry = bisect.bisect_right(self._cumulative, index)
        return self.distribution[entry][1].run(source)


def frequency(distribution: Sequence[tuple[int, Generator[T]]]) -> Frequency[T]:
    """Weighted choice.

    Example:
        >>> frequency([(1, always("rare")), (9, always("common"))])
    """
    return Frequency(tuple((weight, generator) for weight, generator in distribution))


def one_of(*generators: Generator[T]) -> Frequency[T]:
    """Uniform choice among generators."""
    return frequency([(1, generator) for generator in generators])
