"""Stateful de-duplication of consecutive samples."""

from __future__ import annotations

import logging
import operator
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from randkit.config import DEFAULT_DEDUP_ATTEMPTS, AttemptPolicy, make_policy
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LastValueCell:
    """Lock-guarded holder of the most recently produced value.

    Owned by exactly one RemoveDuplicates instance.
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.filled = False
        self.value: Any = None

    def store(self, value: Any) -> None:
        self.value = value
        self.filled = True


@dataclass(frozen=True)
class RemoveDuplicates(Generator[T], Generic[T]):
    """Avoid producing a value equivalent to the previous one.

    The first run samples once and remembers the value. Later runs
    resample up to max_attempts times while the candidate is equivalent
    to the remembered value; on exhaustion the final candidate is
    accepted anyway. The remembered value lives for the lifetime of this
    instance; build a new instance to start over.

    Attributes:
        upstream: Generator to sample
        equivalent: Returns True when two values count as duplicates
        policy: Attempt budget (the fallback is always use-last)
    """

    upstream: Generator[T]
    equivalent: Callable[[T, T], bool] = operator.eq
    policy: AttemptPolicy = field(default_factory=AttemptPolicy)
    _cell: LastValueCell = field(default_factory=LastValueCell, repr=False, compare=False)

    def _run(self, source: EntropySource) -> T:
        with self._cell.lock:
            if not self._cell.filled:
                value = self.upstream.run(source)
                self._cell.store(value)
                return value

            previous = self._cell.value
            for _ in range(self.policy.max_attempts):
                value = self.upstream.run(source)
                if not self.equivalent(value, previous):
                    break
            else:
                logger.debug(
                    "No distinct value after %d attempts, repeating %r",
                    self.policy.max_attempts,
                    value,
                )
            self._cell.store(value)
            return value


def remove_duplicates(
    self: Generator[T],
    by: Callable[[T, T], bool] | None = None,
    max_attempts: int = DEFAULT_DEDUP_ATTEMPTS,
) -> RemoveDuplicates[T]:
    """Suppress consecutive repeats.

    Args:
        by: Equivalence predicate; defaults to ==
        max_attempts: Samples tried per run before accepting a repeat

    Returns:
        New stateful generator with its own last-value cell
    """
    return RemoveDuplicates(self, by or operator.eq, make_policy(max_attempts))


Generator.register_op("remove_duplicates", remove_duplicates)
