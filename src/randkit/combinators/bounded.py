"""Bounded-retry engine and its specializations: filter, retry, retry_map."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from randkit.config import (
    DEFAULT_FILTER_ATTEMPTS,
    DEFAULT_RETRY_ATTEMPTS,
    AttemptPolicy,
    make_policy,
)
from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.result import Fallback

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class AttemptBounded(Generator[T], Generic[T]):
    """Sample upstream until condition holds or the attempt budget runs out.

    Each run moves Sampling -> Satisfied | Exhausted. A sample satisfying
    the condition is returned as soon as it appears, so an upstream that
    satisfies it immediately costs exactly one sample. On exhaustion the
    policy's fallback decides the result:

    - use_last: the final (failing) sample, i.e. the max_attempts-th one
    - use_default: the configured default
    - keep_trying: continue sampling with no bound
    - delegate: the thunk's return value

    Attributes:
        upstream: Generator to sample
        condition: Predicate a sample must satisfy
        policy: Attempt budget and fallback
    """

    upstream: Generator[T]
    condition: Callable[[T], bool]
    policy: AttemptPolicy

    def _run(self, source: EntropySource) -> T:
        attempts = 0
        while True:
            value = self.upstream.run(source)
            attempts += 1
            if self.condition(value):
                return value
            if attempts >= self.policy.max_attempts:
                break

        fallback = self.policy.fallback
        logger.debug("Retry budget of %d exhausted, applying %s", attempts, fallback.kind)

        if fallback.kind == "use_default":
            return fallback.default  # type: ignore[return-value]
        if fallback.kind == "keep_trying":
            while True:
                value = self.upstream.run(source)
                if self.condition(value):
                    return value
        if fallback.kind == "delegate":
            return fallback.thunk()  # type: ignore[misc]
        return value


def attempt_bounded(
    self: Generator[T],
    condition: Callable[[T], bool],
    max_attempts: int = DEFAULT_FILTER_ATTEMPTS,
    fallback: Fallback | None = None,
) -> AttemptBounded[T]:
    """Bound sampling to max_attempts tries of satisfying condition.

    Args:
        condition: Returns True for acceptable values
        max_attempts: Maximum number of upstream samples (must be >= 1)
        fallback: Strategy once attempts run out; defaults to Fallback.UseLast()

    Returns:
        New generator that applies the bounded-retry policy
    """
    return AttemptBounded(self, condition, make_policy(max_attempts, fallback))


def filter_(
    self: Generator[T],
    predicate: Callable[[T], bool],
    max_attempts: int = DEFAULT_FILTER_ATTEMPTS,
    fallback: Fallback | None = None,
) -> AttemptBounded[T]:
    """Only produce values that satisfy predicate.

    Example:
        >>> integers(1, 100).filter(lambda n: n % 2 == 0)
    """
    return attempt_bounded(self, predicate, max_attempts, fallback)


def retry(
    self: Generator[T],
    until: Callable[[T], bool],
    max_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    fallback: Fallback | None = None,
) -> AttemptBounded[T]:
    """Retry until a condition is met or max_attempts is reached.

    Example:
        >>> floats(-1, 1).retry(lambda x: x != 0, max_attempts=3,
        ...                     fallback=Fallback.UseDefault(0.5))
    """
    return attempt_bounded(self, until, max_attempts, fallback)


def retry_map(
    self: Generator[T],
    transform: Callable[[T], R | None],
    max_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    fallback: Fallback | None = None,
) -> AttemptBounded[R | None]:
    """Bounded compact_map: resample until transform returns a value.

    The fallback applies to transformed values, so with use_last an
    exhausted run yields None.
    """
    return attempt_bounded(
        self.map(transform), lambda value: value is not None, max_attempts, fallback
    )


Generator.register_op("attempt_bounded", attempt_bounded)
Generator.register_op("filter", filter_)
Generator.register_op("retry", retry)
Generator.register_op("retry_map", retry_map)
