"""Observation combinators: sampling traces and log output.

Neither combinator draws entropy of its own or alters the sampled value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.trace import Trace

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Traced(Generator[T], Generic[T]):
    """Record each run of upstream as a span in a Trace.

    See Trace.observe for the events recorded per run.
    """

    upstream: Generator[T]
    trace: Trace
    label: str

    def _run(self, source: EntropySource) -> T:
        return self.trace.observe(self.label, self.upstream.run, source)


@dataclass(frozen=True)
class Logged(Generator[T], Generic[T]):
    """Log "<prefix>: <value>" for every sample."""

    upstream: Generator[T]
    prefix: str
    level: int = logging.INFO

    def _run(self, source: EntropySource) -> T:
        value = self.upstream.run(source)
        logger.log(self.level, "%s: %r", self.prefix, value)
        return value


def traced(self: Generator[T], trace: Trace, label: str = "sample") -> Traced[T]:
    return Traced(self, trace, label)


def logged(self: Generator[T], prefix: str, level: int = logging.INFO) -> Logged[T]:
    return Logged(self, prefix, level)


Generator.register_op("traced", traced)
Generator.register_op("logged", logged)
