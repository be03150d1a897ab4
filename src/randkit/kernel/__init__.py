"""Kernel layer - pure abstractions for randkit."""

from randkit.kernel.generator import Generator
from randkit.kernel.ports import EntropySource
from randkit.kernel.result import Fallback, Outcome
from randkit.kernel.source import (
    LCRNG,
    CountingSource,
    RandomAdapter,
    SystemSource,
    bool_from,
    default_source,
    float_in,
    int_in,
    next_below,
)
from randkit.kernel.trace import SampleEvent, Trace

__all__ = [
    "Generator",
    "Fallback",
    "Outcome",
    "SampleEvent",
    "Trace",
    # Sources
    "EntropySource",
    "LCRNG",
    "SystemSource",
    "RandomAdapter",
    "CountingSource",
    "default_source",
    # Domain mappings
    "next_below",
    "int_in",
    "float_in",
    "bool_from",
]
