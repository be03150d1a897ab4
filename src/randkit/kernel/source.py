"""Entropy sources and the mappings from raw 64-bit draws onto value domains."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from randkit.kernel.ports import EntropySource

UINT64_MASK = (1 << 64) - 1
UINT64_RANGE = 1 << 64

LCRNG_MULTIPLIER = 2862933555777941757
LCRNG_INCREMENT = 3037000493

# Doubles carry 52 explicit significand bits plus the implicit one.
_FLOAT_SIGNIFICAND_BITS = 53


@dataclass
class LCRNG:
    """Linear congruential source: state = a * state + c (mod 2^64).

    Deterministic substitute for the system source. Two instances built
    from the same seed produce the same stream forever.
    """

    seed: int = 0

    def __post_init__(self) -> None:
        self.seed &= UINT64_MASK

    def next(self) -> int:
        self.seed = (LCRNG_MULTIPLIER * self.seed + LCRNG_INCREMENT) & UINT64_MASK
        return self.seed


class SystemSource:
    """Operating-system entropy (os.urandom backed)."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def next(self) -> int:
        return self._rng.getrandbits(64)


class RandomAdapter:
    """Adapt a `random.Random` instance to the EntropySource protocol."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def next(self) -> int:
        return self._rng.getrandbits(64)


@dataclass
class CountingSource:
    """Proxy that counts the draws taken from an underlying source."""

    inner: EntropySource
    draws: int = field(default=0)

    def next(self) -> int:
        self.draws += 1
        return self.inner.next()


def default_source() -> EntropySource:
    """Create the source used when `run()` is called without one."""
    return SystemSource()


def next_below(source: EntropySource, bound: int) -> int:
    """Draw a uniform integer in [0, bound).

    Uses the multiply-high reduction: the upper 64 bits of draw * bound,
    rejecting the small biased region of the low word.

    Args:
        source: Entropy source to draw from
        bound: Exclusive upper bound, 0 < bound <= 2^64

    Returns:
        A uniformly distributed integer below bound
    """
    if bound <= 0 or bound > UINT64_RANGE:
        raise ValueError(f"bound must be in (0, 2^64], got {bound}")
    if bound == UINT64_RANGE:
        return source.next()

    product = source.next() * bound
    low = product & UINT64_MASK
    if low < bound:
        threshold = (UINT64_RANGE - bound) % bound
        while low < threshold:
            product = source.next() * bound
            low = product & UINT64_MASK
    return product >> 64


def int_in(source: EntropySource, lower: int, upper: int) -> int:
    """Draw a uniform integer in the closed range [lower, upper]."""
    return lower + next_below(source, upper - lower + 1)


def float_in(source: EntropySource, lower: float, upper: float) -> float:
    """Draw a float in the closed range [lower, upper].

    One integer draw in [0, 2^53] is scaled onto the range; the top value
    maps exactly onto the upper bound.
    """
    delta = upper - lower
    max_significand = 1 << _FLOAT_SIGNIFICAND_BITS
    rand = next_below(source, max_significand + 1)
    if rand == max_significand:
        return upper
    unit = rand * math.ldexp(1.0, -_FLOAT_SIGNIFICAND_BITS)
    return delta * unit + lower


def bool_from(source: EntropySource) -> bool:
    """Draw a fair boolean from bit 17 of a single draw."""
    return (source.next() >> 17) & 1 == 0
