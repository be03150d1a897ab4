"""Character generators built from the primitive integer generator."""

from __future__ import annotations

import string

from randkit.combinators.containers import sampled_from
from randkit.combinators.transform import CompactMap
from randkit.errors import GeneratorConfigError
from randkit.kernel.generator import Generator
from randkit.primitives import IntGenerator

_SURROGATES = range(0xD800, 0xE000)


def _scalar(code_point: int) -> str | None:
    if code_point in _SURROGATES:
        return None
    return chr(code_point)


def characters(lower: str, upper: str) -> Generator[str]:
    """Single characters with code points in [lower, upper].

    Surrogate code points are skipped by resampling.
    """
    if len(lower) != 1 or len(upper) != 1:
        raise GeneratorConfigError("Character bounds must be single characters", (lower, upper))
    return CompactMap(IntGenerator(ord(lower), ord(upper)), _scalar)


digits = characters("0", "9")
uppercase_letters = characters("A", "Z")
lowercase_letters = characters("a", "z")
letters = sampled_from(string.ascii_letters)
letters_or_digits = sampled_from(string.ascii_letters + string.digits)
ascii_chars = characters("\x00", "\x7f")
latin1_chars = characters("\x00", "\xff")
