from .combinators import (
    AnyGenerator,
    AttemptBounded,
    Frequency,
    RemoveDuplicates,
    collect,
    frequency,
    one_of,
    sampled_from,
    zipped,
)
from .characters import (
    ascii_chars,
    characters,
    digits,
    latin1_chars,
    letters,
    letters_or_digits,
    lowercase_letters,
    uppercase_letters,
)
from .config import AttemptPolicy
from .errors import GeneratorConfigError
from .kernel import (
    LCRNG,
    CountingSource,
    EntropySource,
    Fallback,
    Generator,
    Outcome,
    RandomAdapter,
    SystemSource,
    Trace,
)
from .primitives import (
    Always,
    BoolGenerator,
    FloatGenerator,
    IntGenerator,
    always,
    booleans,
    floats,
    integers,
    null,
)

__all__ = [
    # Core
    "Generator",
    "Fallback",
    "Outcome",
    "AttemptPolicy",
    "GeneratorConfigError",
    # Sources
    "EntropySource",
    "LCRNG",
    "SystemSource",
    "RandomAdapter",
    "CountingSource",
    # Primitives
    "Always",
    "BoolGenerator",
    "IntGenerator",
    "FloatGenerator",
    "always",
    "null",
    "booleans",
    "integers",
    "floats",
    # Combinator factories
    "AttemptBounded",
    "Frequency",
    "RemoveDuplicates",
    "AnyGenerator",
    "frequency",
    "one_of",
    "sampled_from",
    "zipped",
    "collect",
    # Characters
    "characters",
    "digits",
    "uppercase_letters",
    "lowercase_letters",
    "letters",
    "letters_or_digits",
    "ascii_chars",
    "latin1_chars",
    # Tracing
    "Trace",
]
