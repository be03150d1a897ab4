"""Combinators - composition of generators into new generators.

Importing this package registers every combinator as a Generator method.
"""

from .bounded import AttemptBounded
from .containers import (
    ArrayOf,
    CollectionOf,
    DictOf,
    Element,
    SetOf,
    Shuffled,
    sampled_from,
)
from .erasure import AnyGenerator
from .observe import Logged, Traced
from .stateful import RemoveDuplicates
from .structural import Concat, Concatenable, Pair, Zip, ZipAll, collect, zipped
from .transform import CompactMap, FlatMap, Map, TryMap
from .weighted import Frequency, frequency, one_of

__all__ = [
    # Transformation
    "Map",
    "FlatMap",
    "CompactMap",
    "TryMap",
    # Bounded retry
    "AttemptBounded",
    # Structural
    "Zip",
    "ZipAll",
    "Concat",
    "Concatenable",
    "Pair",
    "zipped",
    "collect",
    # Collections
    "ArrayOf",
    "CollectionOf",
    "SetOf",
    "DictOf",
    "Element",
    "Shuffled",
    "sampled_from",
    # Weighted choice
    "Frequency",
    "frequency",
    "one_of",
    # Stateful
    "RemoveDuplicates",
    # Erasure
    "AnyGenerator",
    # Observation
    "Traced",
    "Logged",
]
