"""
Lazy sequence combinators.

Composable, pull-based operations over sequences. Every combinator wraps its
upstream in a new suspended Seq that computes the next element only when
pulled; multi-argument combinators are curried.

Architecture:
- core: Seq (advance -> Option), the sequence guard, curry
- transform / slicing / combine / construct: lazy, return a Seq
- consume: eager, drive the sequence and return a value
"""

# Core types
from ._types import Effect, Folder, PredMap, Predicate, Pull, SequenceLike

# Internal helpers
from . import _helpers

# Core
from .core import Seq, curry, declared_arity, ensure_sequence, is_sequence_like

# Transform
from .transform import (
    enumerate,
    filter,
    filter_map,
    flat_map,
    flatten,
    inspect,
    map,
    scan,
    tap,
)

# Consume
from .consume import (
    all,
    any,
    collect,
    count,
    find,
    find_map,
    fold,
    nth,
    some,
)

# Combine
from .combine import chain, eq, eq_by, eq_by_strict, eq_strict, zip

# Slicing
from .slicing import skip, skip_while, take, take_while

# Construct
from .construct import cycle, empty, once, repeat

# Composition
from .compose import compose, pipe

# Errors
from ._errors import NotASequenceError

__all__ = (
    # Types
    "Effect",
    "Folder",
    "PredMap",
    "Predicate",
    "Pull",
    "SequenceLike",
    # Internal helpers
    "_helpers",
    # Core
    "Seq",
    "curry",
    "declared_arity",
    "ensure_sequence",
    "is_sequence_like",
    # Transform
    "enumerate",
    "filter",
    "filter_map",
    "flat_map",
    "flatten",
    "inspect",
    "map",
    "scan",
    "tap",
    # Consume
    "all",
    "any",
    "collect",
    "count",
    "find",
    "find_map",
    "fold",
    "nth",
    "some",
    # Combine
    "chain",
    "eq",
    "eq_by",
    "eq_by_strict",
    "eq_strict",
    "zip",
    # Slicing
    "skip",
    "skip_while",
    "take",
    "take_while",
    # Construct
    "cycle",
    "empty",
    "once",
    "repeat",
    # Composition
    "compose",
    "pipe",
    # Errors
    "NotASequenceError",
)
