"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Option

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# PredMap = transform whose truthy results are kept (filter_map, find_map)
type PredMap[T, R] = Callable[[T], R]

# Folder = accumulator step (fold, scan)
type Folder[S, T] = Callable[[S, T], S]

# Effect = side effect, return value is discarded
type Effect[T] = Callable[[T], object]

# Pull = producer behind a Seq: Some(value) or Nothing() when exhausted
type Pull[T] = Callable[[], Option[T]]

# SequenceLike = anything the guard accepts (Seq, list, generator, ...)
# NOTE: str/bytes are Iterable but are rejected by the guard.
type SequenceLike[T] = Iterable[T]

__all__ = (
    "Predicate",
    "PredMap",
    "Folder",
    "Effect",
    "Pull",
    "SequenceLike",
)
