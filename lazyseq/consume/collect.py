"""Collect combinators

Drive a sequence to exhaustion."""

from __future__ import annotations

from collections.abc import Iterable

from ..core import Seq, ensure_sequence

def collect[T](source: Iterable[T]) -> list[T]:
    """Materialize the remaining elements into a list."""
    ensure_sequence(source)
    return list(Seq.of(source))

def count(source: Iterable[object]) -> int:
    """Number of remaining elements. Consumes the sequence."""
    ensure_sequence(source)
    total = 0
    for _ in Seq.of(source):
        total += 1
    return total

__all__ = ("collect", "count")
