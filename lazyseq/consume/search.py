"""
Search combinators
==================

Short-circuiting consumers: each stops pulling as soon as the answer is
known and never resumes the sequence afterwards.

Absence is reported with kungfu's Option: Some(value) or Nothing().
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._types import Predicate, PredMap
from ..core import Seq, curry, ensure_sequence


@curry
def all[T](pred: Predicate[T], source: Iterable[T]) -> bool:
    """True if every element passes. Bails on the first failure."""
    ensure_sequence(source)
    for value in Seq.of(source):
        if not pred(value):
            return False
    return True


@curry
def some[T](pred: Predicate[T], source: Iterable[T]) -> bool:
    """True if any element passes. Bails on the first match."""
    ensure_sequence(source)
    for value in Seq.of(source):
        if pred(value):
            return True
    return False


any = some


@curry
def find[T](pred: Predicate[T], source: Iterable[T]) -> Option[T]:
    """First element passing pred."""
    ensure_sequence(source)
    for value in Seq.of(source):
        if pred(value):
            return Some(value)
    return Nothing()


@curry
def find_map[T, R](pred_map: PredMap[T, R], source: Iterable[T]) -> Option[R]:
    """First truthy result of pred_map."""
    ensure_sequence(source)
    for value in Seq.of(source):
        result = pred_map(value)
        if result:
            return Some(result)
    return Nothing()


@curry
def nth[T](index: int, source: Iterable[T]) -> Option[T]:
    """Element at 0-based index. Advances at most index + 1 times."""
    if index < 0:
        raise ValueError(f"nth(): index must be >= 0, got {index}")
    ensure_sequence(source)

    upstream = Seq.of(source)
    step: Option[T] = Nothing()
    for _ in range(index + 1):
        step = upstream.advance()
        if upstream.exhausted:
            break
    return step


__all__ = ("all", "any", "find", "find_map", "nth", "some")
