"""Skip combinators

Drop a prefix of a sequence, decided by predicate or by count."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._types import Predicate
from ..core import Seq, curry, ensure_sequence

@curry
def skip_while[T](pred: Predicate[T], source: Iterable[T]) -> Seq[T]:
    """
    Drop leading elements while pred holds.

    The first failing element is yielded, and so is everything after it.
    pred is still called for later elements, but its answer is ignored.
    """
    ensure_sequence(source)
    upstream = Seq.of(source)
    skipping = True

    def pull() -> Option[T]:
        nonlocal skipping
        for value in upstream:
            passed = pred(value)
            if skipping and passed:
                continue
            skipping = False
            return Some(value)
        return Nothing()

    return Seq(pull)

@curry
def skip[T](n: int, source: Iterable[T]) -> Seq[T]:
    """Drop the first n elements. Built on skip_while with a counter."""
    if n < 0:
        raise ValueError(f"skip(): n must be >= 0, got {n}")

    seen = 0

    def within(_: T) -> bool:
        nonlocal seen
        seen += 1
        return seen <= n

    return skip_while(within, source)

__all__ = ("skip", "skip_while")
