"""Take combinators

Prefix of a sequence, decided by predicate or by count."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._types import Predicate
from ..core import Seq, curry, ensure_sequence

@curry
def take_while[T](pred: Predicate[T], source: Iterable[T]) -> Seq[T]:
    """
    Yield while pred holds.

    The first failing element is consumed but not yielded, and the sequence
    ends there for good.
    """
    ensure_sequence(source)
    upstream = Seq.of(source)

    def pull() -> Option[T]:
        match upstream.advance():
            case Some(value) if pred(value):
                return Some(value)
            case _:
                return Nothing()

    return Seq(pull)

@curry
def take[T](n: int, source: Iterable[T]) -> Seq[T]:
    """
    First n elements.

    Built on take_while with a counter, so the element after the n-th is
    pulled (and dropped) to end the sequence, exactly like take_while.
    """
    if n < 0:
        raise ValueError(f"take(): n must be >= 0, got {n}")

    seen = 0

    def within(_: T) -> bool:
        nonlocal seen
        seen += 1
        return seen <= n

    return take_while(within, source)

__all__ = ("take", "take_while")
