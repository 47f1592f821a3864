"""Chain combinator

Sequential concatenation of two sequences."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from ..core import Seq, curry, ensure_sequence

@curry
def chain[T](first: Iterable[T], second: Iterable[T]) -> Seq[T]:
    """Exhaust first, then exhaust second. No interleaving."""
    ensure_sequence(first)
    ensure_sequence(second)
    head = Seq.of(first)
    tail = Seq.of(second)

    def pull() -> Option[T]:
        step = head.advance()
        match step:
            case Some(_):
                return step
            case _:
                return tail.advance()

    return Seq(pull)

__all__ = ("chain",)
