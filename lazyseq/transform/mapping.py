"""
Mapping combinators
===================

Element-wise lazy transforms. Each builds a pull closure over the shared
upstream Seq and returns a new Seq; nothing runs until advance().
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Nothing, Option, Some

from .._types import Effect, Folder
from ..core import Seq, curry, ensure_sequence


@curry
def map[T, R](fn: Callable[[T], R], source: Iterable[T]) -> Seq[R]:
    """Apply fn to each element, once per pulled element."""
    ensure_sequence(source)
    upstream = Seq.of(source)

    def pull() -> Option[R]:
        match upstream.advance():
            case Some(value):
                return Some(fn(value))
            case _:
                return Nothing()

    return Seq(pull)


@curry
def tap[T](fn: Effect[T], source: Iterable[T]) -> Seq[T]:
    """Call fn on each element for its side effect, pass the element through."""
    ensure_sequence(source)
    upstream = Seq.of(source)

    def pull() -> Option[T]:
        step = upstream.advance()
        match step:
            case Some(value):
                fn(value)
            case _:
                pass
        return step

    return Seq(pull)


inspect = tap


def enumerate[T](source: Iterable[T]) -> Seq[tuple[T, int]]:
    """
    Pair each element with its position: (value, index).

    NOTE: value first, index second - reversed compared to builtins.enumerate.
    """
    ensure_sequence(source)
    upstream = Seq.of(source)
    index = 0

    def pull() -> Option[tuple[T, int]]:
        nonlocal index
        match upstream.advance():
            case Some(value):
                pair = (value, index)
                index += 1
                return Some(pair)
            case _:
                return Nothing()

    return Seq(pull)


@curry
def scan[S, T](fn: Folder[S, T], seed: S, source: Iterable[T]) -> Seq[S]:
    """Running fold: yields every intermediate state, never the seed."""
    ensure_sequence(source)
    upstream = Seq.of(source)
    state = seed

    def pull() -> Option[S]:
        nonlocal state
        match upstream.advance():
            case Some(value):
                state = fn(state, value)
                return Some(state)
            case _:
                return Nothing()

    return Seq(pull)


__all__ = ("enumerate", "inspect", "map", "scan", "tap")
