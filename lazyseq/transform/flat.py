"""Flattening combinators

One level only: nested sequences inside a mapped result are yielded as
elements, not flattened further."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Nothing, Option, Some

from .._helpers import identity
from ..core import Seq, curry, ensure_sequence, is_sequence_like

@curry
def flat_map[T](fn: Callable[[T], typing.Any], source: Iterable[T]) -> Seq[typing.Any]:
    """
    Map each element, splicing sequence-like results into the output.

    Results that are not sequence-like (numbers, strings, None) are yielded
    as a single element.
    """
    ensure_sequence(source)
    upstream = Seq.of(source)
    inner: Seq[typing.Any] | None = None

    def pull() -> Option[typing.Any]:
        nonlocal inner
        while True:
            if inner is not None:
                step = inner.advance()
                match step:
                    case Some(_):
                        return step
                    case _:
                        inner = None

            match upstream.advance():
                case Some(value):
                    result = fn(value)
                    if not is_sequence_like(result):
                        return Some(result)
                    inner = Seq.of(result)
                case _:
                    return Nothing()

    return Seq(pull)

# flatten = flat_map(id), waiting for the sequence
flatten = flat_map(identity)

__all__ = ("flat_map", "flatten")
