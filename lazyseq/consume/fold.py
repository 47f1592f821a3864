"""
Fold combinators
================

Same recurrence as scan, but only the terminal state is returned.
"""

from __future__ import annotations

from collections.abc import Iterable

from .._types import Folder
from ..core import Seq, curry, ensure_sequence


@curry
def fold[S, T](fn: Folder[S, T], seed: S, source: Iterable[T]) -> S:
    """Fold the sequence: state <- fn(state, value) for every element."""
    ensure_sequence(source)
    state = seed
    for value in Seq.of(source):
        state = fn(state, value)
    return state


__all__ = ("fold",)
