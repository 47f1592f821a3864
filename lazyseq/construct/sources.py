"""Source constructors

Finite sequences built from nothing or from a single value."""

from __future__ import annotations

import typing

from kungfu import Nothing, Option, Some

from ..core import Seq

def empty() -> Seq[typing.Never]:
    """Sequence that is exhausted from the start."""

    def pull() -> Option[typing.Never]:
        return Nothing()

    return Seq(pull)

def once[T](value: T) -> Seq[T]:
    """Sequence yielding value exactly once."""
    emitted = False

    def pull() -> Option[T]:
        nonlocal emitted
        if emitted:
            return Nothing()
        emitted = True
        return Some(value)

    return Seq(pull)

__all__ = ("empty", "once")
