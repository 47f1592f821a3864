"""
Cycle combinators
=================

Infinite repetition over a fixed buffer.

NOTE: cycle материализует входную последовательность сразу при вызове.
Буфер живёт столько же, сколько и возвращённая Seq.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from ..consume import collect
from ..core import Seq
from .sources import once

logger = logging.getLogger(__name__)


def cycle[T](source: Iterable[T]) -> Seq[T]:
    """
    Repeat the elements of source forever.

    source is collected eagerly (raising NotASequenceError if it is not a
    sequence). An empty source gives an exhausted sequence rather than one
    that never produces anything.
    """
    buffer = collect(source)
    logger.debug("cycle buffered %d elements", len(buffer))
    position = 0

    def pull() -> Option[T]:
        nonlocal position
        if not buffer:
            return Nothing()
        value = buffer[position]
        position = (position + 1) % len(buffer)
        return Some(value)

    return Seq(pull)


def repeat[T](value: T) -> Seq[T]:
    """Infinite sequence of value. Same as cycle(once(value))."""
    return cycle(once(value))


__all__ = ("cycle", "repeat")
