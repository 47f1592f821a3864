"""
Equality combinators
====================

eq_by walks the first sequence and pulls one element of the second for each.
It answers True as soon as the first sequence runs out, WITHOUT checking that
the second one is exhausted too:

    eq([1, 2], [1, 2, 3])  # True

This asymmetric contract is kept on purpose. Use eq_by_strict / eq_strict
when both sequences must have the same length.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Some

from .._helpers import strict_eq
from ..core import Seq, curry, ensure_sequence


def _walk[A, B](
    pred: Callable[[A, B], object],
    left: Seq[A],
    right: Seq[B],
) -> bool:
    """Compare left against a prefix of right. False on first mismatch."""
    for a in left:
        match right.advance():
            case Some(b):
                if not pred(a, b):
                    return False
            case _:
                return False
    return True


@curry
def eq_by[A, B](
    pred: Callable[[A, B], object],
    first: Iterable[A],
    second: Iterable[B],
) -> bool:
    """Pairwise pred over first; second may be longer (see module docs)."""
    ensure_sequence(first)
    ensure_sequence(second)
    return _walk(pred, Seq.of(first), Seq.of(second))


@curry
def eq_by_strict[A, B](
    pred: Callable[[A, B], object],
    first: Iterable[A],
    second: Iterable[B],
) -> bool:
    """Like eq_by, but second must also be exhausted when first is."""
    ensure_sequence(first)
    ensure_sequence(second)
    right = Seq.of(second)
    if not _walk(pred, Seq.of(first), right):
        return False
    match right.advance():
        case Some(_):
            return False
        case _:
            return True


# Element-wise ==, waiting for both sequences
eq = eq_by(strict_eq)
eq_strict = eq_by_strict(strict_eq)


__all__ = ("eq", "eq_by", "eq_by_strict", "eq_strict")
