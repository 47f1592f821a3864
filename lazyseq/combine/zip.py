"""
Zip combinator
==============

NOTE: это НЕ попарный zip. Элементы второй последовательности вставляются
между элементами первой в один плоский поток:

    collect(zip([1, 2], [3, 4]))  # [1, 3, 2, 4]
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from ..core import Seq, curry, ensure_sequence


@curry
def zip[T](first: Iterable[T], second: Iterable[T]) -> Seq[T]:
    """
    Flat interleave: a1, b1, a2, b2, ...

    Once second runs out, the rest of first is yielded alone. Once first runs
    out, whatever is left in second is never pulled.
    """
    ensure_sequence(first)
    ensure_sequence(second)
    left = Seq.of(first)
    right = Seq.of(second)
    # an element of second is due before the next element of first
    owed = False

    def pull() -> Option[T]:
        nonlocal owed
        if owed:
            owed = False
            step = right.advance()
            match step:
                case Some(_):
                    return step
                case _:
                    pass

        step = left.advance()
        match step:
            case Some(_):
                owed = True
                return step
            case _:
                return Nothing()

    return Seq(pull)


__all__ = ("zip",)
