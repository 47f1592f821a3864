"""
Seq - pull-based lazy sequence
==============================

Единственная операция - advance(): Some(value) или Nothing() когда
последовательность исчерпана.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._types import Pull


class Seq[T]:
    """
    Single-pass, pull-driven sequence.

    Wraps a pull function returning Option[T]. Nothing is computed until
    advance() is called, and once the pull reports exhaustion the Seq stays
    exhausted: the pull is never consulted again.

    Seq is also a Python iterator, so it can be consumed with ``for`` and
    passed anywhere a sequence-like value is accepted.

    Example:
        seq = Seq.of([1, 2])
        seq.advance()  # Some(1)
        seq.advance()  # Some(2)
        seq.advance()  # Nothing()
    """

    __slots__ = ("_pull", "_exhausted")

    def __init__(self, pull: Pull[T], /) -> None:
        """Create Seq from a fn producing the next element."""
        self._pull = pull
        self._exhausted = False

    @staticmethod
    def of[V](source: Iterable[V]) -> Seq[V]:
        """
        Adapt any iterable into a Seq.

        A Seq is returned unchanged (its cursor is shared). Any other iterable
        gets a fresh iterator, so two calls over the same list advance
        independently.
        """
        if isinstance(source, Seq):
            return source

        iterator = iter(source)

        def pull() -> Option[V]:
            try:
                return Some(next(iterator))
            except StopIteration:
                return Nothing()

        return Seq(pull)

    @property
    def exhausted(self) -> bool:
        """True once advance() has returned Nothing()."""
        return self._exhausted

    def advance(self) -> Option[T]:
        """Pull the next element: Some(value), or Nothing() when exhausted."""
        if self._exhausted:
            return Nothing()

        step = self._pull()
        match step:
            case Some(_):
                return step
            case _:
                self._exhausted = True
                return Nothing()

    # Iterator protocol

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.advance():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "pending"
        return f"Seq({state})"


__all__ = ("Seq",)
