"""Filter combinators

Drop elements lazily: rejected elements are consumed from upstream but
never yielded."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._types import Predicate, PredMap
from ..core import Seq, curry, ensure_sequence

@curry
def filter[T](pred: Predicate[T], source: Iterable[T]) -> Seq[T]:
    """Keep elements for which pred is truthy."""
    ensure_sequence(source)
    upstream = Seq.of(source)

    def pull() -> Option[T]:
        for value in upstream:
            if pred(value):
                return Some(value)
        return Nothing()

    return Seq(pull)

@curry
def filter_map[T, R](pred_map: PredMap[T, R], source: Iterable[T]) -> Seq[R]:
    """
    Map, keeping only truthy results.

    The mapped result is yielded, not the original element. 0, "", False,
    None and empty containers are all dropped.
    """
    ensure_sequence(source)
    upstream = Seq.of(source)

    def pull() -> Option[R]:
        for value in upstream:
            result = pred_map(value)
            if result:
                return Some(result)
        return Nothing()

    return Seq(pull)

__all__ = ("filter", "filter_map")
