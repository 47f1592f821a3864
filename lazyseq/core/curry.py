"""
Curry
=====

Arity-based partial application applied to every multi-argument combinator.

    take(2)            # -> curried, waiting for the sequence
    take(2)([1, 2, 3]) # -> Seq
    take(2, [1, 2, 3]) # -> Seq
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def declared_arity(fn: Callable[..., typing.Any]) -> int:
    """
    Count positional parameters before the first one with a default.

    *args, keyword-only parameters and defaulted parameters do not count.
    """
    arity = 0
    for param in inspect.signature(fn).parameters.values():
        if param.kind not in _POSITIONAL or param.default is not inspect.Parameter.empty:
            break
        arity += 1
    return arity


def _curried[R](
    fn: Callable[..., R],
    arity: int,
    prefix: tuple[typing.Any, ...],
) -> Callable[..., typing.Any]:
    @functools.wraps(fn)
    def wrapper(*args: typing.Any) -> typing.Any:
        supplied = (*prefix, *args)
        if len(supplied) >= arity:
            return fn(*supplied)
        return _curried(fn, arity, supplied)

    return wrapper


@typing.overload
def curry[R](fn: Callable[..., R], /) -> Callable[..., typing.Any]: ...


@typing.overload
def curry[R](
    fn: None = None, /, *, arity: int
) -> Callable[[Callable[..., R]], Callable[..., typing.Any]]: ...


@typing.overload
def curry[R](fn: Callable[..., R], /, *, arity: int) -> Callable[..., typing.Any]: ...


def curry[R](
    fn: Callable[..., R] | None = None,
    /,
    *,
    arity: int | None = None,
) -> typing.Any:
    """
    Wrap fn so it can be called with any prefix of its arguments.

    Once the accumulated arguments reach the arity, fn is called with exactly
    those arguments. Otherwise a new wrapper holding the longer prefix is
    returned; the original wrapper is never mutated.

    Arity is read from the signature unless given explicitly:

        @curry
        def add(a, b): ...

        @curry(arity=2)
        def builtin_like(*args): ...
    """
    if arity is not None and arity < 0:
        raise ValueError(f"curry(): arity must be >= 0, got {arity}")

    def decorate(target: Callable[..., R]) -> Callable[..., typing.Any]:
        n = declared_arity(target) if arity is None else arity
        return _curried(target, n, ())

    if fn is None:
        return decorate
    return decorate(fn)


__all__ = ("curry", "declared_arity")
