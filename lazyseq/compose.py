"""
Composition helpers.

Curried combinators take the sequence last, so a pipeline is a left-to-right
list of partially applied steps:

    pipe(
        range(100),
        filter(lambda x: x % 3 == 0),
        map(lambda x: x * x),
        take(5),
        collect,
    )  # [0, 9, 36, 81, 144]
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from toolz import compose as _compose
from toolz import pipe as _pipe


def pipe(value: typing.Any, *steps: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """Thread value through steps, left to right."""
    return _pipe(value, *steps) if steps else value


def compose(*steps: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Build a reusable pipeline, applied left to right like pipe().

    Each call starts a fresh traversal:

        squares = compose(map(lambda x: x * x), collect)
        squares([1, 2])  # [1, 4]
        squares([3])     # [9]
    """
    # toolz.compose applies right-to-left
    return _compose(*reversed(steps))


__all__ = ("compose", "pipe")
