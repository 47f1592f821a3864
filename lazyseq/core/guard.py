"""
Guard
=====

Capability check and validation guard used at the entry of every combinator
that accepts a sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .._errors import NotASequenceError

logger = logging.getLogger(__name__)

# Iterable in Python, but scalar values for our purposes
_SCALAR_TEXT = (str, bytes, bytearray)


def is_sequence_like(value: object) -> bool:
    """
    True iff value exposes the iteration capability.

    Never raises for scalars: numbers, None and text return False.
    """
    if isinstance(value, _SCALAR_TEXT):
        return False
    return isinstance(value, Iterable)


def ensure_sequence(value: object) -> None:
    """Raise NotASequenceError unless value is sequence-like."""
    if not is_sequence_like(value):
        logger.debug("Rejected non-sequence value of type %s", type(value).__name__)
        raise NotASequenceError(value)


__all__ = ("ensure_sequence", "is_sequence_like")
