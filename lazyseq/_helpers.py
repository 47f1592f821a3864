"""Internal helpers for combinators.

Common functions used across multiple combinator modules."""

from __future__ import annotations

import operator

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Equality used by eq/eq_strict
strict_eq = operator.eq

__all__ = ("identity", "strict_eq")
