from .chain import chain
from .eq import eq, eq_by, eq_by_strict, eq_strict
from .zip import zip

__all__ = (
    "chain",
    "eq",
    "eq_by",
    "eq_by_strict",
    "eq_strict",
    "zip",
)
