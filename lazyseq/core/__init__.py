from .curry import curry, declared_arity
from .guard import ensure_sequence, is_sequence_like
from .sequence import Seq

__all__ = (
    "Seq",
    "curry",
    "declared_arity",
    "ensure_sequence",
    "is_sequence_like",
)
