from .skip import skip, skip_while
from .take import take, take_while

__all__ = ("skip", "skip_while", "take", "take_while")
