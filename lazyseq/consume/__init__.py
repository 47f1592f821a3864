from .collect import collect, count
from .fold import fold
from .search import all, any, find, find_map, nth, some

__all__ = (
    "all",
    "any",
    "collect",
    "count",
    "find",
    "find_map",
    "fold",
    "nth",
    "some",
)
