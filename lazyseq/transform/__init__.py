from .filter import filter, filter_map
from .flat import flat_map, flatten
from .mapping import enumerate, inspect, map, scan, tap

__all__ = (
    "enumerate",
    "filter",
    "filter_map",
    "flat_map",
    "flatten",
    "inspect",
    "map",
    "scan",
    "tap",
)
