from .cycle import cycle, repeat
from .sources import empty, once

__all__ = ("cycle", "empty", "once", "repeat")
