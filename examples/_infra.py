from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    celsius: float


def readings() -> Iterator[Reading]:
    """Endless stream of fake sensor readings."""
    tick = 0
    while True:
        yield Reading(sensor=f"s{tick % 3}", celsius=18.0 + (tick * 7) % 11)
        tick += 1


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
