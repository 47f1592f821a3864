from __future__ import annotations

from _infra import Reading, banner, readings, run

import lazyseq as ls


def main() -> None:
    banner("02_curried_pipelines: partial application + pipe/compose")

    # Curried steps, sequence supplied last
    hot = ls.filter(lambda r: r.celsius > 25.0)
    first_five = ls.take(5)

    alerts = ls.pipe(
        readings(),
        hot,
        ls.map(lambda r: f"{r.sensor}: {r.celsius:.1f}C"),
        first_five,
        ls.collect,
    )
    for line in alerts:
        print(line)

    # Reusable pipeline, each call starts a fresh traversal
    mean_of_first = ls.compose(
        ls.take(20),
        ls.fold(lambda acc, r: (acc[0] + r.celsius, acc[1] + 1), (0.0, 0)),
    )
    total, n = mean_of_first(readings())
    print(f"mean over {n}: {total / n:.2f}C")

    by_sensor: dict[str, list[Reading]] = {}
    ls.count(ls.tap(lambda r: by_sensor.setdefault(r.sensor, []).append(r), ls.take(9, readings())))
    print({sensor: len(rs) for sensor, rs in by_sensor.items()})


if __name__ == "__main__":
    run(main)
