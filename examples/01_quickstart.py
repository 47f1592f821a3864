from __future__ import annotations

from _infra import banner, run

from kungfu import Nothing, Some

import lazyseq as ls


def main() -> None:
    banner("01_quickstart: lazy transforms + consumers")

    squares = ls.map(lambda x: x * x, range(10))
    evens = ls.filter(lambda x: x % 2 == 0, squares)
    print(ls.collect(ls.take(3, evens)))  # [0, 4, 16]

    # Nothing runs until pulled
    noisy = ls.tap(lambda x: print(f"  pulled {x}"), [1, 2, 3])
    print("built, nothing pulled yet")
    print(ls.nth(1, noisy))

    match ls.find(lambda x: x > 100, ls.scan(lambda acc, x: acc + x, 0, ls.repeat(7))):
        case Some(value):
            print(f"first running total over 100: {value}")
        case Nothing():
            print("never got there")

    print(ls.collect(ls.zip([1, 2], [3, 4])))  # [1, 3, 2, 4]
    print(ls.collect(ls.enumerate("a b c".split())))  # [('a', 0), ('b', 1), ('c', 2)]


if __name__ == "__main__":
    run(main)
