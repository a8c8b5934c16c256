from __future__ import annotations

from _infra import banner, run

from iterkit import strings
from kungfu import Nothing, Some


def main() -> None:
    banner("01_quickstart: filter + or_ + map + every + nth")

    it = (
        strings(["abc", "bbc", "abccd", "abcdd"])
        .filter(lambda s: s.startswith("ab"))
        .or_(lambda s: s != "abcdd", "abcde")
        .map(lambda s: f"{s} starts from 'ab'")
        .every(lambda i, s: f"{i}: {s}")
    )

    it.each(print)

    match it.nth(2):
        case Some(item):
            print(f"nth(2): {item}")
        case Nothing():
            print("nth(2): out of range")

    print(f"count: {it.count()}")


if __name__ == "__main__":
    run(main)
