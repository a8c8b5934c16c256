from __future__ import annotations

from collections import deque

from _infra import banner, run

from iterkit import CapabilityError, Iter
from kungfu import Nothing, Option, Some


class Queue[T]:
    """
    Client-side sequence: only the required operations.

    Reading pops, so it can be traversed once and never rewound.
    """

    def __init__(self, *items: T) -> None:
        self._items: deque[T] = deque(items)

    def empty(self) -> Queue[T]:
        return Queue()

    def append(self, item: T, /) -> None:
        self._items.append(item)

    def advance(self) -> Option[T]:
        if self._items:
            return Some(self._items.popleft())
        return Nothing()


def main() -> None:
    banner("03_custom_sequence: capability negotiation")

    it = Iter(Queue(1, 2, 3, 4)).filter(lambda n: n % 2 == 0).map(lambda n: n * 100)
    it.each(print)
    print(f"count after each (not rewindable): {it.count()}")

    try:
        Iter(Queue("a")).every(lambda i, s: f"{i}:{s}")
    except CapabilityError as exc:
        print(f"every: {exc}")


if __name__ == "__main__":
    run(main)
