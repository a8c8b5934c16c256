from __future__ import annotations

from _infra import banner, run

from iterkit import Iter, ListSeq, Strings, strings
from kungfu import Error, Ok, Result


class Ints(ListSeq[int]):
    __slots__ = ()


def parse_int(text: str) -> Result[int, str]:
    # Locality: a failed parse only drops the element.
    if text.lstrip("-").isdigit():
        return Ok(int(text))
    return Error(f"not an int: {text!r}")


def main() -> None:
    banner("02_conversions: into / from_ / zip / chain")

    numbers = strings(["1", "two", "3"]).into(Ints(), parse_int)
    print(f"into:   {numbers.collect()}")

    labels = Iter(Strings()).from_(Ints([10, 20, 30]), lambda n: Ok(f"#{n}"))
    print(f"from_:  {labels.collect()}")

    pairs = strings(["a", "b", "c"]).zip(Ints([1, 2]))
    pairs.each(lambda p: print(f"zip:    {p}"))

    joined = strings(["x"]).chain(strings(["y", "z"]))
    print(f"chain:  {joined.collect()}")

    print(f"first digit: {strings(['a', '1', 'b', '2']).first(str.isdigit)}")
    print(f"last digit:  {strings(['a', '1', 'b', '2']).last(str.isdigit)}")


if __name__ == "__main__":
    run(main, verbose=True)
