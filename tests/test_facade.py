"""
Tests for the Iter facade: chaining, ownership transfer and scenarios.
"""

import pytest
from kungfu import Error, Nothing, Ok, Result

from iterkit import CapabilityError, ConsumedError, Indexed, Iter, Pair, Strings, strings
from tests.sequences import Countdown, Ints, OneShot, drain


def parse_int(s: str) -> Result[int, str]:
    if s.isdigit():
        return Ok(int(s))
    return Error(f"not an int: {s!r}")


class TestScenarios:
    """End-to-end pipelines."""

    def test_string_pipeline(self):
        it = (
            strings(["abc", "bbc", "abccd", "abcdd"])
            .filter(lambda s: s.startswith("ab"))
            .or_(lambda s: s != "abcdd", "abcde")
            .map(lambda s: f"{s} starts from 'ab'")
            .every(lambda i, s: f"{i}: {s}")
        )
        seen: list[str] = []
        it.each(seen.append)
        assert seen == [
            "0: abc starts from 'ab'",
            "1: abccd starts from 'ab'",
            "2: abcde starts from 'ab'",
        ]
        assert it.nth(2).unwrap() == "2: abcde starts from 'ab'"

    def test_into_ints(self):
        target = Ints()
        result = strings(["1", "2", "3"]).into(target, parse_int)
        assert result.collect() == [1, 2, 3]
        assert target.to_native() == [1, 2, 3]

    def test_from_ints(self):
        result = Iter(Strings()).from_(Ints([1, 2, 3]), lambda n: Ok(f"{n}"))
        assert result.collect() == ["1", "2", "3"]

    def test_first_and_last(self):
        assert strings(["a", "1", "b", "2"]).first(str.isdigit).unwrap() == Indexed(1, "1")
        assert strings(["a", "1", "b", "2"]).last(str.isdigit).unwrap() == Indexed(3, "2")

    def test_zip(self):
        result = strings(["a", "b", "c"]).zip(Ints([10, 20]))
        assert result.collect() == [Pair("a", 10), Pair("b", 20)]

    def test_chain(self):
        assert strings(["a"]).chain(strings(["b", "c"])).collect() == ["a", "b", "c"]


class TestOwnership:
    """Producing combinators move the sequence into the returned Iter."""

    def test_receiver_is_consumed(self):
        it = strings(["a"])
        it.map(str.upper)
        with pytest.raises(ConsumedError) as exc_info:
            it.count()
        assert exc_info.value.operation == "count"

    def test_every_combinator_consumes(self):
        producing = [
            lambda it: it.filter(bool),
            lambda it: it.map(str.upper),
            lambda it: it.every(lambda i, s: s),
            lambda it: it.or_(bool, "x"),
            lambda it: it.chain(Strings()),
            lambda it: it.zip(Strings()),
            lambda it: it.into(Ints(), parse_int),
            lambda it: it.from_(Ints(), lambda n: Ok(str(n))),
        ]
        for combinator in producing:
            it = strings(["a"])
            assert isinstance(combinator(it), Iter)
            with pytest.raises(ConsumedError):
                it.collect()

    def test_iter_operand_is_consumed(self):
        other = strings(["b"])
        strings(["a"]).chain(other)
        with pytest.raises(ConsumedError):
            other.map(str.upper)

    def test_raw_operand_is_left_drained(self):
        other = Strings(["b"])
        strings(["a"]).chain(other)
        assert drain(other) == []

    def test_inspecting_keeps_handle(self):
        it = strings(["a", "b"])
        it.each(lambda _: None)
        assert it.count() == 2
        assert it.nth(0).unwrap() == "a"
        assert it.collect() == ["a", "b"]

    def test_capability_error_keeps_handle(self):
        it = Iter(OneShot(["a"]))
        with pytest.raises(CapabilityError):
            it.every(lambda i, s: s)
        assert it.count() == 1

    def test_from_reuses_resettable_sequence(self):
        seq = Strings(["old"])
        result = Iter(seq).from_(Ints([1]), lambda n: Ok(str(n)))
        assert result.collect() is seq.to_native()

    def test_repr(self):
        it = strings(["a"])
        assert repr(it) == "Iter(Strings(['a']))"
        it.map(str.upper)
        assert repr(it) == "Iter(<consumed>)"


class TestCounters:
    """count and advance_by share the visited counter."""

    def test_count_is_stable(self):
        it = strings(["a", "b", "c"])
        assert it.count() == 3
        assert it.count() == 3

    def test_count_on_one_shot_keeps_total(self):
        it = Iter(OneShot([1, 2]))
        assert it.count() == 2
        assert it.count() == 2

    def test_count_includes_advanced(self):
        it = strings(["a", "b", "c"])
        it.advance_by(2)
        assert it.count() == 3
        # rewound: a fresh full count
        assert it.count() == 3

    def test_count_includes_advanced_on_one_shot(self):
        it = Iter(OneShot([1, 2, 3]))
        assert it.advance_by(1) == (0, True)
        assert it.count() == 3
        assert it.advance_by(1) == (2, False)

    @pytest.mark.parametrize("n", [1, 3])
    def test_advance_by_empty(self, n):
        assert strings().advance_by(n) == (0, False)

    def test_advance_by_accumulates(self):
        it = strings(["a", "b", "c", "d"])
        assert it.advance_by(1) == (0, True)
        assert it.advance_by(2) == (2, True)
        assert it.advance_by(5) == (3, False)

    def test_rewind_resets_position(self):
        it = strings(["a", "b", "c"])
        it.advance_by(2)
        it.count()
        assert it.advance_by(1) == (0, True)

    def test_nth_resets_position(self):
        it = Iter(Countdown(["a", "b", "c"]))
        it.advance_by(2)
        # counted from the current cursor
        assert it.nth(0).unwrap() == "c"
        assert it.advance_by(1) == (0, True)


class TestErrors:
    """Capability violations surface through the facade."""

    def test_collect_requires_materializable(self):
        with pytest.raises(CapabilityError):
            Iter(Countdown(["a"])).collect()

    def test_first_requires_enumerable(self):
        with pytest.raises(CapabilityError):
            Iter(OneShot(["a"])).first(bool)

    def test_nth_beyond(self):
        assert isinstance(strings(["a"]).nth(3), Nothing)
