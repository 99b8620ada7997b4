"""Tests for apo and its step results."""

import pytest
from recursion_schemes import Apo, Continue, Halt, MalformedStepResultError, apo


def zip_step(seeds):
    (a, *rest_a), (b, *rest_b) = seeds
    if not rest_a or not rest_b:
        return Halt((a, b))
    return Continue((a, b), (rest_a, rest_b))


class TestApo:
    def test_zip(self):
        result = apo((([1, 2, 3, 4], ["a", "b", "c"]), []), zip_step)
        assert result == [(1, "a"), (2, "b"), (3, "c")]

    def test_immediate_halt(self):
        assert apo((None, []), lambda seed: Halt("only")) == ["only"]

    def test_onto_existing_acc(self):
        def count_down(n):
            return Halt(n) if n == 1 else Continue(n, n - 1)

        assert apo((3, ["end"]), count_down) == [3, 2, 1, "end"]

    def test_counter_acc(self):
        def count_up(n):
            return Halt(n) if n == 4 else Continue(n, n + 1)

        assert apo((1, 0), count_up) == 10

    def test_malformed_result(self):
        with pytest.raises(MalformedStepResultError) as exc_info:
            apo((0, []), lambda seed: (seed, seed + 1))
        assert exc_info.value.result == (0, 1)
        assert exc_info.value.code == "MALFORMED_STEP_RESULT"

    def test_malformed_after_continue(self):
        def step(n):
            return Continue(n, n + 1) if n < 2 else None

        with pytest.raises(MalformedStepResultError) as exc_info:
            apo((0, []), step)
        assert exc_info.value.result is None

    def test_deep(self):
        n = 3000

        def step(i):
            return Halt(i) if i == n - 1 else Continue(i, i + 1)

        assert apo((0, []), step) == list(range(n))

    def test_deterministic(self):
        seeds = (([1, 2, 3], ["a", "b"]), [])
        assert apo(seeds, zip_step) == apo(seeds, zip_step)


class TestStepResult:
    def test_equality(self):
        assert Continue(1, 2) == Continue(1, 2)
        assert Halt(1) == Halt(1)
        assert Halt(1) != Continue(1, None)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Halt(1).value = 2


class TestCurriedApo:
    def test_reusable(self):
        zip_lists = Apo(zip_step)
        assert zip_lists((([1, 2], ["x", "y", "z"]), [])) == [(1, "x"), (2, "y")]
        assert zip_lists((([1], [2]), [])) == [(1, 2)]
