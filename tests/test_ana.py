"""Tests for ana."""

import pytest
from recursion_schemes import Ana, UnsupportedTypeError, ana


def square_step(x):
    return x * x, x + 1


def past_five(x):
    return x > 5


class TestAna:
    def test_squares(self):
        assert ana((1, []), past_five, square_step) == [1, 4, 9, 16, 25]

    def test_generation_order(self):
        assert ana((3, []), lambda x: x == 0, lambda x: (x, x - 1)) == [3, 2, 1]

    def test_onto_existing_acc(self):
        assert ana((1, [0]), past_five, square_step) == [1, 4, 9, 16, 25, 0]

    def test_tuple_acc(self):
        assert ana((1, ()), lambda x: x > 3, lambda x: (x, x + 1)) == (1, 2, 3)

    def test_counter_acc_sums(self):
        assert ana((1, 0), past_five, lambda x: (x, x + 1)) == 15

    def test_step_applied_at_least_once(self):
        assert ana((10, []), past_five, square_step) == [100]

    def test_finished_sees_next_seed(self):
        seen = []

        def finished(seed):
            seen.append(seed)
            return seed >= 3

        ana((0, []), finished, lambda x: (x, x + 1))
        assert seen == [1, 2, 3]

    def test_zip(self):
        def step(seeds):
            (a, *rest_a), (b, *rest_b) = seeds
            return (a, b), (rest_a, rest_b)

        def finished(seeds):
            rest_a, rest_b = seeds
            return not rest_a or not rest_b

        result = ana((([1, 2, 3, 4], ["a", "b", "c"]), []), finished, step)
        assert result == [(1, "a"), (2, "b"), (3, "c")]

    def test_unsupported_acc(self):
        with pytest.raises(UnsupportedTypeError):
            ana((1, "acc"), past_five, square_step)

    def test_deep(self):
        n = 3000
        assert ana((0, []), lambda x: x >= n, lambda x: (x, x + 1)) == list(range(n))

    def test_deterministic(self):
        assert ana((1, []), past_five, square_step) == ana((1, []), past_five, square_step)


class TestCurriedAna:
    def test_reusable(self):
        squares = Ana(past_five, square_step)
        assert squares((1, [])) == [1, 4, 9, 16, 25]
        assert squares((4, [])) == [16, 25]
