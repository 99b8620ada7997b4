"""Tests for para."""

from recursion_schemes import Para, para


class TestPara:
    def test_suffixes(self):
        result = para([1, 2, 3, 4, 5], [], lambda x, xs, acc: [xs] + acc)
        assert result == [[2, 3, 4, 5], [3, 4, 5], [4, 5], [5], []]

    def test_base_returns_acc(self):
        assert para([], "acc", lambda x, xs, acc: None) == "acc"

    def test_counter_sees_predecessor(self):
        result = para(3, [], lambda n, rest, acc: [(n, rest)] + acc)
        assert result == [(3, 2), (2, 1), (1, 0)]

    def test_remainder_is_undecomposed(self):
        seen = []

        def record(x, xs, acc):
            seen.append((x, xs))
            return acc

        para(("a", "b", "c"), None, record)
        assert seen == [("c", ()), ("b", ("c",)), ("a", ("b", "c"))]

    def test_sliding_pairs(self):
        def pairs(x, xs, acc):
            if not xs:
                return acc
            return [(x, xs[0])] + acc

        assert para([1, 2, 3, 4], [], pairs) == [(1, 2), (2, 3), (3, 4)]

    def test_deep(self):
        n = 3000
        assert para(list(range(n)), 0, lambda x, xs, acc: acc + 1) == n

    def test_deterministic(self):
        combine = lambda x, xs, acc: [(x, xs)] + acc
        assert para([3, 1, 2], [], combine) == para([3, 1, 2], [], combine)

    def test_curried(self):
        suffixes = Para([], lambda x, xs, acc: [xs] + acc)
        assert suffixes([1, 2]) == [[2], []]
        assert suffixes([]) == []
