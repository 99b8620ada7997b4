"""Built-in capabilities: ordered sequences and natural-number counters."""

from __future__ import annotations
from typing import Any, Sequence

from recursion_schemes.capability import Recursive, register
from recursion_schemes.errors import BaseCaseError, CapabilityError


@register(list, tuple)
class SequenceCapability(Recursive):
    """
    Base is the empty sequence; one step peels the head.

    Head/tail slicing copies the remainder on every step, so folding or
    unfolding a list of n elements costs O(n^2). Subclasses such as
    namedtuples compose and empty to plain tuples and lists.
    """

    def unwrap(self, d: Sequence[Any]) -> tuple[Any, Sequence[Any]]:
        if not d:
            raise BaseCaseError(d)
        return d[0], d[1:]

    def wrap(self, ds: Sequence[Any], d: Any) -> Sequence[Any]:
        if isinstance(ds, tuple):
            return (d,) + ds
        return [d] + ds

    def is_base(self, d: Sequence[Any]) -> bool:
        return len(d) == 0

    def empty(self, d: Sequence[Any]) -> Sequence[Any]:
        return () if isinstance(d, tuple) else []


@register(int)
class CounterCapability(Recursive):
    """
    Natural numbers counting down to zero.

    ``wrap`` adds the element to the remainder, so composing loses the
    split point and the round-trip law does not hold.
    """

    lawful = False

    def unwrap(self, d: int) -> tuple[int, int]:
        if d == 0:
            raise BaseCaseError(d)
        if d < 0:
            raise CapabilityError("NOT_NATURAL", f"{d} is not a natural number")
        return d, d - 1

    def wrap(self, ds: int, d: int) -> int:
        return d + ds

    def is_base(self, d: int) -> bool:
        return d == 0

    def empty(self, d: int) -> int:
        return 0
