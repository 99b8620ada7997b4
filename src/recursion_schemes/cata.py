"""
Catamorphism: fold a recursive structure into a single value.

The fold is right-associative: the remainder is folded before it is
combined with the current element, exactly as

    cata(data) = acc                                if is_base(data)
               = combine(elem, cata(rest))          otherwise

The engine walks the structure with an explicit stack, so folding depth is
not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from recursion_schemes.capability import capability_for
from recursion_schemes.logger import logger

A = TypeVar("A")
B = TypeVar("B")

CombineFunc = Callable[[A, B], B]


def _decompose(data: Any) -> tuple[list[Any], Any]:
    """Unwrap ``data`` down to its base, returning (elements, base value)."""
    elems: list[Any] = []
    capability = capability_for(data)
    while not capability.is_base(data):
        elem, data = capability.unwrap(data)
        elems.append(elem)
        capability = capability_for(data)
    return elems, data


def cata(data: Any, acc: B, combine: CombineFunc[Any, B]) -> B:
    """
    Fold ``data`` from the right.

    Args:
        data: Any value with a registered capability.
        acc: Result at the base case.
        combine: ``combine(elem, folded_rest)``.

    Example:
        >>> cata([3, 5, 2, 9], 0, lambda x, acc: x + acc)
        19
        >>> cata(5, 1, lambda n, acc: n * acc)
        120
    """
    elems, _ = _decompose(data)
    result = acc
    for elem in reversed(elems):
        result = combine(elem, result)
    logger.debug("cata folded %d elements", len(elems))
    return result


def fold(data: Any, on_base: Callable[[Any], B], combine: CombineFunc[Any, B]) -> B:
    """
    Fold with a base transform instead of a fixed base result.

    ``on_base`` receives the base value the decomposition ends on
    (``[]`` for a list, ``0`` for a counter).

    Example:
        >>> fold([3, 5, 2, 9], lambda empty: 0, lambda x, acc: x + acc)
        19
    """
    elems, base = _decompose(data)
    result = on_base(base)
    for elem in reversed(elems):
        result = combine(elem, result)
    logger.debug("fold folded %d elements", len(elems))
    return result


@dataclass(frozen=True)
class Cata(Generic[B]):
    """
    Reusable fold with ``acc`` and ``combine`` bound.

    Example:
        my_sum = Cata(0, lambda x, acc: x + acc)
        my_sum([3, 5, 2, 9])  # 19
    """

    acc: B
    combine: CombineFunc[Any, B]

    def __call__(self, data: Any) -> B:
        return cata(data, self.acc, self.combine)


@dataclass(frozen=True)
class Fold(Generic[B]):
    """Reusable two-function fold."""

    on_base: Callable[[Any], B]
    combine: CombineFunc[Any, B]

    def __call__(self, data: Any) -> B:
        return fold(data, self.on_base, self.combine)
