"""Paramorphism: a fold whose combining step also sees the unconsumed remainder."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from recursion_schemes.capability import capability_for
from recursion_schemes.logger import logger

B = TypeVar("B")

ParaCombineFunc = Callable[[Any, Any, B], B]


def para(data: Any, acc: B, combine: ParaCombineFunc[B]) -> B:
    """
    Fold ``data`` from the right, passing each remainder to ``combine``.

    ``combine(elem, rest, folded_rest)`` gets ``rest`` as it was before any
    further decomposition.

    Example:
        >>> para([1, 2, 3], [], lambda x, xs, acc: [xs] + acc)
        [[2, 3], [3], []]
    """
    frames: list[tuple[Any, Any]] = []
    capability = capability_for(data)
    while not capability.is_base(data):
        elem, data = capability.unwrap(data)
        frames.append((elem, data))
        capability = capability_for(data)

    result = acc
    for elem, rest in reversed(frames):
        result = combine(elem, rest, result)
    logger.debug("para folded %d elements", len(frames))
    return result


@dataclass(frozen=True)
class Para(Generic[B]):
    """Reusable paramorphism with ``acc`` and ``combine`` bound."""

    acc: B
    combine: ParaCombineFunc[B]

    def __call__(self, data: Any) -> B:
        return para(data, self.acc, self.combine)
