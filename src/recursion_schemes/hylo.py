"""
Hylomorphism: an unfold consumed by a fold, ``hylo = cata . ana``.

When the accumulator's capability satisfies the round-trip law the fused
form skips composing the intermediate structure: the unfolded values are
still collected into a list, but are never wrapped onto the accumulator.
The initial accumulator is folded first and the values are combined onto
that result, last value first. Otherwise the structure is built and then folded.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from recursion_schemes import config
from recursion_schemes.ana import FinishedFunc, SeedPair, StepFunc, compose_onto, unfold_values
from recursion_schemes.capability import capability_for
from recursion_schemes.cata import CombineFunc, cata
from recursion_schemes.logger import logger

B = TypeVar("B")


def hylo(
    seed_pair: SeedPair,
    finished: FinishedFunc,
    step: StepFunc,
    acc: B,
    combine: CombineFunc[Any, B],
) -> B:
    """
    Unfold from ``seed_pair`` with ``finished``/``step``, then fold the
    result with ``acc``/``combine``.

    Example:
        >>> hylo((1, []), lambda x: x > 5, lambda x: (x * x, x + 1),
        ...      0, lambda x, acc: x + acc)
        55
    """
    seed, initial_acc = seed_pair
    values = unfold_values(seed, finished, step)

    if config.settings.fuse_hylo and capability_for(initial_acc).lawful:
        logger.debug("hylo fused over %d values", len(values))
        result = cata(initial_acc, acc, combine)
        for value in reversed(values):
            result = combine(value, result)
        return result

    logger.debug("hylo building intermediate structure of %d values", len(values))
    return cata(compose_onto(initial_acc, values), acc, combine)


@dataclass(frozen=True)
class Hylo:
    """
    Chain a one-argument unfold into a one-argument fold.

    Example:
        five_squares = Ana(lambda x: x > 5, lambda x: (x * x, x + 1))
        my_sum = Cata(0, lambda x, acc: x + acc)
        Hylo(five_squares, my_sum)((1, []))  # 55
    """

    ana_fn: Callable[[Any], Any]
    cata_fn: Callable[[Any], Any]

    def __call__(self, data: Any) -> Any:
        return self.cata_fn(self.ana_fn(data))
