"""
Anamorphism: unfold a recursive structure from a seed.

    ana((seed, acc)) = wrap(acc, value)                  if finished(next_seed)
                     = wrap(ana((next_seed, acc)), value) otherwise
    where (value, next_seed) = step(seed)

Values end up in the structure in the order they were generated. There is no
guard against a ``finished`` predicate that never holds.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from recursion_schemes.capability import wrap
from recursion_schemes.logger import logger

SeedPair = tuple[Any, Any]
FinishedFunc = Callable[[Any], bool]
StepFunc = Callable[[Any], tuple[Any, Any]]


def compose_onto(acc: Any, values: Iterable[Any]) -> Any:
    """Wrap ``values`` onto ``acc`` so the first value ends up outermost."""
    result = acc
    for value in reversed(list(values)):
        result = wrap(result, value)
    return result


def unfold_values(seed: Any, finished: FinishedFunc, step: StepFunc) -> list[Any]:
    """Run ``step`` from ``seed`` until ``finished`` holds for the next seed."""
    values = []
    while True:
        value, seed = step(seed)
        values.append(value)
        if finished(seed):
            return values


def ana(seed_pair: SeedPair, finished: FinishedFunc, step: StepFunc) -> Any:
    """
    Unfold from ``seed_pair = (seed, initial_acc)``.

    ``step`` is applied at least once; ``finished`` is tested on each seed it
    produces. The composed structure has the type of ``initial_acc``.

    Example:
        >>> ana((1, []), lambda x: x > 5, lambda x: (x * x, x + 1))
        [1, 4, 9, 16, 25]
    """
    seed, initial_acc = seed_pair
    values = unfold_values(seed, finished, step)
    logger.debug("ana unfolded %d values", len(values))
    return compose_onto(initial_acc, values)


@dataclass(frozen=True)
class Ana:
    """
    Reusable unfold with ``finished`` and ``step`` bound.

    Example:
        squares = Ana(lambda x: x > 5, lambda x: (x * x, x + 1))
        squares((1, []))  # [1, 4, 9, 16, 25]
    """

    finished: FinishedFunc
    step: StepFunc

    def __call__(self, seed_pair: SeedPair) -> Any:
        return ana(seed_pair, self.finished, self.step)
