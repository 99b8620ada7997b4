"""
Apomorphism: an unfold whose step declares its own termination.

The step returns ``Continue(value, next_seed)`` to keep going or
``Halt(value)`` to emit a last value and stop. Nothing else is accepted.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from recursion_schemes.ana import SeedPair, compose_onto
from recursion_schemes.errors import MalformedStepResultError
from recursion_schemes.logger import logger

V = TypeVar("V")
S = TypeVar("S")


@dataclass(frozen=True)
class Continue(Generic[V, S]):
    value: V
    seed: S


@dataclass(frozen=True)
class Halt(Generic[V]):
    value: V


StepResult = Union[Continue[Any, Any], Halt[Any]]
ApoStepFunc = Callable[[Any], StepResult]


def apo(seed_pair: SeedPair, step: ApoStepFunc) -> Any:
    """
    Unfold from ``seed_pair = (seed, initial_acc)`` until the step halts.

    Raises:
        MalformedStepResultError: if ``step`` returns neither Continue nor Halt.

    Example:
        def zip_step(seeds):
            (a, *rest_a), (b, *rest_b) = seeds
            if not rest_a or not rest_b:
                return Halt((a, b))
            return Continue((a, b), (rest_a, rest_b))

        apo((([1, 2, 3, 4], ["a", "b", "c"]), []), zip_step)
        # [(1, "a"), (2, "b"), (3, "c")]
    """
    seed, initial_acc = seed_pair
    values = []
    while True:
        result = step(seed)
        if isinstance(result, Halt):
            values.append(result.value)
            break
        if isinstance(result, Continue):
            values.append(result.value)
            seed = result.seed
            continue
        raise MalformedStepResultError(result)

    logger.debug("apo unfolded %d values", len(values))
    return compose_onto(initial_acc, values)


@dataclass(frozen=True)
class Apo:
    """Reusable apomorphism with ``step`` bound."""

    step: ApoStepFunc

    def __call__(self, seed_pair: SeedPair) -> Any:
        return apo(seed_pair, self.step)
