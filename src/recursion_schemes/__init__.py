"""
Recursion schemes: generic folds and unfolds over any recursive type.

Provides cata (fold), para (fold with the remainder in view), ana (unfold),
apo (unfold with self-declared termination) and hylo (unfold then fold).
Types take part by registering a Recursive capability; lists, tuples and
natural-number counters are supported out of the box.

Usage:
    from recursion_schemes import cata, ana, hylo, para, apo, Continue, Halt

    # Right fold
    total = cata([3, 5, 2, 9], 0, lambda x, acc: x + acc)

    # Unfold from a (seed, accumulator) pair
    squares = ana((1, []), lambda x: x > 5, lambda x: (x * x, x + 1))

    # Unfold then fold
    sum_of_squares = hylo((1, []), lambda x: x > 5, lambda x: (x * x, x + 1),
                          0, lambda x, acc: x + acc)
"""

from .capability import (
    Recursive,
    register,
    capability_for,
    registered_types,
    unwrap,
    wrap,
    is_base,
    empty,
)
from .instances import SequenceCapability, CounterCapability
from .cata import cata, fold, Cata, Fold
from .para import para, Para
from .ana import ana, Ana
from .apo import apo, Apo, Continue, Halt, StepResult
from .hylo import hylo, Hylo
from .combinators import u, y
from .errors import (
    RecursionSchemeError,
    UnsupportedTypeError,
    CapabilityError,
    BaseCaseError,
    MalformedStepResultError,
)

__version__ = "0.1.0"
__all__ = [
    # Capability
    "Recursive",
    "register",
    "capability_for",
    "registered_types",
    "unwrap",
    "wrap",
    "is_base",
    "empty",
    "SequenceCapability",
    "CounterCapability",
    # Folds
    "cata",
    "fold",
    "Cata",
    "Fold",
    "para",
    "Para",
    # Unfolds
    "ana",
    "Ana",
    "apo",
    "Apo",
    "Continue",
    "Halt",
    "StepResult",
    # Unfold then fold
    "hylo",
    "Hylo",
    # Combinators
    "u",
    "y",
    # Errors
    "RecursionSchemeError",
    "UnsupportedTypeError",
    "CapabilityError",
    "BaseCaseError",
    "MalformedStepResultError",
]
