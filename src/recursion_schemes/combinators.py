"""
Fixed-point combinators.

Python evaluates arguments eagerly, so ``y`` is the applicative-order form
(the Z combinator): the self-application is delayed behind a lambda.

    Y = λf.(λx.f (λv.(x x) v)) (λx.f (λv.(x x) v))
"""

from typing import Any, Callable


def u(f: Callable[[Any], Any]) -> Any:
    """Self-application: ``u(f) == f(f)``."""
    return f(f)


def y(f: Callable[[Callable[[Any], Any]], Callable[[Any], Any]]) -> Callable[[Any], Any]:
    """
    Fixed point of ``f``: a function ``g`` with ``g == f(g)``.

    Example:
        fact = y(lambda rec: lambda n: 1 if n == 0 else n * rec(n - 1))
        fact(5)  # 120
    """
    return u(lambda x: f(lambda v: u(x)(v)))
