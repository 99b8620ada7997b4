"""
Recursive-structure capability and the type registry the engines dispatch on.

Any type can take part in the recursion schemes by registering a
``Recursive`` instance for it; the engines never know concrete types.

Example:
    @register(Peano)
    class PeanoCapability(Recursive):
        def unwrap(self, d):
            if d.pred is None:
                raise BaseCaseError(d)
            return d, d.pred

        def wrap(self, ds, d):
            return Peano(ds)

        def is_base(self, d):
            return d.pred is None

        def empty(self, d):
            return Peano(None)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable

from recursion_schemes.errors import UnsupportedTypeError
from recursion_schemes.logger import logger

_registry: dict[type, Recursive] = {}


class Recursive(ABC):
    """Decomposes and composes values of one recursive type, one step at a time."""

    # True when unwrap(wrap(s, x)) == (x, s) holds for every s and x.
    lawful: bool = True

    @abstractmethod
    def unwrap(self, d: Any) -> tuple[Any, Any]:
        """Split a non-base value into (current element, remaining structure).

        Raises:
            BaseCaseError: if ``d`` is the base value.
        """

    @abstractmethod
    def wrap(self, ds: Any, d: Any) -> Any:
        """Compose element ``d`` onto remainder ``ds``."""

    @abstractmethod
    def is_base(self, d: Any) -> bool:
        """True exactly at the terminal form."""

    @abstractmethod
    def empty(self, d: Any) -> Any:
        """Canonical base value for the type of ``d``."""


def register(*types: type) -> Callable[[Any], Any]:
    """
    Bind a capability to one or more types.

    Usable as a class decorator (the class is instantiated once) or called
    with an existing instance: ``register(MyType)(MyCapability())``.
    """
    if not types:
        raise TypeError("register() needs at least one type")

    def decorator(capability):
        instance = capability() if isinstance(capability, type) else capability
        if not isinstance(instance, Recursive):
            raise TypeError(
                f"{type(instance).__qualname__} does not implement Recursive"
            )
        for t in types:
            _registry[t] = instance
            logger.debug("Registered %s for %s", type(instance).__name__, t.__qualname__)
        return capability

    return decorator


def capability_for(value: Any) -> Recursive:
    """Resolve the capability for ``value``, honouring subclassing."""
    for t in type(value).__mro__:
        instance = _registry.get(t)
        if instance is not None:
            return instance
    raise UnsupportedTypeError(type(value))


def registered_types() -> tuple[type, ...]:
    return tuple(_registry)


def unwrap(d: Any) -> tuple[Any, Any]:
    return capability_for(d).unwrap(d)


def wrap(ds: Any, d: Any) -> Any:
    return capability_for(ds).wrap(ds, d)


def is_base(d: Any) -> bool:
    return capability_for(d).is_base(d)


def empty(d: Any) -> Any:
    return capability_for(d).empty(d)
