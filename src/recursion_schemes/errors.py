"""Error hierarchy for recursion scheme engines and capabilities."""

from __future__ import annotations

from typing import Any


class RecursionSchemeError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause


class UnsupportedTypeError(RecursionSchemeError, TypeError):
    """No capability instance is registered for a value's type."""

    def __init__(self, value_type: type) -> None:
        super().__init__(
            "UNSUPPORTED_TYPE",
            f"No recursive capability registered for {value_type.__qualname__}",
        )
        self.value_type = value_type


class CapabilityError(RecursionSchemeError, ValueError):
    """A capability operation was applied outside its domain."""


class BaseCaseError(CapabilityError):
    def __init__(self, value: Any) -> None:
        super().__init__("BASE_CASE", f"Cannot unwrap base value {value!r}")
        self.value = value


class MalformedStepResultError(RecursionSchemeError):
    """An apo step returned something other than Continue or Halt."""

    def __init__(self, result: Any) -> None:
        super().__init__(
            "MALFORMED_STEP_RESULT",
            f"Step must return Continue or Halt, got {type(result).__qualname__}: {result!r}",
        )
        self.result = result
