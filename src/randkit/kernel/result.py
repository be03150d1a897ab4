"""Kernel value types - fallback policy and fallible results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Fallback:
    """
    Policy applied when a bounded retry runs out of attempts.

    Kinds:
    - use_last: Return the final sample, even though it failed the condition
    - use_default: Return the configured default value
    - keep_trying: Keep sampling without a bound
      - Hazard: never terminates if the condition cannot be satisfied
    - delegate: Return the result of calling the configured thunk
    """

    kind: Literal["use_last", "use_default", "keep_trying", "delegate"]
    default: Any | None = None
    thunk: Callable[[], Any] | None = None

    @staticmethod
    def UseLast() -> Fallback:
        return Fallback(kind="use_last")

    @staticmethod
    def UseDefault(value: Any) -> Fallback:
        return Fallback(kind="use_default", default=value)

    @staticmethod
    def KeepTrying() -> Fallback:
        return Fallback(kind="keep_trying")

    @staticmethod
    def Delegate(thunk: Callable[[], Any]) -> Fallback:
        return Fallback(kind="delegate", thunk=thunk)


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Success or failure of a fallible transform.

    Attributes:
        value: Transformed value on success
        error: Exception raised by the transform on failure
    """

    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> Outcome[T]:
        return cls(error=error)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
