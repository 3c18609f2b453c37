"""Result and Error — the outcome of every aggregate operation.

Operations return ``Result.fail(error)`` for expected business-rule
violations instead of raising.  ``Error.code`` is a stable dotted
identifier (``"Order.CurrencyMismatch"``) meant for programmatic matching;
``Error.message`` is for humans.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from commerce.domain.exceptions import GuardError


@dataclass(frozen=True)
class Error:
    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class Result:
    """Success (optionally carrying a value) or failure carrying one Error."""

    __slots__ = ("_error", "_value")

    def __init__(self, value: Any = None, error: Error | None = None) -> None:
        if error is not None and value is not None:
            raise GuardError("A failed result cannot carry a value")
        self._value = value
        self._error = error

    # --- Factories ------------------------------------------------------------

    @classmethod
    def ok(cls, value: Any = None) -> Result:
        return cls(value=value)

    @classmethod
    def fail(cls, error: Error) -> Result:
        if not isinstance(error, Error):
            raise GuardError("A failed result requires an Error")
        return cls(error=error)

    # --- Accessors ------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> Any:
        if self._error is not None:
            raise GuardError(f"Cannot read the value of a failed result {self._error}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise GuardError("Cannot read the error of a successful result")
        return self._error

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Result.fail({self._error!r})"
        return f"Result.ok({self._value!r})"
