"""
Result values produced by the optional-to-result conversion.

A ``Result[T, E]`` is either ``Ok[T]`` (success) or ``Err[E]`` (failure). The
failure payload is whatever the converted optional held, so unlike an
exception-only result type ``Err`` accepts any object.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                    Result[T, E]                              │
        │                    (Type Alias)                              │
        ├─────────────────────────────┬───────────────────────────────┤
        │          Ok[T]              │           Err[E]              │
        │        (Success)            │         (Failure)             │
        ├─────────────────────────────┼───────────────────────────────┤
        │ • value: T                  │ • error: E                    │
        │ • map() / and_then()        │ • map_err() / or_else()       │
        │ • unwrap()                  │ • unwrap_err()                │
        └─────────────────────────────┴───────────────────────────────┘

Examples:
    Pattern matching on the outcome:

    >>> from err_or.result import Ok, Err
    >>> def describe(result):
    ...     match result:
    ...         case Ok(value):
    ...             return f"ok: {value}"
    ...         case Err(error):
    ...             return f"err: {error}"
    >>> describe(Ok(0))
    'ok: 0'
    >>> describe(Err("foo"))
    'err: foo'

    Chaining:

    >>> Ok(10).map(lambda x: x * 2).unwrap()
    20
    >>> Err("missing").map(lambda x: x * 2).unwrap_or(0)
    0

Guardrails:
    ❌ DON'T: Call unwrap() on a result you haven't checked
    ✅ DO: Use unwrap_or() or pattern matching for safe extraction

Tags:
    result-pattern, functional-programming, err-or
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from err_or.errors import UnwrapError
from err_or.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Successful result containing a value.

    Examples:
        >>> ok = Ok(42)
        >>> ok.is_ok(), ok.is_err()
        (True, False)
        >>> ok.unwrap()
        42
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_err(self) -> Any:
        """Raise UnwrapError; an Ok has no error."""
        logger.debug("unwrap_failed", operation="unwrap_err", variant="Ok")
        raise UnwrapError(
            f"called unwrap_err() on Ok({self.value!r})", payload=self.value
        ).with_context(operation="unwrap_err", variant="Ok")

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Ok)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Get value or call f with error (always returns value for Ok)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        """Transform error if Err (no-op for Ok)."""
        return self

    def and_then(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Result[T, Any]]) -> Ok[T]:
        """Return self; recovery only applies to Err."""
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """
    Failed result containing an error payload.

    The payload is not required to be an exception. When it is one,
    ``unwrap()`` raises it directly; otherwise ``unwrap()`` raises
    ``UnwrapError`` with the payload attached.

    Examples:
        >>> err = Err("foo")
        >>> err.is_err()
        True
        >>> err.unwrap_err()
        'foo'
        >>> err.unwrap_or("default")
        'default'
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the error, or UnwrapError if the payload is not an exception."""
        logger.debug("unwrap_failed", operation="unwrap", variant="Err")
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(
            f"called unwrap() on Err({self.error!r})", payload=self.error
        ).with_context(operation="unwrap", variant="Err")

    def unwrap_err(self) -> E:
        """Get the error payload. Safe for Err."""
        return self.error

    def unwrap_or(self, default: U) -> U:
        """Get default since this is Err."""
        return default

    def unwrap_or_else(self, f: Callable[[E], U]) -> U:
        """Call f with the error to get a value."""
        return f(self.error)

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        """No-op for Err."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        """No-op for Err."""
        return self

    def or_else(self, f: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """Call f with the error to try recovery."""
        return f(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, BaseException):
            return {
                "ok": False,
                "error": {
                    "error_type": type(self.error).__name__,
                    "message": str(self.error),
                },
            }
        return {"ok": False, "error": self.error}

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[E]


__all__ = ["Result", "Ok", "Err"]
