"""
Structured error types for err-or.

The conversion functions themselves never raise: turning a present value into
``Err`` is a relabeling, not a failure. The container types around them can
still be misused (unwrapping the wrong variant, bad logging configuration), and
those cases raise an ``ErrOrError`` subclass carrying a category and context.

Manifesto:
    - **Typed hierarchy:** Misuse and configuration problems are distinct types
    - **Rich context:** Errors carry the operation and variant involved
    - **Error chaining:** Original exceptions are preserved as ``cause``

Architecture:
    ::

        ┌───────────────────────────────────────────┐
        │                ErrOrError                  │
        │   (category, context, cause)               │
        ├─────────────────────┬─────────────────────┤
        │    UnwrapError      │    ConfigError       │
        │    (USAGE)          │    (CONFIG)          │
        │    payload          │                      │
        └─────────────────────┴─────────────────────┘

Examples:
    >>> error = UnwrapError("called unwrap() on Nothing", payload=None)
    >>> error.category
    <ErrorCategory.USAGE: 'USAGE'>
    >>> error.with_context(operation="unwrap", variant="Nothing").context.variant
    'Nothing'

Tags:
    error-handling, exception-hierarchy, error-context, err-or
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    USAGE = "USAGE"          # Wrong variant unwrapped, bad call sequence
    CONFIG = "CONFIG"        # Invalid settings
    INTERNAL = "INTERNAL"    # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an ``ErrOrError``.

    Attributes:
        operation: Method that failed (e.g. ``"unwrap"``)
        variant: Container variant it was called on (e.g. ``"Err"``)
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    variant: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "variant"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class ErrOrError(Exception):
    """
    Base exception for all err-or errors.

    Subclasses set ``default_category`` so callers only pass a message.

    Examples:
        >>> error = ErrOrError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["message"]
        'Something went wrong'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> ErrOrError:
        """
        Add context to this error (fluent API).

        Usage:
            raise UnwrapError("bad unwrap", payload=v).with_context(
                operation="unwrap",
                variant="Err",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logging."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context = self.context.to_dict()
        if context:
            result["context"] = context
        if self.cause is not None:
            result["cause"] = repr(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class UnwrapError(ErrOrError):
    """Raised when a container is unwrapped as the variant it is not.

    ``payload`` holds whatever the container did carry, so the caller can still
    inspect it after catching.
    """

    default_category = ErrorCategory.USAGE

    def __init__(self, message: str, *, payload: Any = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.payload = payload

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["payload"] = repr(self.payload)
        return result


class ConfigError(ErrOrError):
    """Invalid logging or settings configuration."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "ErrOrError",
    "UnwrapError",
    "ConfigError",
]
