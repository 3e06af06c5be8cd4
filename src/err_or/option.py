"""
Optional values with the inverted-result conversions attached.

Python's own optional is ``T | None``, which cannot say "present, and the value
is None". ``Some`` / ``Nothing`` make presence explicit, and carry ``err_or`` /
``err_or_else`` as methods so a conversion reads left to right:

    Some(v)  ──err_or(ok)──────>  Err(v)
    Nothing  ──err_or(ok)──────>  Ok(ok)
    Nothing  ──err_or_else(f)──>  Ok(f())      # f called exactly once

The conventional direction is available too as ``ok_or`` / ``ok_or_else``.

Examples:
    >>> Some("foo").err_or(0)
    Err('foo')
    >>> NOTHING.err_or(0)
    Ok(0)
    >>> NOTHING.err_or_else(lambda: 0)
    Ok(0)
    >>> to_option(None)
    Nothing()

Tags:
    option, maybe, result-pattern, err-or
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from err_or.errors import UnwrapError
from err_or.logging import get_logger
from err_or.result import Err, Ok

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present optional value. ``value`` may itself be ``None``."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def err_or(self, ok: U) -> Err[T]:
        """Present maps to failure: ``Err(value)``. ``ok`` is ignored."""
        return Err(self.value)

    def err_or_else(self, ok: Callable[[], U]) -> Err[T]:
        """Present maps to failure: ``Err(value)``. ``ok`` is never called."""
        return Err(self.value)

    def ok_or(self, err: E) -> Ok[T]:
        return Ok(self.value)

    def ok_or_else(self, err: Callable[[], E]) -> Ok[T]:
        return Ok(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent optional value. All instances compare equal."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Any:
        logger.debug("unwrap_failed", operation="unwrap", variant="Nothing")
        raise UnwrapError("called unwrap() on Nothing").with_context(
            operation="unwrap", variant="Nothing"
        )

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def err_or(self, ok: U) -> Ok[U]:
        """
        Absent maps to success: ``Ok(ok)``.

        ``ok`` was evaluated by the caller whether or not it is needed; if it is
        the result of a function call, prefer :meth:`err_or_else`.
        """
        return Ok(ok)

    def err_or_else(self, ok: Callable[[], U]) -> Ok[U]:
        """Absent maps to success: call ``ok()`` once and wrap it in ``Ok``."""
        return Ok(ok())

    def ok_or(self, err: E) -> Err[E]:
        return Err(err)

    def ok_or_else(self, err: Callable[[], E]) -> Err[E]:
        return Err(err())

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING = Nothing()

Option = Some[T] | Nothing


def to_option(value: Option[T] | T | None) -> Option[T]:
    """
    Normalize a plain Python optional into an ``Option``.

    ``Some`` and ``Nothing`` pass through unchanged, ``None`` becomes
    ``NOTHING`` and any other object becomes ``Some(value)``.
    """
    match value:
        case Some() | Nothing():
            return value
        case None:
            return NOTHING
        case _:
            return Some(value)


__all__ = ["Option", "Some", "Nothing", "NOTHING", "to_option"]
