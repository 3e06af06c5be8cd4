"""
Optional-to-Result conversion with presence treated as failure.

``err_or`` and ``err_or_else`` turn an optional value into a ``Result`` where a
present value becomes ``Err(value)`` and absence becomes ``Ok``. They accept
either an explicit ``Option`` (``Some`` / ``Nothing``) or a plain Python
optional, where ``None`` is absence and any other object is a present value.

Architecture:
    ::

        Some(v) / v ───────> Err(v)
        Nothing / None ────> Ok(ok)          # err_or
        Nothing / None ────> Ok(ok_fn())     # err_or_else, ok_fn called once

Examples:
    Treating a found value as the failure case:

    >>> conflicts = {"alice": "taken"}
    >>> err_or(conflicts.get("bob"), "bob")
    Ok('bob')
    >>> err_or(conflicts.get("alice"), "alice")
    Err('taken')

    Deferring the success value:

    >>> err_or_else(None, lambda: 0)
    Ok(0)
    >>> err_or_else(Some("foo"), lambda: 0)
    Err('foo')

Performance:
    - **O(1)**: one branch on presence, no I/O, no logging
    - **Thread-safe:** no shared state; inputs are never mutated

Guardrails:
    ❌ DON'T: Pass an expensive call as ``ok`` to ``err_or``
    ✅ DO: Use ``err_or_else(opt, compute)`` so it only runs when needed

    ❌ DON'T: Pass ``None`` as a value you mean to be present
    ✅ DO: Wrap it: ``err_or(Some(None), ok)`` gives ``Err(None)``

Tags:
    result-constructor, optional-bridge, err-or
"""

from __future__ import annotations

from typing import Callable, TypeVar

from err_or.option import Option, to_option
from err_or.result import Result

T = TypeVar("T")
U = TypeVar("U")


def err_or(opt: Option[T] | T | None, ok: U) -> Result[U, T]:
    """
    Map a present value to ``Err(value)`` and absence to ``Ok(ok)``.

    ``ok`` is evaluated eagerly by the caller; when it comes from a function
    call, :func:`err_or_else` avoids computing it for present values.

    Args:
        opt: ``Some``/``Nothing``, or a plain optional where ``None`` is absent
        ok: Success value used when ``opt`` is absent

    Returns:
        ``Err(value)`` if ``opt`` is present, ``Ok(ok)`` otherwise
    """
    return to_option(opt).err_or(ok)


def err_or_else(opt: Option[T] | T | None, ok: Callable[[], U]) -> Result[U, T]:
    """
    Map a present value to ``Err(value)`` and absence to ``Ok(ok())``.

    ``ok`` is called exactly once, and only when ``opt`` is absent. Anything it
    raises propagates to the caller.

    Args:
        opt: ``Some``/``Nothing``, or a plain optional where ``None`` is absent
        ok: Zero-argument callable producing the success value

    Returns:
        ``Err(value)`` if ``opt`` is present, ``Ok(ok())`` otherwise
    """
    return to_option(opt).err_or_else(ok)


__all__ = ["err_or", "err_or_else"]
