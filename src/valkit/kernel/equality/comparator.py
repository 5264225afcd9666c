"""Generic equality used by every container and collection helper."""

from __future__ import annotations

from typing import Any

from valkit.kernel.equality.protocol import Equatable


def equals(a: Any, b: Any) -> bool:
    """Return whether *a* equals *b*.

    * ``a`` is :class:`Equatable`: ``a.equals(b)`` when *b* is an instance of
      the operand type ``a`` declares, ``False`` otherwise.
    * Anything else: same object, or same exact type and ``a == b``.
      ``equals(1, 1.0)`` and ``equals(True, 1)`` are therefore ``False``.

    Never raises on a type mismatch.
    """
    if isinstance(a, Equatable):
        if not isinstance(b, a.equatable_operand()):
            return False
        return bool(a.equals(b))

    if a is b:
        return True
    return type(a) is type(b) and bool(a == b)


def payload_hash(value: Any) -> int:
    """Hash of a container payload that agrees with :func:`equals`.

    ``Equatable`` values may be equal without sharing ``__hash__``, so they
    all fall into one bucket. Other values use their own hash.
    """
    if isinstance(value, Equatable):
        return 0
    return hash(value)


__all__ = ["equals", "payload_hash"]
