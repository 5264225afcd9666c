"""Equatable — opt-in structural equality against a declared operand type."""

from __future__ import annotations

import abc
import functools
import inspect
import types
import typing
from typing import Any, ClassVar, Generic, TypeAliasType, TypeVar

T = TypeVar("T")


class Equatable(abc.ABC, Generic[T]):
    """Capability: "I know how to compare myself against a ``T``".

    Implement :meth:`equals` and annotate its operand; the annotation is the
    type :func:`~valkit.kernel.equality.equals` tests the right-hand value
    against before the call, so ``equals`` only ever receives a ``T``.

    Example::

        class Money(Equatable["Money"]):
            def __init__(self, cents: int) -> None:
                self.cents = cents

            def equals(self, other: Money) -> bool:
                return self.cents == other.cents

    Set ``equatable_type`` to pin the operand type when the annotation is
    not expressive enough.
    """

    __slots__ = ()

    equatable_type: ClassVar[Any] = None

    @abc.abstractmethod
    def equals(self, other: T) -> bool: ...

    @classmethod
    def equatable_operand(cls) -> tuple[type, ...]:
        """Types accepted by :meth:`equals` (``(object,)`` accepts anything)."""
        return _operand_types(cls)


@functools.cache
def _operand_types(cls: type) -> tuple[type, ...]:
    if cls.equatable_type is not None:  # type: ignore[attr-defined]
        return _flatten(cls.equatable_type, cls)  # type: ignore[attr-defined]

    method = cls.equals  # type: ignore[attr-defined]
    params = list(inspect.signature(method).parameters.values())
    if len(params) < 2:
        return (object,)
    operand = params[1].name
    try:
        hints = typing.get_type_hints(method, localns={cls.__name__: cls})
    except (NameError, TypeError):
        # Unresolvable annotation: only instances of the class itself qualify.
        return (cls,)
    if operand not in hints:
        return (object,)
    return _flatten(hints[operand], cls)


def _flatten(hint: Any, owner: type) -> tuple[type, ...]:  # noqa: PLR0911
    if hint is Any or hint is object:
        return (object,)
    if hint is typing.Self:
        return (owner,)
    if hint is None or hint is types.NoneType:
        return (types.NoneType,)
    if isinstance(hint, TypeAliasType):
        return _flatten(hint.__value__, owner)
    if isinstance(hint, TypeVar):
        return _flatten(hint.__bound__, owner) if hint.__bound__ is not None else (object,)

    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        return tuple(t for arg in typing.get_args(hint) for t in _flatten(arg, owner))
    if origin is typing.Literal:
        return tuple(dict.fromkeys(type(arg) for arg in typing.get_args(hint)))
    if origin is not None:
        return _flatten(origin, owner)
    if isinstance(hint, type):
        if getattr(hint, "_is_protocol", False) and not getattr(hint, "_is_runtime_protocol", False):
            return (object,)
        return (hint,)
    return (object,)


__all__ = ["Equatable"]
