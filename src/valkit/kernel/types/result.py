"""Result[T, E] — Ok and Err variants.

``Err`` carries any failure payload, not only exceptions: recoverable
failures are data and are never raised.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar, final

from valkit.kernel.equality import Equatable, comparator
from valkit.kernel.types._misuse import unwrap_failed
from valkit.kernel.types.option import Nothing, Option, Some

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


@final
class Ok(Equatable["Result[T, Any]"], Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def equals(self, other: Result[T, Any]) -> bool:
        return isinstance(other, Ok) and comparator.equals(self._value, other._value)

    def and_then(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self._value))

    def and_then_to(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self._value)

    def or_else(self, fn: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def or_else_to(self, fn: Callable[[Any], Result[T, R]]) -> Ok[T]:  # noqa: ARG002
        return self

    def map_or(self, default: U, ok_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return ok_fn(self._value)

    def map_or_else(self, err_fn: Callable[[Any], U], ok_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return ok_fn(self._value)

    def get(self) -> T:
        return self._value

    def get_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def get_or_else(self, fn: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self._value

    def get_err(self) -> NoReturn:
        raise unwrap_failed("ok", "get_err")

    def as_ok(self) -> Option[T]:
        return Some(self._value)

    def as_err(self) -> Option[Any]:
        return Nothing()

    def __eq__(self, other: object) -> bool:
        return comparator.equals(self, other)

    def __hash__(self) -> int:
        return hash((Ok, comparator.payload_hash(self._value)))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


@final
class Err(Equatable["Result[Any, E]"], Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def equals(self, other: Result[Any, E]) -> bool:
        return isinstance(other, Err) and comparator.equals(self._error, other._error)

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def and_then_to(self, fn: Callable[[Any], Result[Any, E]]) -> Err[E]:  # noqa: ARG002
        return self

    def or_else(self, fn: Callable[[E], R]) -> Err[R]:
        return Err(fn(self._error))

    def or_else_to(self, fn: Callable[[E], Result[T, R]]) -> Result[T, R]:
        return fn(self._error)

    def map_or(self, default: U, ok_fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else(self, err_fn: Callable[[E], U], ok_fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        return err_fn(self._error)

    def get(self) -> NoReturn:
        raise unwrap_failed("err", "get")

    def get_or(self, default: T) -> T:
        return default

    def get_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self._error)

    def get_err(self) -> E:
        return self._error

    def as_ok(self) -> Option[Any]:
        return Nothing()

    def as_err(self) -> Option[E]:
        return Some(self._error)

    def __eq__(self, other: object) -> bool:
        return comparator.equals(self, other)

    def __hash__(self) -> int:
        return hash((Err, comparator.payload_hash(self._error)))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
