"""Option[T] — Some and Nothing variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, NoReturn, TypeVar, final

from valkit.kernel.equality import Equatable, comparator
from valkit.kernel.types._misuse import unwrap_failed

if TYPE_CHECKING:
    from valkit.kernel.types.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
class Some(Equatable["Option[T]"], Generic[T]):
    """Option with a value.

    Any value is wrapped as is, ``None`` and ``Nothing()`` included.
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def equals(self, other: Option[T]) -> bool:
        return isinstance(other, Some) and comparator.equals(self._value, other._value)

    def and_then(self, fn: Callable[[T], U]) -> Some[U]:
        return Some(fn(self._value))

    def and_then_to(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self._value)

    def or_else_to(self, fn: Callable[[], Option[T]]) -> Some[T]:  # noqa: ARG002
        return self

    def map_or(self, default: U, some_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return some_fn(self._value)

    def map_or_else(self, none_fn: Callable[[], U], some_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return some_fn(self._value)

    def get(self) -> T:
        return self._value

    def get_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def get_or_none(self) -> T | None:
        return self._value

    def get_or_else(self, fn: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def as_ok_or(self, err: E) -> Result[T, E]:  # noqa: ARG002
        from valkit.kernel.types.result import Ok

        return Ok(self._value)

    def __eq__(self, other: object) -> bool:
        return comparator.equals(self, other)

    def __hash__(self) -> int:
        return hash((Some, comparator.payload_hash(self._value)))

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing(Equatable["Option[T]"], Generic[T]):
    """Empty option. All instances are interchangeable."""

    __slots__ = ()
    __match_args__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def equals(self, other: Option[T]) -> bool:
        return isinstance(other, Nothing)

    def and_then(self, fn: Callable[[T], Any]) -> Nothing[Any]:  # noqa: ARG002
        return self

    def and_then_to(self, fn: Callable[[T], Option[U]]) -> Nothing[U]:  # noqa: ARG002
        return self  # type: ignore[return-value]

    def or_else_to(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return fn()

    def map_or(self, default: U, some_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else(self, none_fn: Callable[[], U], some_fn: Callable[[T], U]) -> U:  # noqa: ARG002
        return none_fn()

    def get(self) -> NoReturn:
        raise unwrap_failed("none", "get")

    def get_or(self, default: T) -> T:
        return default

    def get_or_none(self) -> None:
        return None

    def get_or_else(self, fn: Callable[[], T]) -> T:
        return fn()

    def as_ok_or(self, err: E) -> Result[T, E]:
        from valkit.kernel.types.result import Err

        return Err(err)

    def __eq__(self, other: object) -> bool:
        return comparator.equals(self, other)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

__all__ = ["Nothing", "Option", "Some"]
