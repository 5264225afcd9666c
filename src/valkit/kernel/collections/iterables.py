"""Iterable helpers built on :func:`~valkit.kernel.equality.equals`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Generic, TypeVar, overload

from valkit.kernel.equality import equals
from valkit.kernel.types.option import Nothing, Option, Some

K = TypeVar("K")
T = TypeVar("T")


def in_iterable(value: Any, iterable: Iterable[Any]) -> bool:
    """Return ``True`` if any element of *iterable* equals *value*."""
    return any(equals(value, item) for item in iterable)


class _UniqueIterable(Generic[T]):
    """Lazy de-duplicating view; each iteration rescans the source."""

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[T]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[Any]:
        seen: list[Any] = []
        if isinstance(self._source, Mapping):
            for key, value in self._source.items():
                if not in_iterable(value, seen):
                    seen.append(value)
                    yield key, value
            return
        for item in self._source:
            if not in_iterable(item, seen):
                seen.append(item)
                yield item

    def __repr__(self) -> str:
        return f"iterable_unique({self._source!r})"


@overload
def iterable_unique(iterable: Mapping[K, T]) -> Iterable[tuple[K, T]]: ...


@overload
def iterable_unique(iterable: Iterable[T]) -> Iterable[T]: ...


def iterable_unique(iterable: Iterable[Any]) -> Iterable[Any]:
    """Return *iterable* without later duplicates, preserving order.

    Nothing is consumed until the result is iterated. Iterating it again
    restarts from the source, so a list can be walked any number of times
    while a generator yields its unique values once.

    A mapping is de-duplicated by value and yields ``(key, value)`` pairs,
    keeping the first key seen for each value.
    """
    return _UniqueIterable(iterable)


def iterable_search(value: Any, iterable: Iterable[Any] | Mapping[Any, Any]) -> Option[Any]:
    """Return the first key whose value equals *value*.

    Mappings are searched by key; any other iterable by position.
    ``Nothing()`` when absent, so ``0`` and ``""`` remain valid keys.
    """
    pairs: Iterable[tuple[Any, Any]] = (
        iterable.items() if isinstance(iterable, Mapping) else enumerate(iterable)
    )
    for key, item in pairs:
        if equals(value, item):
            return Some(key)
    return Nothing()


def collection_equals(
    a: Mapping[Any, Any] | Sequence[Any],
    b: Mapping[Any, Any] | Sequence[Any],
) -> bool:
    """Return ``True`` if *a* and *b* hold the same keys with equal values.

    Sequences are keyed by position; key order of mappings is irrelevant.
    Values are compared with ``equals(a[key], b[key])``.
    """
    left = _keyed(a)
    right = _keyed(b)
    if len(left) != len(right):
        return False
    return all(key in right and equals(value, right[key]) for key, value in left.items())


def _keyed(collection: Mapping[Any, Any] | Sequence[Any]) -> Mapping[Any, Any]:
    if isinstance(collection, Mapping):
        return collection
    return dict(enumerate(collection))


__all__ = ["collection_equals", "in_iterable", "iterable_search", "iterable_unique"]
