"""Collection helpers — membership, de-duplication, search and equality."""

from valkit.kernel.collections.iterables import (
    collection_equals,
    in_iterable,
    iterable_search,
    iterable_unique,
)

__all__ = ["collection_equals", "in_iterable", "iterable_search", "iterable_unique"]
