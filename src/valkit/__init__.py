"""
valkit – Option and Result containers with structural equality.

Import path convention::

    from valkit import Some, Nothing, Ok, Err, some, none, ok, err
    from valkit.kernel.equality import Equatable, equals
    from valkit.kernel.collections import in_iterable, iterable_unique
"""

from valkit.kernel import (
    Equatable,
    Err,
    LogicError,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    UnwrapError,
    collection_equals,
    equals,
    err,
    in_iterable,
    iterable_search,
    iterable_unique,
    none,
    ok,
    some,
)

__version__ = "0.1.0"
__all__ = [
    "Equatable",
    "Err",
    "LogicError",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "__version__",
    "collection_equals",
    "equals",
    "err",
    "in_iterable",
    "iterable_search",
    "iterable_unique",
    "none",
    "ok",
    "some",
]
