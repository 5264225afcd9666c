"""Kernel – equality protocol, containers, collection helpers, errors."""

from valkit.kernel.collections import (
    collection_equals,
    in_iterable,
    iterable_search,
    iterable_unique,
)
from valkit.kernel.equality import Equatable, equals
from valkit.kernel.errors import BaseError, LogicError, UnwrapError
from valkit.kernel.types import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    err,
    none,
    ok,
    some,
)

__all__ = [
    "BaseError",
    "Equatable",
    "Err",
    "LogicError",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
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
