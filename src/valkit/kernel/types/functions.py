"""Short-hand constructors, synonymous with the variant classes."""

from __future__ import annotations

from typing import Any, TypeVar

from valkit.kernel.types.option import Nothing, Option, Some
from valkit.kernel.types.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


def some(value: T) -> Option[T]:
    """Option with some value, same as ``Some(value)``."""
    return Some(value)


def none() -> Option[Any]:
    """Option with no value, same as ``Nothing()``."""
    return Nothing()


def ok(value: T = None) -> Result[T, Any]:  # type: ignore[assignment]
    """Result with an ok value, same as ``Ok(value)``."""
    return Ok(value)


def err(error: E = None) -> Result[Any, E]:  # type: ignore[assignment]
    """Result with an error value, same as ``Err(error)``."""
    return Err(error)


__all__ = ["err", "none", "ok", "some"]
