"""Logic errors — programmer misuse, never part of normal control flow.

Recoverable failures are values (``Err`` / ``Nothing``); the classes below
signal that calling code asked a container for something it cannot hold.
"""

from __future__ import annotations

from valkit.kernel.errors.base import BaseError


class LogicError(BaseError):
    """A contract of the API was broken by the caller."""

    code = "logic_error"


class UnwrapError(LogicError):
    """An accessor was called on the wrong variant of a container.

    ``variant`` is the lower-case name of the variant the accessor was
    called on (``"none"``, ``"ok"``, ``"err"``).
    """

    code = "unwrap_error"

    def __init__(self, variant: str, accessor: str) -> None:
        article = "an" if variant[:1] in "aeiou" else "a"
        super().__init__(
            f"Called {accessor}() on {article} {variant} value.",
            variant=variant,
            accessor=accessor,
        )
        self.variant = variant
        self.accessor = accessor


__all__ = ["LogicError", "UnwrapError"]
