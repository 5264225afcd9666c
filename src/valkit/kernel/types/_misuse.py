"""Shared failure path of the wrong-variant accessors."""

from __future__ import annotations

from valkit.config import ConfigError, get_settings
from valkit.kernel.errors import UnwrapError
from valkit.observability.logging import get_logger


def unwrap_failed(variant: str, accessor: str) -> UnwrapError:
    """Build the error for ``accessor()`` called on ``variant``, logging it first."""
    error = UnwrapError(variant, accessor)
    if _log_misuse():
        get_logger(__name__).error("valkit.unwrap_misuse", **error.context)
    return error


def _log_misuse() -> bool:
    try:
        return get_settings().log_misuse
    except ConfigError:
        # A malformed environment falls back to the default and never
        # replaces the UnwrapError.
        return True
