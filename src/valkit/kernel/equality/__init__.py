"""Equality protocol — :class:`Equatable` and the generic :func:`equals`."""

from valkit.kernel.equality.comparator import equals, payload_hash
from valkit.kernel.equality.protocol import Equatable

__all__ = ["Equatable", "equals", "payload_hash"]
