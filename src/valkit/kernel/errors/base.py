"""Root of the valkit error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every error valkit raises.

    Keyword arguments become ``context``: the structured facts about the
    failure, such as the variant an accessor was called on or the
    ``VALKIT_*`` key that failed to parse. They are rendered by
    :meth:`to_dict` and bound onto log events as is.
    """

    code: ClassVar[str] = "valkit_error"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.context}


__all__ = ["BaseError"]
