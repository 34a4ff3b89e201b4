"""BaseError – common root of every saga_storage error.

Storage failures are reported to the dispatching engine and written to the
structured log, so each error carries a stable ``code`` and a
JSON-friendly ``detail`` mapping next to its message.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the saga_storage error hierarchy.

    Subclasses set ``default_code``; ``detail`` holds ids, revisions and
    property names for log events such as ``saga_write_rejected``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail``, plus ``cause`` when chained."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
