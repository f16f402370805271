"""Root error class for the listquery error hierarchy.

Every error raised by the engine carries the three things a transport layer
needs to answer a list request without inspecting the exception type: a
stable ``code`` slug, the HTTP ``status_code`` class it belongs to, and a
serialisable ``detail`` mapping naming the offending input.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description, safe to show to API clients.
        code: Machine-readable slug, defaults to the class ``default_code``.
        detail: Offending field, value or token (must be JSON-serialisable).
    """

    default_code: ClassVar[str] = "listquery_error"
    status_code: ClassVar[int] = 500

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, status={self.status_code})"

    def to_dict(self) -> dict[str, Any]:
        """Error body as sent to API clients and written to logs."""
        return {"code": self.code, "message": self.message, "detail": self.detail}

    def to_response(self) -> tuple[int, dict[str, Any]]:
        """``(status, body)`` pair for a transport adapter.

        Server-side errors hide their detail; it names schema internals the
        caller has no use for.
        """
        body = self.to_dict()
        if not self.is_client_error:
            body["detail"] = {}
        return self.status_code, {"error": body}


__all__ = ["BaseError"]
