from __future__ import annotations

from typing import Literal

ApiErrorKind = Literal["invalid_url", "request_failed", "decoding_failed", "unauthorized", "server_error"]

_MESSAGES: dict[str, str] = {
    "invalid_url": "Invalid URL",
    "request_failed": "Request failed. Please try again.",
    "decoding_failed": "Failed to process server response",
    "unauthorized": "Unauthorized access",
}


class ApiError(RuntimeError):
    """
    Transport-level failure talking to the payment backend.

    `str(err)` is safe to show to the user; `detail` keeps the technical
    reason for logs.
    """

    def __init__(self, kind: ApiErrorKind, detail: str | None = None, message: str | None = None):
        self.kind = kind
        self.detail = detail
        super().__init__(message or _MESSAGES.get(kind) or detail or kind)
