from __future__ import annotations

from typing import Any, Optional


class GuildedError(RuntimeError):
    """Base class for every error raised by this package."""


class GuildedAPIError(GuildedError):
    """The HTTP call failed: network error, bad URL, or a non-2xx status."""

    def __init__(self, *, status_code: Optional[int], message: str, detail: Any | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (status {self.status_code})"


class GuildedDecodeError(GuildedError):
    """The response body was not JSON, or did not match the expected schema."""

    def __init__(self, message: str, *, payload: Any | None = None):
        super().__init__(message)
        self.payload = payload


class RequestAlreadySentError(GuildedError):
    pass


class InvalidTokenError(GuildedError, ValueError):
    pass


class IdentifierParseError(ValueError):
    def __init__(self, kind: str, text: str, reason: str):
        super().__init__(f"Invalid {kind}: {text!r} ({reason})")
        self.kind = kind
        self.text = text
