"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

_BODY_EXCERPT_LIMIT = 220


class KlipyError(Exception):
    """Base class for failures that should be reported to the user."""


class KlipyConfigError(KlipyError):
    """Raised when the preferences cannot support a request (e.g. no API key)."""


class KlipyHTTPError(KlipyError):
    """Raised when the Klipy API returns a non-2xx response or an unreadable body."""

    def __init__(
        self,
        status: int,
        body: str = "",
        response: httpx.Response | None = None,
        *,
        reason: str = "request failed",
    ) -> None:
        self.status = status
        self.body = body[:_BODY_EXCERPT_LIMIT]
        self.response = response
        super().__init__(f"Klipy API {reason} ({status}): {self.body}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> KlipyHTTPError:
        """Build from an httpx response, keeping a short excerpt of the body."""
        try:
            body = response.text
        except UnicodeDecodeError:
            body = ""
        return cls(status=response.status_code, body=body, response=response)


class KlipyNetworkError(KlipyError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class KlipyCommandError(KlipyError):
    """Raised when a single-shot command has nothing usable to act on."""


class KlipyCancelledError(Exception):
    """Raised when a request is aborted through its cancellation token.

    Not a :class:`KlipyError`: a cancelled request produced no result and
    no failure, so callers drop it silently.
    """

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message)
