"""Exception hierarchy used inside the client adapter.

These never leave :class:`tripdesk.client.adapter.TripsApiClient`; its
public operations render them to text with :func:`describe_failure`.
"""

from __future__ import annotations


class TripsApiError(Exception):
    """Base exception for all client-side failures."""


class AuthError(TripsApiError):
    """No session, or the server rejected the session id."""


class TransportError(TripsApiError):
    """Network-level failure: connection refused, timeout, bad URL."""


class SerializationError(TripsApiError):
    """Response body is not the JSON shape the operation expects."""


class UpstreamError(TripsApiError):
    """Any other non-success status; carries the raw body verbatim."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ValidationError(UpstreamError):
    """Required input missing; the server answered ``400``."""


SESSION_INVALID_MESSAGE = "Session is unauthorized or invalid."


def describe_failure(operation: str, exc: BaseException) -> str:
    """Render ``exc`` as the one-line failure text for ``operation``."""

    return " ".join(_describe(operation, exc).splitlines())


def _describe(operation: str, exc: BaseException) -> str:
    if isinstance(exc, AuthError):
        return f"{operation} failed: {SESSION_INVALID_MESSAGE}"
    if isinstance(exc, UpstreamError):
        return f"{operation} failed: API returned status code {exc.status_code} - {exc.body}"
    if isinstance(exc, TransportError):
        return f"{operation} failed: HTTP request error - {exc}"
    if isinstance(exc, SerializationError):
        return f"{operation} failed: JSON deserialization error - {exc}"
    return f"{operation} failed: An unexpected error occurred - {exc}"


__all__ = [
    "TripsApiError",
    "ValidationError",
    "AuthError",
    "TransportError",
    "SerializationError",
    "UpstreamError",
    "SESSION_INVALID_MESSAGE",
    "describe_failure",
]
