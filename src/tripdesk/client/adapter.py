"""Text-returning adapter over the trips API.

The adapter is what an assistant planner calls. Each public operation makes
at most one HTTP request and always returns a string: the payload as
pretty-printed JSON, a session id, or a one-line failure message such as
``"GetTrips failed: Session is unauthorized or invalid."``. Nothing raises
past the public methods.

Internally every request goes through :meth:`TripsApiClient.request_session`
or :meth:`TripsApiClient.fetch`, which raise the typed errors from
:mod:`tripdesk.client.errors`; text rendering happens only at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
import requests

from tripdesk.client.errors import (
    AuthError,
    SerializationError,
    TransportError,
    UpstreamError,
    ValidationError,
    describe_failure,
)
from tripdesk.client.state import AdapterState, LoggedIn, LoggedOut
from tripdesk.logging import get_logger
from tripdesk.logging.logging import short_id
from tripdesk.models import Driver, LoginResponse, Trip, Vehicle

logger = get_logger(__name__)

SESSION_HEADER = "SessionId"
LOGIN_OPERATION = "Login"

_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = "5271"
_DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Listing:
    operation: str
    path: str
    records: TypeAdapter


LISTINGS: dict[str, Listing] = {
    "trips": Listing("GetTrips", "/trips", TypeAdapter(list[Trip])),
    "vehicles": Listing("GetVehicles", "/vehicles", TypeAdapter(list[Vehicle])),
    "drivers": Listing("GetDrivers", "/drivers", TypeAdapter(list[Driver])),
}


def _loopback_host(host: str) -> str:
    if host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return host


def default_base_url(value: str | None = None) -> str:
    """Resolve the API base URL from ``value``, ``TRIPDESK_API_URL`` or host/port env."""

    raw = (value or os.getenv("TRIPDESK_API_URL") or "").strip().rstrip("/")
    if raw:
        return raw

    host = (os.getenv("TRIPDESK_HOST") or "").strip() or _DEFAULT_HOST
    port = (os.getenv("TRIPDESK_PORT") or "").strip() or _DEFAULT_PORT
    return f"http://{_loopback_host(host)}:{port}"


def default_timeout(value: float | None = None) -> float:
    if value is not None:
        return max(0.1, float(value))
    raw = os.getenv("TRIPDESK_HTTP_TIMEOUT_SECONDS")
    if not raw:
        return _DEFAULT_TIMEOUT_SECONDS
    try:
        return max(0.1, float(raw))
    except ValueError:
        return _DEFAULT_TIMEOUT_SECONDS


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _summarize_validation(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


def render_records(rows: list[BaseModel]) -> str:
    """Serialize records as indented JSON text for the planner."""

    return json.dumps(
        [row.model_dump(mode="json") for row in rows],
        indent=2,
        ensure_ascii=False,
    )


class TripsApiClient:
    """Single-session client for the trips API.

    Parameters
    ----------
    base_url:
        API root, e.g. ``http://127.0.0.1:5271``. Defaults to
        :func:`default_base_url`.
    timeout:
        Per-request timeout in seconds (default ``TRIPDESK_HTTP_TIMEOUT_SECONDS``
        or 10).
    http:
        A ``requests.Session``-compatible object. One is created when omitted.

    One instance holds one session id. Construct several clients to work
    with several sessions at once.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        http: Any | None = None,
    ) -> None:
        self.base_url = default_base_url(base_url)
        self.timeout = default_timeout(timeout)
        self._owns_http = http is None
        self._http = http if http is not None else requests.Session()
        self.state: AdapterState = LoggedOut()

    @property
    def session_id(self) -> str | None:
        if isinstance(self.state, LoggedIn):
            return self.state.session_id
        return None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TripsApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Public, planner-facing operations. These never raise.

    def login(self, user_name: str) -> str:
        """Log in as ``user_name`` and return the new session id (or a failure line)."""

        try:
            return self.request_session(user_name)
        except Exception as exc:
            return self._failed(LOGIN_OPERATION, exc)

    def get_trips(self) -> str:
        """Return the current customer's trips as JSON text (or a failure line)."""

        return self._list("trips")

    def get_vehicles(self) -> str:
        """Return the current customer's vehicles as JSON text (or a failure line)."""

        return self._list("vehicles")

    def get_drivers(self) -> str:
        """Return the current customer's drivers as JSON text (or a failure line)."""

        return self._list("drivers")

    # Typed internals.

    def request_session(self, user_name: str) -> str:
        """POST ``/simple_login`` and cache the returned session id.

        Raises
        ------
        ValidationError
            The server rejected the input with ``400``.
        UpstreamError
            Any other non-success status (``403`` for unknown users).
        TransportError, SerializationError
            Network failure or a body without a usable ``sessionId``.
        """

        response = self._send("POST", "/simple_login", json={"userName": user_name})
        if not _is_success(response.status_code):
            error_cls = ValidationError if response.status_code == 400 else UpstreamError
            raise error_cls(
                f"login returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload = LoginResponse.model_validate(response.json())
        except PydanticValidationError as exc:
            raise SerializationError("Could not retrieve session ID.") from exc
        except ValueError as exc:
            raise SerializationError(str(exc)) from exc

        self.state = LoggedIn(payload.sessionId)
        logger.info("Logged in as %s (session %s)", user_name, short_id(payload.sessionId))
        return payload.sessionId

    def fetch(self, resource: str) -> list[BaseModel]:
        """GET one listing with the cached session and return validated records."""

        listing = LISTINGS[resource]
        session_id = self.session_id
        if not session_id:
            raise AuthError("no session")

        response = self._send("GET", listing.path, headers={SESSION_HEADER: session_id})
        if response.status_code == 401:
            raise AuthError(f"{listing.path} rejected session {short_id(session_id)}")
        if not _is_success(response.status_code):
            raise UpstreamError(
                f"{listing.path} returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return listing.records.validate_python(response.json())
        except PydanticValidationError as exc:
            raise SerializationError(_summarize_validation(exc)) from exc
        except ValueError as exc:
            raise SerializationError(str(exc)) from exc

    def _send(self, method: str, path: str, **kwargs: Any):
        url = self.base_url + path
        logger.debug("%s %s", method, url)
        try:
            return self._http.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

    def _list(self, resource: str) -> str:
        listing = LISTINGS[resource]
        try:
            rows = self.fetch(resource)
        except Exception as exc:
            return self._failed(listing.operation, exc)
        return render_records(rows)

    def _failed(self, operation: str, exc: Exception) -> str:
        message = describe_failure(operation, exc)
        logger.warning(message)
        return message


__all__ = ["TripsApiClient", "LISTINGS", "default_base_url", "default_timeout", "render_records"]
